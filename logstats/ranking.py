from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, TypeVar

from .store import FrequencyTable
from .types import RankedMessage


T = TypeVar("T")

Comparator = Callable[[RankedMessage, RankedMessage], int]


# ---------- Tie-break policies ----------

def by_count_desc(a: RankedMessage, b: RankedMessage) -> int:
    """
    Higher count first.

    Equal counts compare as equal, so the stable sort in top_k keeps
    them in first-seen order.
    """
    return b.count - a.count


def by_count_then_message(a: RankedMessage, b: RankedMessage) -> int:
    """Higher count first, then message in ascending string order."""
    if a.count != b.count:
        return b.count - a.count
    if a.message < b.message:
        return -1
    if a.message > b.message:
        return 1
    return 0


TIE_BREAKS: Dict[str, Comparator] = {
    "first-seen": by_count_desc,
    "message": by_count_then_message,
}

DEFAULT_TIE_BREAK = "first-seen"


# ---------- Selection ----------

def top_k(
    items: Iterable[T],
    k: int,
    compare: Callable[[T, T], int],
) -> List[T]:
    """
    Return the first k items under `compare`.

    The sort is stable: items that compare equal keep their input order.
    Returns fewer than k items when the input is shorter.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0:
        return []

    ranked = sorted(items, key=cmp_to_key(compare))
    return ranked[:k]


def top_messages(
    table: FrequencyTable,
    k: int = 3,
    compare: Comparator = by_count_desc,
) -> List[RankedMessage]:
    candidates = (
        RankedMessage(message=message, count=count)
        for message, count in table.items()
    )
    return top_k(candidates, k, compare)
