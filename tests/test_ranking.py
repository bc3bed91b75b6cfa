import pytest

from logstats.ranking import (
    TIE_BREAKS,
    by_count_desc,
    by_count_then_message,
    top_k,
    top_messages,
)
from logstats.store import FrequencyTable
from logstats.types import RankedMessage


def make_table(*keys):
    table = FrequencyTable()
    for key in keys:
        table.increment(key)
    return table


def test_empty_table_gives_empty_ranking():
    assert top_messages(FrequencyTable()) == []


def test_single_message():
    assert top_messages(make_table("ok", "ok")) == [RankedMessage("ok", 2)]


def test_returns_k_highest():
    table = make_table("a", "b", "b", "c", "c", "c", "d", "d", "d", "d", "e")

    ranked = top_messages(table, k=3)

    assert [r.message for r in ranked] == ["d", "c", "b"]
    lowest_kept = min(r.count for r in ranked)
    kept = {r.message for r in ranked}
    assert all(count <= lowest_kept for key, count in table.items() if key not in kept)


def test_ties_keep_first_seen_order():
    table = make_table("zeta", "alpha", "mid", "mid")

    ranked = top_messages(table, k=3, compare=by_count_desc)

    assert ranked == [
        RankedMessage("mid", 2),
        RankedMessage("zeta", 1),
        RankedMessage("alpha", 1),
    ]


def test_ties_by_message_text():
    table = make_table("zeta", "alpha", "mid", "mid")

    ranked = top_messages(table, k=3, compare=by_count_then_message)

    assert [r.message for r in ranked] == ["mid", "alpha", "zeta"]


def test_tie_break_registry():
    assert TIE_BREAKS["first-seen"] is by_count_desc
    assert TIE_BREAKS["message"] is by_count_then_message


def test_generic_top_k_on_plain_values():
    assert top_k([3, 1, 2], 2, lambda a, b: b - a) == [3, 2]
    assert top_k([3, 1, 2], 0, lambda a, b: b - a) == []
    assert top_k([], 5, lambda a, b: b - a) == []


def test_negative_k_is_rejected():
    with pytest.raises(ValueError):
        top_k([1], -1, lambda a, b: 0)
