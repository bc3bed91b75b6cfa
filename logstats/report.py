from dataclasses import dataclass
from typing import Dict, List

from .ranking import Comparator, by_count_desc, top_messages
from .store import Aggregator
from .types import RankedMessage


# ---------- Output Model ----------

@dataclass(frozen=True)
class AggregateReport:
    total: int
    levels: Dict[str, int]
    top_messages: List[RankedMessage]
    top_k: int


def build_report(
    aggregator: Aggregator,
    k: int = 3,
    compare: Comparator = by_count_desc,
) -> AggregateReport:
    """
    Derive the final report from the aggregator's tables.

    Must be called once, after every input has been ingested.
    Levels are sorted by name so the output does not depend on input order.
    """
    levels, messages = aggregator.snapshot()

    return AggregateReport(
        total=levels.total(),
        levels=dict(sorted(levels.items())),
        top_messages=top_messages(messages, k, compare),
        top_k=k,
    )


# ---------- Rendering ----------

def render_report(report: AggregateReport) -> str:
    lines = [
        f"Total log entries: {report.total}",
        "",
        "Log level distribution:",
    ]
    for level, count in report.levels.items():
        lines.append(f"{level}: {count}")

    lines.append("")
    lines.append(f"Top {report.top_k} most frequent log messages:")
    for rank, ranked in enumerate(report.top_messages, 1):
        lines.append(f"{rank}. {ranked.message}: {ranked.count}")

    return "\n".join(lines)
