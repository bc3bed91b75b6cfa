from logstats.ranking import by_count_then_message
from logstats.report import AggregateReport, build_report, render_report
from logstats.store import Aggregator
from logstats.types import LogEntry, RankedMessage


def aggregate(*pairs):
    agg = Aggregator()
    for level, message in pairs:
        agg.observe(LogEntry(level, message))
    return agg


def test_build_report_sorts_levels():
    agg = aggregate(("WARN", "w"), ("ERROR", "e"), ("INFO", "i"), ("ERROR", "e"))

    report = build_report(agg)

    assert report.total == 4
    assert list(report.levels.items()) == [("ERROR", 2), ("INFO", 1), ("WARN", 1)]
    assert report.top_messages[0] == RankedMessage("e", 2)
    assert report.top_k == 3


def test_build_report_uses_comparator():
    agg = aggregate(("INFO", "b"), ("INFO", "a"))

    report = build_report(agg, k=1, compare=by_count_then_message)

    assert report.top_messages == [RankedMessage("a", 1)]


def test_render_full_report():
    report = AggregateReport(
        total=3,
        levels={"ERROR": 2, "INFO": 1},
        top_messages=[RankedMessage("disk full", 2), RankedMessage("ok", 1)],
        top_k=3,
    )

    assert render_report(report) == "\n".join([
        "Total log entries: 3",
        "",
        "Log level distribution:",
        "ERROR: 2",
        "INFO: 1",
        "",
        "Top 3 most frequent log messages:",
        "1. disk full: 2",
        "2. ok: 1",
    ])


def test_render_empty_report():
    report = build_report(Aggregator())

    assert render_report(report) == "\n".join([
        "Total log entries: 0",
        "",
        "Log level distribution:",
        "",
        "Top 3 most frequent log messages:",
    ])
