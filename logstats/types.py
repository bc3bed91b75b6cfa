from dataclasses import dataclass


@dataclass(frozen=True)
class LogEntry:
    """
    Canonical parsed log line consumed by the aggregator.

    Only the level and the message body survive parsing; the leading
    field (usually a timestamp) is dropped.
    """
    level: str
    message: str


@dataclass(frozen=True)
class ParseFailure:
    raw: str
    reason: str


@dataclass(frozen=True)
class RankedMessage:
    message: str
    count: int
