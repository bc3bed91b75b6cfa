from .types import LogEntry, ParseFailure, RankedMessage
from .parsers import parse_line
from .store import Aggregator, FrequencyTable
from .ranking import top_k, top_messages

__all__ = [
    "LogEntry",
    "ParseFailure",
    "RankedMessage",
    "parse_line",
    "Aggregator",
    "FrequencyTable",
    "top_k",
    "top_messages",
]
