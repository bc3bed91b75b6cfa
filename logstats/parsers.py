from typing import Union

from .types import LogEntry, ParseFailure


# -----------------------------
# SPACE-DELIMITED TEXT PARSER
# -----------------------------

FIELD_SEPARATOR = " "
FIELD_COUNT = 3


def parse_line(line: str) -> Union[LogEntry, ParseFailure]:
    """
    Parse logs like:
      2024-01-01 ERROR disk full

    The line is split on single spaces into at most three fields:
    <ignored> <level> <message>. The message keeps any further spaces
    verbatim, so runs of spaces are NOT collapsed.

    This function must be:
    - deterministic
    - side-effect free

    It should NEVER throw. Malformed lines come back as ParseFailure.
    """
    parts = line.split(FIELD_SEPARATOR, FIELD_COUNT - 1)

    if len(parts) != FIELD_COUNT:
        return ParseFailure(
            raw=line,
            reason=f"This line cannot be a log entry ==> [{line}]",
        )

    _, level, message = parts
    return LogEntry(level=level, message=message)
