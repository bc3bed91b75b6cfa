from enum import Enum, auto
from pathlib import Path
from typing import Union


class Compression(Enum):
    """
    How a log file is stored on disk.

    Decided from the file name only, never from the content.
    """
    PLAIN = auto()
    GZIP = auto()


GZIP_SUFFIX = ".gz"


def detect_compression(path: Union[str, Path]) -> Compression:
    """
    Detect the compression of a log file from its name.

    A file is gzip-compressed iff its name ends with ".gz" (case-sensitive).
    """
    if str(path).endswith(GZIP_SUFFIX):
        return Compression.GZIP
    return Compression.PLAIN
