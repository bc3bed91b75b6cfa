import codecs
import gzip
import logging
import sys
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, TextIO, Union

from .detect import Compression, detect_compression
from .parsers import parse_line
from .store import Aggregator
from .types import ParseFailure


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
WarningSink = Callable[[str], None]

# Errors that make a whole file unusable. gzip.BadGzipFile is an OSError;
# a truncated gzip stream surfaces as EOFError, damaged deflate data as
# zlib.error. An unknown encoding is a LookupError.
FILE_ERRORS = (OSError, EOFError, zlib.error, UnicodeDecodeError, LookupError)


def print_warning(message: str):
    print(message, file=sys.stderr)


# ---------- Readers ----------

@contextmanager
def open_log(path: PathLike, encoding: str = "utf-8") -> Iterator[TextIO]:
    """
    Open a log file as a text stream, decompressing `.gz` files on the fly.

    The stream is closed when the block exits, on success and on error.
    """
    codecs.lookup(encoding)

    if detect_compression(path) is Compression.GZIP:
        stream = gzip.open(path, "rt", encoding=encoding)
    else:
        stream = open(path, "r", encoding=encoding)

    try:
        yield stream
    finally:
        stream.close()


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\r\n")


# ---------- Ingest Pipeline ----------

class LogIngestor:
    """
    Feeds every parsable line of the given files into one Aggregator.

    Failures are isolated: a malformed line is skipped with a warning and an
    unreadable file is reported and skipped; neither stops the run.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        warn: WarningSink = print_warning,
        encoding: str = "utf-8",
    ):
        self.aggregator = aggregator
        self.warn = warn
        self.encoding = encoding

    def ingest_files(self, paths: Iterable[PathLike]) -> Aggregator:
        for path in paths:
            self.ingest_file(path)
        return self.aggregator

    def ingest_file(self, path: PathLike) -> bool:
        """
        Ingest one file. Returns False if the file could not be read.

        Lines consumed before a read error stay counted.
        """
        logger.debug("ingesting %s (%s)", path, detect_compression(path).name)
        try:
            with open_log(path, self.encoding) as stream:
                self.ingest_lines(read_lines(stream), source=str(path))
        except FILE_ERRORS as e:
            self.aggregator.metrics.files_failed += 1
            self.warn(f"Unable to read the file {path}: {e}")
            return False

        self.aggregator.metrics.files_read += 1
        return True

    def ingest_lines(self, lines: Iterable[str], source: str = "<input>"):
        for line in lines:
            result = parse_line(line)
            if isinstance(result, ParseFailure):
                self.aggregator.record_failure("malformed_line")
                self.warn(f"Unable to read log entry in {source}: {result.reason}")
                continue

            self.aggregator.observe(result)
