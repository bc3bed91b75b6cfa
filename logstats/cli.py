import argparse
import logging
from typing import List, Optional

from .config import ConfigError, Settings, parse_encoding, parse_top_k
from .ingest import LogIngestor
from .ranking import TIE_BREAKS
from .report import build_report, render_report
from .store import Aggregator


logger = logging.getLogger(__name__)


# ---------------- CLI ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logstats",
        description="Summarize log files: entry count, level distribution "
        "and most frequent messages",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="log file to analyze (.gz files are decompressed)",
    )
    parser.add_argument(
        "--top",
        type=parse_top_k,
        default=None,
        metavar="N",
        help="number of messages to rank (default: LOGSTATS_TOP_K or 3)",
    )
    parser.add_argument(
        "--tie-break",
        choices=sorted(TIE_BREAKS),
        default=None,
        help="order of messages with equal counts (default: first-seen)",
    )
    parser.add_argument(
        "--encoding",
        type=parse_encoding,
        default=None,
        help="text encoding of the input files (default: LOGSTATS_ENCODING or utf-8)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log ingestion diagnostics to stderr",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.files:
        parser.error(
            "provide at least one log file, e.g. `logstats example.log`"
        )

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        parser.error(str(e))

    if args.top is None:
        args.top = settings.top_k
    if args.tie_break is None:
        args.tie_break = settings.tie_break
    if args.encoding is None:
        args.encoding = settings.encoding

    return args


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------- Main ----------------

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    aggregator = Aggregator()
    ingestor = LogIngestor(aggregator, encoding=args.encoding)

    # ---- Ingest ----
    ingestor.ingest_files(args.files)

    metrics = aggregator.metrics
    logger.info(
        "ingestion summary: files read=%d failed=%d, lines parsed=%d skipped=%d",
        metrics.files_read,
        metrics.files_failed,
        metrics.parsed,
        metrics.failed,
    )

    # ---- Report ----
    report = build_report(
        aggregator,
        k=args.top,
        compare=TIE_BREAKS[args.tie_break],
    )
    print(render_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
