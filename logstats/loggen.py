import argparse
import datetime
import gzip
import random
from pathlib import Path
from typing import Optional, Union

from .detect import Compression, detect_compression


LEVELS = ["INFO", "WARN", "ERROR", "DEBUG"]

MESSAGES = {
    "INFO": ["request served", "user login success", "cache warmed"],
    "WARN": ["slow response", "retrying connection"],
    "ERROR": ["disk full", "connection refused", "payment failed"],
    "DEBUG": ["heartbeat"],
}


def generate_line(rng: random.Random, ts: datetime.datetime) -> str:
    level = rng.choice(LEVELS)
    message = rng.choice(MESSAGES[level])
    return f"{ts.strftime('%Y-%m-%dT%H:%M:%S')} {level} {message}"


def generate_logs(
    filename: Union[str, Path] = "sample.log",
    target_lines: int = 1000,
    malformed_every: int = 0,
    seed: Optional[int] = None,
) -> Path:
    """
    Write a synthetic log file; names ending in .gz are gzip-compressed.

    With malformed_every=N, every Nth line is a single token that the
    parser rejects.
    """
    rng = random.Random(seed)
    path = Path(filename)
    current_time = datetime.datetime(2026, 1, 3, 13, 55, 1)

    if detect_compression(path) is Compression.GZIP:
        f = gzip.open(path, "wt", encoding="utf-8")
    else:
        f = open(path, "w", encoding="utf-8")

    with f:
        for i in range(1, target_lines + 1):
            current_time += datetime.timedelta(seconds=rng.randint(2, 45))
            if malformed_every and i % malformed_every == 0:
                f.write("garbage\n")
            else:
                f.write(generate_line(rng, current_time) + "\n")

    return path


def main():
    parser = argparse.ArgumentParser(description="Generate a sample log file")
    parser.add_argument("filename", nargs="?", default="sample.log")
    parser.add_argument("--lines", type=int, default=1000)
    parser.add_argument("--malformed-every", type=int, default=0)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    path = generate_logs(
        args.filename,
        target_lines=args.lines,
        malformed_every=args.malformed_every,
        seed=args.seed,
    )
    print(f"Generated {args.lines} lines in {path}")


if __name__ == "__main__":
    main()
