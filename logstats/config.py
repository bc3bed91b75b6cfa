import codecs
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .ranking import DEFAULT_TIE_BREAK, TIE_BREAKS


DEFAULT_TOP_K = 3
DEFAULT_ENCODING = "utf-8"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    top_k: int = DEFAULT_TOP_K
    tie_break: str = DEFAULT_TIE_BREAK
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(
        cls,
        load_dotenv_file: bool = True,
        dotenv_path: Optional[str] = None,
    ) -> "Settings":
        """
        Read settings from the environment (and a .env file, if present).

        LOGSTATS_TOP_K      number of messages in the ranking (default 3)
        LOGSTATS_TIE_BREAK  first-seen | message (default first-seen)
        LOGSTATS_ENCODING   text encoding of input files (default utf-8)
        """
        if load_dotenv_file:
            load_dotenv(dotenv_path)

        return cls(
            top_k=parse_top_k(os.getenv("LOGSTATS_TOP_K", str(DEFAULT_TOP_K))),
            tie_break=parse_tie_break(
                os.getenv("LOGSTATS_TIE_BREAK", DEFAULT_TIE_BREAK)
            ),
            encoding=parse_encoding(
                os.getenv("LOGSTATS_ENCODING") or DEFAULT_ENCODING
            ),
        )


def parse_top_k(value: str) -> int:
    try:
        top_k = int(value)
    except ValueError as e:
        raise ConfigError(f"top-k must be an integer, got {value!r}") from e

    if top_k < 0:
        raise ConfigError(f"top-k must be non-negative, got {top_k}")
    return top_k


def parse_tie_break(value: str) -> str:
    if value not in TIE_BREAKS:
        choices = ", ".join(sorted(TIE_BREAKS))
        raise ConfigError(
            f"unknown tie-break {value!r} (expected one of: {choices})"
        )
    return value


def parse_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise ConfigError(f"unknown encoding {value!r}") from e
    return value
