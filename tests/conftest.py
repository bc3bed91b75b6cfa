"""
Shared fixtures for the logstats test suite.
"""

import gzip
from pathlib import Path
from typing import List

import pytest


@pytest.fixture
def write_log(tmp_path):
    """Write lines to a log file under tmp_path; `.gz` names are compressed."""

    def _write(name: str, lines: List[str]) -> Path:
        path = tmp_path / name
        text = "".join(line + "\n" for line in lines)
        if name.endswith(".gz"):
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write(text)
        else:
            path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def warnings() -> List[str]:
    return []


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOGSTATS_TOP_K", "LOGSTATS_TIE_BREAK", "LOGSTATS_ENCODING"):
        monkeypatch.delenv(name, raising=False)
