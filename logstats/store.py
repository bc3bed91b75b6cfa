from typing import Dict, Iterator, Tuple

from .types import LogEntry


# ---------- Metrics ----------

class IngestMetrics:
    """Parsed and skipped lines, read and unreadable files, skips by reason."""

    def __init__(self):
        self.parsed = 0
        self.failed = 0
        self.files_read = 0
        self.files_failed = 0
        self.failures_by_reason: Dict[str, int] = {}

    def record_success(self):
        self.parsed += 1

    def record_failure(self, reason: str):
        self.failed += 1
        self.failures_by_reason[reason] = (
            self.failures_by_reason.get(reason, 0) + 1
        )

    def merge(self, other: "IngestMetrics"):
        self.parsed += other.parsed
        self.failed += other.failed
        self.files_read += other.files_read
        self.files_failed += other.files_failed
        for reason, count in other.failures_by_reason.items():
            self.failures_by_reason[reason] = (
                self.failures_by_reason.get(reason, 0) + count
            )


# ---------- Frequency table ----------

class FrequencyTable:
    """
    Count of observations per exact string key.

    Keys are compared with plain string equality (no trimming or
    case-folding). Every stored key has a count of at least 1, and keys
    are kept in first-seen order.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def increment(self, key: str, amount: int = 1):
        if amount < 1:
            raise ValueError(f"increment must be positive, got {amount}")
        self._counts[key] = self._counts.get(key, 0) + amount

    def update(self, other: "FrequencyTable"):
        for key, count in other.items():
            self.increment(key, count)

    def total(self) -> int:
        return sum(self._counts.values())

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(list(self._counts.items()))

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def copy(self) -> "FrequencyTable":
        clone = FrequencyTable()
        clone._counts = dict(self._counts)
        return clone

    def __getitem__(self, key: str) -> int:
        return self._counts.get(key, 0)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


# ---------- Aggregator ----------

class Aggregator:
    """
    Owns the level and message tables for one analysis run.

    Entries from every input file are folded into the same pair of tables.
    """

    def __init__(self):
        self.levels = FrequencyTable()
        self.messages = FrequencyTable()
        self.metrics = IngestMetrics()

    # ---------- Write API ----------

    def observe(self, entry: LogEntry):
        self.levels.increment(entry.level)
        self.messages.increment(entry.message)
        self.metrics.record_success()

    def record_failure(self, reason: str):
        self.metrics.record_failure(reason)

    def merge(self, other: "Aggregator"):
        """
        Fold another aggregator's counts into this one by summation.

        Used to combine partitions that were counted independently.
        """
        self.levels.update(other.levels)
        self.messages.update(other.messages)
        self.metrics.merge(other.metrics)

    # ---------- Read APIs ----------

    @property
    def total(self) -> int:
        return self.levels.total()

    def snapshot(self) -> Tuple[FrequencyTable, FrequencyTable]:
        return self.levels.copy(), self.messages.copy()
