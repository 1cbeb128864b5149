# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskpanel.tasks.task_models import StoredData

# 2025-10-09T08:53:20Z, in epoch milliseconds
NOW_MS = 1_760_000_000_000
DAY_MS = 86_400_000


class FixedClock:
    """Deterministic clock: returns `now` until moved with advance()."""

    def __init__(self, now: int = NOW_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@dataclass(slots=True)
class FailingTaskRepo:
    """
    TaskRepo whose save() fails with a storage error.

    Used to check that write failures propagate and do not corrupt state.
    """

    document: StoredData = field(default_factory=StoredData.empty)
    save_calls: int = 0

    def load(self, now_ts: int | None = None) -> StoredData:
        return self.document

    def save(self, data: StoredData) -> None:
        self.save_calls += 1
        raise OSError(28, "No space left on device")
