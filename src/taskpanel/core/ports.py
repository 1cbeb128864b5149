# src/taskpanel/core/ports.py

"""
Ports (interfaces) used by the core.

The action cycle depends on Protocols instead of the file-backed stores,
so tests can swap in fakes (failing writers, fixed clocks).
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.preferences import Preferences
from ..tasks.task_models import StoredData


class Clock(Protocol):
    """Returns the current time in epoch milliseconds."""
    def __call__(self) -> int: ...


class TaskRepo(Protocol):
    def load(self, now_ts: int | None = None) -> StoredData: ...

    def save(self, data: StoredData) -> None: ...


class PreferenceSource(Protocol):
    def read(self) -> Preferences: ...

    def write(self, prefs: Preferences) -> None: ...
