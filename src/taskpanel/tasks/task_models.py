# src/taskpanel/tasks/task_models.py

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

DAY_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds (the on-disk unit)."""
    return int(time.time() * 1000)


class SchemaError(ValueError):
    """Raised when a decoded JSON value does not match a known document shape."""


class Scope(StrEnum):
    """Which list of the document an index refers to."""

    TASKS = "tasks"
    CHECKLIST = "checklist"

    @classmethod
    def parse(cls, raw: str | None) -> Scope | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class ActiveTask:
    title: str
    done: bool
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "done": self.done, "createdAt": self.created_at}


@dataclass(frozen=True, slots=True)
class CompletedTask:
    title: str
    completed_at: int

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "completedAt": self.completed_at}


@dataclass(frozen=True, slots=True)
class StoredData:
    """
    The whole persisted document.

    Sequences are tuples: a StoredData value is never mutated, operations
    build a new one instead.
    """

    tasks: tuple[ActiveTask, ...] = field(default_factory=tuple)
    checklist: tuple[CompletedTask, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> StoredData:
        return cls(tasks=(), checklist=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "checklist": [c.to_dict() for c in self.checklist],
        }


# ---- shape parsing ----


def _is_number(value: Any) -> bool:
    # bool is an int subclass; a boolean timestamp is not a timestamp.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _title(value: Any) -> str:
    return "" if value is None else str(value)


def _timestamp(value: Any, fallback: int) -> int:
    return int(value) if _is_number(value) else int(fallback)


def parse_current(raw: Any, now_ts: int) -> StoredData:
    """
    Parse the current document shape: {"tasks": [...], "checklist": [...]}.

    Once both arrays are present the document is kept: entries are repaired
    (titles stringified, missing timestamps set to now_ts) and only entries
    that are not objects are dropped.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError("document is not a JSON object")

    raw_tasks = raw.get("tasks")
    raw_checklist = raw.get("checklist")
    if not isinstance(raw_tasks, list) or not isinstance(raw_checklist, list):
        raise SchemaError("current schema requires 'tasks' and 'checklist' arrays")

    tasks = tuple(
        ActiveTask(
            title=_title(item.get("title")),
            done=bool(item.get("done", False)),
            created_at=_timestamp(item.get("createdAt"), now_ts),
        )
        for item in raw_tasks
        if isinstance(item, Mapping)
    )
    checklist = tuple(
        CompletedTask(
            title=_title(item.get("title")),
            completed_at=_timestamp(item.get("completedAt"), now_ts),
        )
        for item in raw_checklist
        if isinstance(item, Mapping)
    )
    return StoredData(tasks=tasks, checklist=checklist)


def parse_legacy(raw: Any, now_ts: int) -> StoredData:
    """
    Parse the legacy shape {"tasks": [{"title", "done"}]} (no checklist).

    Every task gets created_at = now_ts since the old format had no timestamps.
    Entries without a title are dropped.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError("document is not a JSON object")

    raw_tasks = raw.get("tasks")
    if not isinstance(raw_tasks, list):
        raise SchemaError("legacy schema requires a 'tasks' array")
    if raw.get("checklist"):
        raise SchemaError("legacy schema has no 'checklist'")

    tasks: list[ActiveTask] = []
    for item in raw_tasks:
        if not isinstance(item, Mapping):
            continue
        raw_title = item.get("title")
        if raw_title is None:
            continue
        tasks.append(ActiveTask(title=str(raw_title), done=bool(item.get("done")), created_at=int(now_ts)))

    return StoredData(tasks=tuple(tasks), checklist=())
