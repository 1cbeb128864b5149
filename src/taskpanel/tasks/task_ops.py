# src/taskpanel/tasks/task_ops.py

"""
Pure operations over a StoredData document.

Every function takes a document and returns a new one; the input is never
modified. Positional indices that fall outside the target list (including
negative ones) leave the document unchanged.
"""

from __future__ import annotations

import math
from dataclasses import replace

from .task_models import DAY_MS, ActiveTask, CompletedTask, Scope, StoredData


def _in_range(index: int, size: int) -> bool:
    return 0 <= index < size


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def add_task(data: StoredData, title: str, now_ts: int) -> StoredData:
    task = ActiveTask(title=title, done=False, created_at=int(now_ts))
    return replace(data, tasks=(*data.tasks, task))


def toggle_task(data: StoredData, index: int, now_ts: int, *, checklist_mode: bool) -> StoredData:
    """
    Complete the task at `index`.

    With checklist mode the task is archived: removed from `tasks` and
    prepended to `checklist`. Without it, `done` is flipped in place.
    """
    if not _in_range(index, len(data.tasks)):
        return data

    current = data.tasks[index]
    if checklist_mode:
        remaining = data.tasks[:index] + data.tasks[index + 1 :]
        entry = CompletedTask(title=current.title, completed_at=int(now_ts))
        return replace(data, tasks=remaining, checklist=(entry, *data.checklist))

    flipped = replace(current, done=not current.done)
    return replace(data, tasks=data.tasks[:index] + (flipped,) + data.tasks[index + 1 :])


def edit_task(data: StoredData, index: int, new_title: str) -> StoredData:
    if not new_title or not _in_range(index, len(data.tasks)):
        return data
    edited = replace(data.tasks[index], title=new_title)
    return replace(data, tasks=data.tasks[:index] + (edited,) + data.tasks[index + 1 :])


def delete_task(data: StoredData, index: int, scope: Scope) -> StoredData:
    if scope is Scope.TASKS:
        if not _in_range(index, len(data.tasks)):
            return data
        return replace(data, tasks=data.tasks[:index] + data.tasks[index + 1 :])

    if scope is Scope.CHECKLIST:
        if not _in_range(index, len(data.checklist)):
            return data
        return replace(data, checklist=data.checklist[:index] + data.checklist[index + 1 :])

    raise ValueError(f"Unknown scope: {scope!r}")


def restore_task(data: StoredData, index: int, now_ts: int) -> StoredData:
    """Move a checklist entry back to the front of `tasks` as a fresh, not-done task."""
    if not _in_range(index, len(data.checklist)):
        return data

    item = data.checklist[index]
    restored = ActiveTask(title=item.title, done=False, created_at=int(now_ts))
    return StoredData(
        tasks=(restored, *data.tasks),
        checklist=data.checklist[:index] + data.checklist[index + 1 :],
    )


def prune(data: StoredData, *, auto_delete: bool, retention_days: int, now_ts: int) -> StoredData:
    """
    Drop checklist entries completed before now - retention_days.

    `tasks` is never pruned. With auto-delete off the same document is returned.
    """
    if not auto_delete:
        return data

    cutoff = int(now_ts) - int(retention_days) * DAY_MS
    kept = tuple(c for c in data.checklist if c.completed_at >= cutoff)
    if len(kept) == len(data.checklist):
        return data
    return replace(data, checklist=kept)


def progress_percent(data: StoredData) -> int:
    total = len(data.tasks) + len(data.checklist)
    if total <= 0:
        return 0
    return round_half_up(len(data.checklist) / total * 100)
