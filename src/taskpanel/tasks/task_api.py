# src/taskpanel/tasks/task_api.py

"""
Typed actions and the load-mutate-prune-save cycle.

Every user action is one of the frozen dataclasses below. apply_action()
runs exactly one cycle per action:
  read preferences -> apply action -> prune -> save -> publish to state.data
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.state import AppState
from . import task_ops
from .preferences import Preferences, toggled_auto_delete, toggled_language, with_retention_days
from .task_models import Scope, StoredData

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddTask:
    title: str


@dataclass(frozen=True, slots=True)
class ToggleTask:
    index: int


@dataclass(frozen=True, slots=True)
class EditTask:
    index: int
    title: str


@dataclass(frozen=True, slots=True)
class DeleteTask:
    index: int
    scope: Scope = Scope.TASKS


@dataclass(frozen=True, slots=True)
class RestoreTask:
    index: int


@dataclass(frozen=True, slots=True)
class PurgeCompleted:
    pass


@dataclass(frozen=True, slots=True)
class ToggleLanguage:
    pass


@dataclass(frozen=True, slots=True)
class ToggleAutoDelete:
    pass


@dataclass(frozen=True, slots=True)
class UpdateRetentionDays:
    days: Any


Action = (
    AddTask
    | ToggleTask
    | EditTask
    | DeleteTask
    | RestoreTask
    | PurgeCompleted
    | ToggleLanguage
    | ToggleAutoDelete
    | UpdateRetentionDays
)


def _prune(data: StoredData, prefs: Preferences, now_ts: int) -> StoredData:
    return task_ops.prune(
        data,
        auto_delete=prefs.auto_delete,
        retention_days=prefs.retention_days,
        now_ts=now_ts,
    )


def _reduce(
    data: StoredData, action: Action, prefs: Preferences, now_ts: int
) -> tuple[StoredData, Preferences]:
    """Apply one action. Settings actions return updated preferences without writing them."""
    if isinstance(action, AddTask):
        return task_ops.add_task(data, action.title, now_ts), prefs

    if isinstance(action, ToggleTask):
        return (
            task_ops.toggle_task(data, action.index, now_ts, checklist_mode=prefs.enable_checklist),
            prefs,
        )

    if isinstance(action, EditTask):
        return task_ops.edit_task(data, action.index, action.title), prefs

    if isinstance(action, DeleteTask):
        return task_ops.delete_task(data, action.index, action.scope), prefs

    if isinstance(action, RestoreTask):
        return task_ops.restore_task(data, action.index, now_ts), prefs

    if isinstance(action, PurgeCompleted):
        return _prune(data, prefs, now_ts), prefs

    if isinstance(action, ToggleLanguage):
        return data, toggled_language(prefs)

    if isinstance(action, ToggleAutoDelete):
        return data, toggled_auto_delete(prefs)

    if isinstance(action, UpdateRetentionDays):
        return data, with_retention_days(prefs, action.days)

    raise TypeError(f"Unsupported action: {type(action).__name__}")


def apply_action(state: AppState, action: Action) -> StoredData:
    """
    Run one cycle for `action` and return the new document.

    Storage errors propagate; in that case state.data keeps its previous value.
    The document is saved before any preference change, so a failed save
    leaves both files as they were.
    """
    old_prefs = state.preferences.read()
    now_ts = state.clock()

    data, prefs = _reduce(state.data, action, old_prefs, now_ts)
    data = _prune(data, prefs, now_ts)

    state.task_store.save(data)
    state.data = data
    if prefs != old_prefs:
        state.preferences.write(prefs)
        logger.info("Preferences updated by %s: %s", type(action).__name__, prefs)
    logger.debug(
        "Applied %s tasks=%d checklist=%d", type(action).__name__, len(data.tasks), len(data.checklist)
    )
    return data


def open_session(state: AppState) -> StoredData:
    """Load the document once for this session, prune it and flush it back."""
    now_ts = state.clock()
    data = state.task_store.load(now_ts)
    data = _prune(data, state.preferences.read(), now_ts)
    state.task_store.save(data)
    state.data = data
    logger.info("Session opened tasks=%d checklist=%d", len(data.tasks), len(data.checklist))
    return data
