# tests/test_task_api.py

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from taskpanel.core.state import AppState
from taskpanel.tasks.task_api import (
    AddTask,
    DeleteTask,
    EditTask,
    PurgeCompleted,
    RestoreTask,
    ToggleAutoDelete,
    ToggleLanguage,
    ToggleTask,
    UpdateRetentionDays,
    apply_action,
    open_session,
)
from taskpanel.tasks.task_models import ActiveTask, CompletedTask, Scope, StoredData

from .fakes import DAY_MS, NOW_MS, FailingTaskRepo


def _seed(state: AppState, payload: dict) -> None:
    path = state.settings.tasks_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), "utf-8")


def _on_disk(state: AppState) -> dict:
    return json.loads(state.settings.tasks_file.read_text("utf-8"))


def _set_prefs(state: AppState, **values) -> None:
    path = state.settings.preferences_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(values), "utf-8")


def test_open_session_creates_empty_document(state: AppState) -> None:
    data = open_session(state)

    assert data == StoredData.empty()
    assert _on_disk(state) == {"tasks": [], "checklist": []}


def test_open_session_migrates_and_prunes(state: AppState) -> None:
    _seed(
        state,
        {
            "tasks": [{"title": "a", "done": False, "createdAt": 1}],
            "checklist": [
                {"title": "fresh", "completedAt": NOW_MS - 6 * DAY_MS},
                {"title": "stale", "completedAt": NOW_MS - 8 * DAY_MS},
            ],
        },
    )

    data = open_session(state)

    assert [c.title for c in data.checklist] == ["fresh"]
    assert [c["title"] for c in _on_disk(state)["checklist"]] == ["fresh"]


def test_open_session_keeps_document_with_incomplete_entries(state: AppState) -> None:
    _seed(
        state,
        {
            "tasks": [
                {"title": "keep me", "done": False, "createdAt": 1},
                {"title": "older v2 entry", "done": False},
            ],
            "checklist": [],
        },
    )

    data = open_session(state)

    assert [t.title for t in data.tasks] == ["keep me", "older v2 entry"]
    assert data.tasks[1].created_at == NOW_MS
    assert [t["title"] for t in _on_disk(state)["tasks"]] == ["keep me", "older v2 entry"]


def test_add_toggle_restore_cycle_persists_every_step(state: AppState, clock) -> None:
    open_session(state)

    apply_action(state, AddTask(title="A"))
    assert _on_disk(state)["tasks"] == [{"title": "A", "done": False, "createdAt": NOW_MS}]

    clock.advance(1000)
    apply_action(state, ToggleTask(index=0))
    assert state.data.tasks == ()
    assert state.data.checklist == (CompletedTask(title="A", completed_at=NOW_MS + 1000),)
    assert _on_disk(state)["checklist"] == [{"title": "A", "completedAt": NOW_MS + 1000}]

    clock.advance(1000)
    apply_action(state, RestoreTask(index=0))
    assert state.data.checklist == ()
    assert state.data.tasks == (ActiveTask(title="A", done=False, created_at=NOW_MS + 2000),)


def test_toggle_follows_checklist_mode_preference(state: AppState) -> None:
    open_session(state)
    apply_action(state, AddTask(title="A"))
    _set_prefs(state, enableChecklist=False)

    apply_action(state, ToggleTask(index=0))

    assert state.data.tasks[0].done is True
    assert state.data.checklist == ()


def test_edit_and_delete(state: AppState) -> None:
    open_session(state)
    apply_action(state, AddTask(title="A"))
    apply_action(state, AddTask(title="B"))

    apply_action(state, EditTask(index=1, title="B2"))
    apply_action(state, EditTask(index=0, title=""))
    assert [t.title for t in state.data.tasks] == ["A", "B2"]

    apply_action(state, ToggleTask(index=0))
    apply_action(state, DeleteTask(index=0, scope=Scope.CHECKLIST))
    apply_action(state, DeleteTask(index=0))
    assert state.data == StoredData.empty()
    assert _on_disk(state) == {"tasks": [], "checklist": []}


def test_out_of_range_actions_leave_document_unchanged(state: AppState) -> None:
    open_session(state)
    apply_action(state, AddTask(title="A"))
    before = state.data
    before_bytes = state.settings.tasks_file.read_bytes()

    for action in (
        ToggleTask(index=99),
        DeleteTask(index=99, scope=Scope.TASKS),
        DeleteTask(index=99, scope=Scope.CHECKLIST),
        RestoreTask(index=99),
        EditTask(index=99, title="x"),
        ToggleTask(index=-1),
    ):
        assert apply_action(state, action) == before

    assert state.settings.tasks_file.read_bytes() == before_bytes


def test_every_mutation_prunes_with_current_preferences(state: AppState, clock) -> None:
    _set_prefs(state, autoDeleteCompleted=False)
    _seed(
        state,
        {"tasks": [], "checklist": [{"title": "old", "completedAt": NOW_MS - 30 * DAY_MS}]},
    )
    open_session(state)
    assert len(state.data.checklist) == 1

    apply_action(state, AddTask(title="x"))
    assert len(state.data.checklist) == 1

    # enabling auto delete prunes within the same cycle
    apply_action(state, ToggleAutoDelete())
    assert state.preferences.read().auto_delete is True
    assert state.data.checklist == ()


def test_retention_update_prunes_with_new_value(state: AppState) -> None:
    _seed(
        state,
        {
            "tasks": [],
            "checklist": [
                {"title": "2d", "completedAt": NOW_MS - 2 * DAY_MS},
                {"title": "5d", "completedAt": NOW_MS - 5 * DAY_MS},
            ],
        },
    )
    open_session(state)
    assert len(state.data.checklist) == 2

    apply_action(state, UpdateRetentionDays(days="3"))

    assert state.preferences.read().retention_days == 3
    assert [c.title for c in state.data.checklist] == ["2d"]


def test_purge_applies_pruning_on_demand(state: AppState, clock) -> None:
    open_session(state)
    apply_action(state, AddTask(title="A"))
    apply_action(state, ToggleTask(index=0))

    clock.advance(8 * DAY_MS)
    apply_action(state, PurgeCompleted())

    assert state.data.checklist == ()


def test_toggle_language_does_not_touch_document(state: AppState) -> None:
    open_session(state)
    apply_action(state, AddTask(title="A"))
    before = state.data

    apply_action(state, ToggleLanguage())

    assert state.preferences.read().language == "en"
    assert state.data == before


def test_storage_failure_propagates_and_keeps_previous_state(state: AppState) -> None:
    repo = FailingTaskRepo()
    state.task_store = repo
    state.data = StoredData(tasks=(ActiveTask(title="kept", done=False, created_at=1),), checklist=())
    previous = state.data

    with pytest.raises(OSError):
        apply_action(state, AddTask(title="lost"))

    assert repo.save_calls == 1
    assert state.data is previous


def test_failed_save_leaves_preferences_unchanged(state: AppState) -> None:
    _set_prefs(state, autoDeleteCompleted=True)
    state.task_store = FailingTaskRepo()

    with pytest.raises(OSError):
        apply_action(state, ToggleAutoDelete())

    assert state.preferences.read().auto_delete is True
    assert json.loads(state.settings.preferences_path.read_text("utf-8")) == {"autoDeleteCompleted": True}


def test_unknown_action_raises_type_error(state: AppState) -> None:
    @dataclass(frozen=True)
    class Archive:
        index: int

    with pytest.raises(TypeError):
        apply_action(state, Archive(index=0))  # type: ignore[arg-type]
