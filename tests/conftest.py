# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpanel.core.state import AppState
from taskpanel.tasks.preferences import Preferences, PreferenceStore
from taskpanel.tasks.task_store import TaskStore

from .fakes import FixedClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpanel-test",
        log_level="DEBUG",
        project_root=tmp_path / "project",
        tasks_file=tmp_path / "project" / "tasks.json",
        data_dir=data_dir,
        preferences_path=data_dir / "preferences.json",
        alt_screen=False,
        default_preferences=Preferences,
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FixedClock) -> AppState:
    """
    AppState wired with the real file-backed stores and a fixed clock.

    The session is not opened here; tests that need it call open_session().
    """
    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_file),
        preferences=PreferenceStore(settings.preferences_path, settings.default_preferences()),
        clock=clock,
    )
