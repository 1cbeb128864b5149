# src/taskpanel/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import StoredData, now_ms
from .ports import Clock, PreferenceSource, TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: object

    task_store: TaskRepo
    preferences: PreferenceSource
    clock: Clock = now_ms

    # Current document; replaced wholesale after every successful action.
    data: StoredData = field(default_factory=StoredData.empty)
