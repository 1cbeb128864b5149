# src/taskpanel/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Paths default to the current project root / a gitignored local data dir.
- Preference defaults (checklist mode, auto delete, ...) are seeded from here;
  the live values are read from the preferences file on every action.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.preferences import (
    DEFAULT_LANGUAGE,
    DEFAULT_RETENTION_DAYS,
    LANGUAGES,
    Preferences,
    clamp_retention_days,
)

ENV_PREFIX = "TASKPANEL"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Paths ----
    project_root: Path
    tasks_file: Path
    data_dir: Path
    preferences_path: Path

    # ---- Preference defaults ----
    enable_checklist: bool
    auto_delete: bool
    retention_days: int
    language: str

    # ---- Console ----
    alt_screen: bool

    def default_preferences(self) -> Preferences:
        return Preferences(
            enable_checklist=self.enable_checklist,
            auto_delete=self.auto_delete,
            retention_days=self.retention_days,
            language=self.language,
        )

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpanel") or "taskpanel"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        project_root = _env_path(_k("PROJECT_ROOT"), Path.cwd())
        tasks_file = _env_path(_k("TASKS_FILE"), project_root / "tasks.json")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpanel"))
        preferences_path = _env_path(_k("PREFERENCES_PATH"), data_dir / "preferences.json")

        enable_checklist = _env_bool(_k("ENABLE_CHECKLIST"), True)
        auto_delete = _env_bool(_k("AUTO_DELETE"), True)
        retention_days = clamp_retention_days(_env_int(_k("RETENTION_DAYS"), DEFAULT_RETENTION_DAYS))

        language = _env(_k("LANGUAGE"), DEFAULT_LANGUAGE).strip().lower()
        if language not in LANGUAGES:
            language = DEFAULT_LANGUAGE

        alt_screen = _env_bool(_k("ALT_SCREEN"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            project_root=project_root,
            tasks_file=tasks_file,
            data_dir=data_dir,
            preferences_path=preferences_path,
            enable_checklist=enable_checklist,
            auto_delete=auto_delete,
            retention_days=retention_days,
            language=language,
            alt_screen=alt_screen,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
