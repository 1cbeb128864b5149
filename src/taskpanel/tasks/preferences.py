# src/taskpanel/tasks/preferences.py

"""
User preferences consumed by the task core.

The store never caches: read() goes to disk on every call, so an edit made
outside the running session is picked up on the next action.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

LANGUAGES: tuple[str, ...] = ("ja", "en")
DEFAULT_LANGUAGE = "ja"

RETENTION_MIN_DAYS = 1
RETENTION_MAX_DAYS = 365
DEFAULT_RETENTION_DAYS = 7

# On-disk keys
K_ENABLE_CHECKLIST = "enableChecklist"
K_AUTO_DELETE = "autoDeleteCompleted"
K_RETENTION_DAYS = "retentionDays"
K_LANGUAGE = "language"


def clamp_retention_days(days: int) -> int:
    return max(RETENTION_MIN_DAYS, min(RETENTION_MAX_DAYS, int(days)))


def parse_retention_days(raw: Any) -> int:
    """
    Parse user input for retention days.

    Unparsable input (and 0) falls back to the default, then the value is clamped.
    """
    text = str(raw).strip()
    try:
        days = int(text)
    except ValueError:
        try:
            days = int(float(text))
        except (ValueError, OverflowError):
            days = 0
    if days == 0:
        days = DEFAULT_RETENTION_DAYS
    return clamp_retention_days(days)


@dataclass(frozen=True, slots=True)
class Preferences:
    enable_checklist: bool = True
    auto_delete: bool = True
    retention_days: int = DEFAULT_RETENTION_DAYS
    language: str = DEFAULT_LANGUAGE

    def to_dict(self) -> dict[str, Any]:
        return {
            K_ENABLE_CHECKLIST: self.enable_checklist,
            K_AUTO_DELETE: self.auto_delete,
            K_RETENTION_DAYS: self.retention_days,
            K_LANGUAGE: self.language,
        }


class PreferenceStore:
    """JSON-file preferences with per-key fallback to `defaults`."""

    def __init__(self, path: str | Path, defaults: Preferences | None = None) -> None:
        self._path = Path(path)
        self._defaults = defaults or Preferences()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def defaults(self) -> Preferences:
        return self._defaults

    def _read_raw(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.warning("Preferences file %s is unreadable; using defaults.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file %s is not a JSON object; using defaults.", self._path)
            return {}
        return data

    def read(self) -> Preferences:
        raw = self._read_raw()
        d = self._defaults

        enable_checklist = raw.get(K_ENABLE_CHECKLIST, d.enable_checklist)
        if not isinstance(enable_checklist, bool):
            enable_checklist = d.enable_checklist

        auto_delete = raw.get(K_AUTO_DELETE, d.auto_delete)
        if not isinstance(auto_delete, bool):
            auto_delete = d.auto_delete

        retention_days = raw.get(K_RETENTION_DAYS, d.retention_days)
        if not isinstance(retention_days, int) or isinstance(retention_days, bool):
            retention_days = d.retention_days

        language = raw.get(K_LANGUAGE, d.language)
        if language not in LANGUAGES:
            language = d.language

        return Preferences(
            enable_checklist=enable_checklist,
            auto_delete=auto_delete,
            retention_days=clamp_retention_days(retention_days),
            language=language,
        )

    def write(self, prefs: Preferences) -> None:
        """Persist `prefs`. Raises OSError on storage failure."""
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(prefs.to_dict(), ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save preferences to %s", self._path)
            raise
        logger.debug("Saved preferences %s", prefs)


# ---- settings updates (pure; the caller persists the result) ----


def toggled_language(prefs: Preferences) -> Preferences:
    return replace(prefs, language="en" if prefs.language == "ja" else "ja")


def toggled_auto_delete(prefs: Preferences) -> Preferences:
    return replace(prefs, auto_delete=not prefs.auto_delete)


def with_retention_days(prefs: Preferences, raw_days: Any) -> Preferences:
    return replace(prefs, retention_days=parse_retention_days(raw_days))
