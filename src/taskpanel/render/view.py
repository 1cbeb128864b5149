# src/taskpanel/render/view.py

"""
Stateless text projections of a StoredData document.

Nothing here is stored: progress and the bar are recomputed on every render.
"""

from __future__ import annotations

from datetime import datetime

from ..tasks.preferences import Preferences
from ..tasks.task_models import StoredData
from ..tasks.task_ops import progress_percent, round_half_up
from .strings import get_strings

BAR_LENGTH = 10
BAR_FILLED = "█"
BAR_EMPTY = " "


def progress_bar(percent: int, width: int = BAR_LENGTH) -> str:
    filled = round_half_up(percent / 100 * width)
    filled = max(0, min(width, filled))
    return BAR_FILLED * filled + BAR_EMPTY * (width - filled)


def status_text(data: StoredData) -> str:
    """One-line summary in the style of an editor status bar item."""
    percent = progress_percent(data)
    return f"✔ Task Manager [{progress_bar(percent)}] {percent}%"


def format_date(ts_ms: int) -> str:
    return datetime.fromtimestamp(ts_ms / 1000).strftime("%Y-%m-%d")


def auto_delete_label(prefs: Preferences) -> str:
    t = get_strings(prefs.language)
    if not prefs.auto_delete:
        return f"{t['autoDelete']}: {t['off']}"
    sep = "" if prefs.language == "ja" else " "
    return f"{t['autoDelete']}: {t['on']} ({prefs.retention_days}{sep}{t['days']})"


def render_board(data: StoredData, prefs: Preferences) -> str:
    t = get_strings(prefs.language)
    percent = progress_percent(data)

    lines = [
        f"[{progress_bar(percent)}] {percent}% {t['completePercent']}",
        f"✔ {t['taskManager']}",
        "",
        f"{t['tasks']}:",
    ]

    if not data.tasks:
        lines.append(f"  {t['empty']}")
    for i, task in enumerate(data.tasks, start=1):
        # done only means something when checklist mode is off
        mark = "[x]" if task.done and not prefs.enable_checklist else "[ ]"
        lines.append(f"  {i}. {mark} {task.title}")

    if prefs.enable_checklist or data.checklist:
        lines.append("")
        lines.append(f"{t['checklist']}: {auto_delete_label(prefs)}")
        if not data.checklist:
            lines.append(f"  {t['empty']}")
        for i, item in enumerate(data.checklist, start=1):
            lines.append(f"  {i}. {item.title} ({format_date(item.completed_at)})")

    return "\n".join(lines)


def render_settings(prefs: Preferences) -> str:
    t = get_strings(prefs.language)
    return "\n".join(
        [
            f"{t['settings']}:",
            f"  {t['checklistMode']}: {t['on'] if prefs.enable_checklist else t['off']}",
            f"  {auto_delete_label(prefs)}",
            f"  {t['retentionDays']}: {prefs.retention_days}",
            f"  {t['language']}: {prefs.language}",
        ]
    )
