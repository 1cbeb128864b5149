# src/taskpanel/render/strings.py

from __future__ import annotations

STRINGS: dict[str, dict[str, str]] = {
    "ja": {
        "taskManager": "タスク管理",
        "tasks": "タスク",
        "checklist": "チェックリスト",
        "settings": "設定",
        "newTask": "新しいタスク",
        "add": "追加",
        "complete": "完了",
        "edit": "編集",
        "delete": "削除",
        "restore": "戻す",
        "purgeOld": "期限切れを手動整理",
        "autoDelete": "自動削除",
        "on": "ON",
        "off": "OFF",
        "days": "日",
        "completePercent": "完了",
        "progress": "進捗",
        "language": "言語",
        "retentionDays": "保持日数",
        "checklistMode": "チェックリストモード",
        "save": "保存",
        "empty": "(なし)",
    },
    "en": {
        "taskManager": "Task Management",
        "tasks": "Tasks",
        "checklist": "Checklist",
        "settings": "Settings",
        "newTask": "New Task",
        "add": "Add",
        "complete": "Complete",
        "edit": "Edit",
        "delete": "Delete",
        "restore": "Restore",
        "purgeOld": "Purge Old Completed",
        "autoDelete": "Auto Delete",
        "on": "ON",
        "off": "OFF",
        "days": "days",
        "completePercent": "Complete",
        "progress": "Progress",
        "language": "Language",
        "retentionDays": "Retention Days",
        "checklistMode": "Checklist Mode",
        "save": "Save",
        "empty": "(empty)",
    },
}


def get_strings(language: str) -> dict[str, str]:
    return STRINGS.get(language, STRINGS["ja"])
