# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Live preferences (checklist mode, auto delete, retention, language) are stored in the
preferences JSON file; the TASKPANEL_* values below only seed their defaults.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPANEL_APP_NAME": "App display name (default: taskpanel).",
    "TASKPANEL_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths
    "TASKPANEL_PROJECT_ROOT": "Active project root (default: current directory).",
    "TASKPANEL_TASKS_FILE": "Task document path (default: <project_root>/tasks.json).",
    "TASKPANEL_DATA_DIR": "Local data directory for logs (default: .local/taskpanel).",
    "TASKPANEL_PREFERENCES_PATH": (
        "Preferences JSON path (default: <data_dir>/preferences.json)."
    ),
    # Preference defaults
    "TASKPANEL_ENABLE_CHECKLIST": "Completing a task archives it to the checklist (default: true).",
    "TASKPANEL_AUTO_DELETE": "Prune completed tasks past retention (default: true).",
    "TASKPANEL_RETENTION_DAYS": "Days a completed task is kept, 1-365 (default: 7).",
    "TASKPANEL_LANGUAGE": "Display language: ja | en (default: ja).",
    # Console
    "TASKPANEL_ALT_SCREEN": "Redraw the board on the terminal's alternate screen (default: false).",
}
