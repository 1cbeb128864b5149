# src/taskpanel/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..render.view import render_board, render_settings, status_text
from ..tasks.task_api import (
    Action,
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
)
from ..tasks.task_models import ActiveTask, Scope, StoredData

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /done, /help, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Storage errors from the action cycle are not caught here.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_position(raw: str) -> int | None:
    """User-facing 1-based position -> 0-based index (None if not a number)."""
    raw = raw.rstrip(".")
    if not raw.isdigit():
        return None
    return int(raw) - 1


def _tasks(data: StoredData) -> tuple[ActiveTask, ...]:
    return data.tasks


def _run(
    state: AppState,
    action: Action,
    done_msg: str,
    noop_msg: str,
    target: Callable[[StoredData], tuple] = _tasks,
) -> str:
    """Apply `action` and report whether the list it targets changed."""
    before = target(state.data)
    after = target(apply_action(state, action))
    if after == before:
        logger.debug("%s left its list unchanged", action)
        return noop_msg
    return done_msg


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board(state.data, state.preferences.read())


def cmd_status(state: AppState, args: list[str]) -> str:
    return f"{status_text(state.data)}\n{render_settings(state.preferences.read())}"


def cmd_add(state: AppState, args: list[str]) -> str:
    title = " ".join(args).strip()
    if not title:
        return "Usage: /add <title>"
    apply_action(state, AddTask(title=title))
    return f'Added "{title}".'


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <n>"
    index = _parse_position(args[0])
    if index is None:
        return "Invalid task number."
    return _run(state, ToggleTask(index=index), f"Task {args[0]} toggled.", f"No task #{args[0]}.")


def cmd_edit(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /edit <n> <new title>"
    index = _parse_position(args[0])
    if index is None:
        return "Invalid task number."
    title = " ".join(args[1:]).strip()
    return _run(state, EditTask(index=index, title=title), f"Task {args[0]} renamed.", "Nothing changed.")


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm <n>            -> delete task n
    /rm <n> checklist  -> delete checklist entry n
    """
    if len(args) not in (1, 2):
        return "Usage: /rm <n> [tasks|checklist]"
    index = _parse_position(args[0])
    if index is None:
        return "Invalid task number."
    scope = Scope.TASKS
    if len(args) == 2:
        parsed = Scope.parse(args[1])
        if parsed is None:
            return "Scope must be 'tasks' or 'checklist'."
        scope = parsed

    action = DeleteTask(index=index, scope=scope)
    done_msg = f"Deleted {scope.value} #{args[0]}."
    noop_msg = f"No {scope.value} entry #{args[0]}."
    if scope is Scope.TASKS:
        return _run(state, action, done_msg, noop_msg)

    # Pruning can shrink the checklist too, so decide on the index up front.
    found = 0 <= index < len(state.data.checklist)
    apply_action(state, action)
    return done_msg if found else noop_msg


def cmd_restore(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /restore <n>"
    index = _parse_position(args[0])
    if index is None:
        return "Invalid checklist number."
    return _run(
        state, RestoreTask(index=index), f"Checklist #{args[0]} restored.", f"No checklist entry #{args[0]}."
    )


def cmd_purge(state: AppState, args: list[str]) -> str:
    before = len(state.data.checklist)
    after = apply_action(state, PurgeCompleted())
    removed = before - len(after.checklist)
    return f"Purged {removed} completed task(s)."


def cmd_lang(state: AppState, args: list[str]) -> str:
    apply_action(state, ToggleLanguage())
    return f"Language: {state.preferences.read().language}"


def cmd_autodelete(state: AppState, args: list[str]) -> str:
    apply_action(state, ToggleAutoDelete())
    return f"Auto delete: {'ON' if state.preferences.read().auto_delete else 'OFF'}"


def cmd_retention(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /retention <days> (1-365)"
    apply_action(state, UpdateRetentionDays(days=args[0]))
    return f"Retention days: {state.preferences.read().retention_days}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks and checklist.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show progress and settings.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("done", cmd_done, help_text="Complete task n: /done <n>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Rename task n: /edit <n> <title>.")
registry.register(
    "rm", cmd_rm, help_text="Delete an item: /rm <n> [tasks|checklist].", aliases=["delete"]
)
registry.register("restore", cmd_restore, help_text="Move checklist entry n back to tasks.")
registry.register("purge", cmd_purge, help_text="Purge completed tasks past retention now.")
registry.register("lang", cmd_lang, help_text="Toggle display language (ja/en).")
registry.register("autodelete", cmd_autodelete, help_text="Toggle auto delete of completed tasks.")
registry.register("retention", cmd_retention, help_text="Set retention days: /retention <1-365>.")
