# src/taskpanel/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..render.view import render_board, status_text

logger = logging.getLogger(__name__)

STORAGE_ERROR_MESSAGE = "Could not save tasks: {err}. Your last change was not applied."


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clear_screen() -> None:
    # ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


def run_command(state: AppState, line: str) -> str:
    """
    Dispatch one line and return the text to show.

    A storage failure is reported to the user instead of ending the session.
    """
    try:
        reply = command_registry.handle(state, line)
    except OSError as err:
        logger.error("Storage error while handling %r: %s", line, err)
        return STORAGE_ERROR_MESSAGE.format(err=err)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is None:
        return "Commands start with '/'. Use /help to list available commands."
    return reply


def run_console_loop(state: AppState, *, alt_screen: bool = False) -> None:
    """Redraw the board, read one command, repeat until /exit, EOF or Ctrl+C."""
    logger.info("Console connector started.")
    last_reply = ""

    if alt_screen:
        _enter_alt_screen()
    try:
        while True:
            if alt_screen:
                _clear_screen()
            print(render_board(state.data, state.preferences.read()))
            print(f"\n{status_text(state.data)}")
            if last_reply:
                print(f"[{_ts_local()}] {last_reply}")

            try:
                line = input("\n: ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not line:
                last_reply = ""
                continue

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            last_reply = run_command(state, line)
    finally:
        if alt_screen:
            _leave_alt_screen()

    logger.info("Console connector finished.")
