# src/taskpanel/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (which opens the task session), then
either runs a single slash command given on the command line or starts the
console loop.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import STORAGE_ERROR_MESSAGE, run_console_loop
from ..logging_setup import setup_logging
from ..render.view import status_text
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def run_once(state, line: str) -> int:
    """Run one command non-interactively. Returns the process exit code."""
    if not line.startswith("/"):
        line = "/" + line
    try:
        reply = command_registry.handle(state, line)
    except OSError as err:
        logger.error("Storage error while handling %r: %s", line, err)
        print(STORAGE_ERROR_MESSAGE.format(err=err), file=sys.stderr)
        return 1

    if reply:
        print(reply)
    print(status_text(state.data))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError as err:
        # Opening the session flushes the pruned document; a read-only project fails here.
        logger.error("Could not open task session: %s", err)
        print(f"Could not open task session: {err}", file=sys.stderr)
        return 1

    if argv:
        return run_once(state, " ".join(argv))

    run_console_loop(state, alt_screen=settings.alt_screen)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
