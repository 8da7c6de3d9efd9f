# src/taskline/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"
INDENT = "    "


def frame(text: str, *, width: int = 60, enabled: bool = True) -> str:
    """Wrap a reply between two horizontal rules, body indented."""
    if not enabled:
        return text + "\n"
    rule = INDENT + "_" * width
    body = "\n".join(f"{INDENT} {line}" if line else "" for line in text.split("\n"))
    return f"{rule}\n{body}\n{rule}\n"


def run_console_loop(
    state: AppState,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    settings = state.settings
    app_name = str(getattr(settings, "app_name", "taskline"))
    width = int(getattr(settings, "frame_width", 60))
    framed = bool(getattr(settings, "frame_output", True))

    def emit(text: str) -> None:
        stdout.write(frame(text, width=width, enabled=framed))
        stdout.flush()

    logger.info("Console connector started (tasks=%d).", state.task_list.size())
    emit(f"Hello! I'm {app_name}\nWhat can I do for you?")

    while True:
        try:
            raw = stdin.readline()
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if raw == "":
            logger.info("Console EOF received, exiting.")
            break

        line = raw.strip()
        if not line:
            continue

        if line == EXIT_COMMAND:
            logger.info("Console exit command received.")
            emit("Bye. Hope to see you again soon!")
            break

        try:
            with state.lock:
                response = command_registry.handle(state.task_list, line)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        emit(response)

    logger.info("Console connector finished.")
