# src/taskline/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date

from ..core.errors import (
    BadDateFormatError,
    BadTaskFormatError,
    CommandError,
    EmptyListError,
    IndexOutOfRangeError,
    MissingArgumentError,
    NotANumberError,
    UnexpectedArgumentError,
    UnknownCommandError,
    ValidationError,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import deadline_task, event_task, plain_task

# handler(task_list, rest) -> reply; rest is None when the line had no space.
CommandHandler = Callable[[TaskList, str | None], str]

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"[+-]?[0-9]+")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DEADLINE_USAGE = "deadline <description> /by <yyyy-mm-dd>"
EVENT_USAGE = "event <description> /at <yyyy-mm-dd>"


class CommandRegistry:
    """Verb registry: splits a line into verb + rest and routes it to a handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, verb: str, handler: CommandHandler, help_text: str) -> None:
        # Verbs match exactly (case-sensitive).
        self._handlers[verb] = handler
        self._help[verb] = help_text

    def interpret(self, task_list: TaskList, line: str) -> str:
        """
        Run one command line against the task list.

        Raises CommandError / ValidationError for malformed input.
        """
        verb, sep, rest = line.strip().partition(" ")
        handler = self._handlers.get(verb)
        if handler is None:
            raise UnknownCommandError()
        logger.debug("Dispatching verb=%s", verb)
        return handler(task_list, rest if sep else None)

    def handle(self, task_list: TaskList, line: str) -> str:
        """Like interpret(), but returns the user-facing message of an input error."""
        try:
            return self.interpret(task_list, line)
        except (CommandError, ValidationError) as e:
            logger.info("Rejected command %r: %s", line, e.__class__.__name__)
            return e.user_message

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        lines.append("  bye - exit")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument parsing ----


def _require(rest: str | None, message: str) -> str:
    if rest is None or rest == "":
        raise MissingArgumentError(message)
    return rest


def parse_index(raw: str, task_list: TaskList) -> int:
    """Parse a 1-based task number and check it against the list."""
    if not _INDEX_RE.fullmatch(raw):
        raise NotANumberError()
    try:
        index = int(raw)
    except ValueError as e:
        # Too many digits for int() to convert.
        raise NotANumberError() from e
    size = task_list.size()
    if size == 0:
        raise EmptyListError()
    if not 1 <= index <= size:
        raise IndexOutOfRangeError(size)
    return index


def parse_date(raw: str) -> date:
    """Strict yyyy-mm-dd."""
    if not _DATE_RE.fullmatch(raw):
        raise BadDateFormatError()
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise BadDateFormatError() from e


def split_task_args(rest: str, separator: str, usage: str) -> tuple[str, str]:
    """Split "<description><separator><date>" into exactly two non-empty parts."""
    parts = rest.split(separator)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise BadTaskFormatError(usage)
    return parts[0], parts[1]


# ---- handlers ----


def cmd_list(task_list: TaskList, rest: str | None) -> str:
    if rest is not None:
        raise UnexpectedArgumentError("OOPS!!! Do you mean 'list' ?")
    return task_list.render()


def cmd_done(task_list: TaskList, rest: str | None) -> str:
    raw = _require(rest, "OOPS!!! Which task do you want to mark as done?")
    return task_list.mark_done(parse_index(raw, task_list))


def cmd_delete(task_list: TaskList, rest: str | None) -> str:
    raw = _require(rest, "OOPS!!! Which task do you want to delete?")
    return task_list.delete(parse_index(raw, task_list))


def cmd_todo(task_list: TaskList, rest: str | None) -> str:
    description = _require(rest, "OOPS!!! The description of a todo task cannot be empty.")
    return task_list.add(plain_task(description))


def cmd_deadline(task_list: TaskList, rest: str | None) -> str:
    raw = _require(rest, "OOPS!!! The description of a deadline cannot be empty.")
    description, raw_date = split_task_args(raw, " /by ", DEADLINE_USAGE)
    return task_list.add(deadline_task(description, parse_date(raw_date)))


def cmd_event(task_list: TaskList, rest: str | None) -> str:
    raw = _require(rest, "OOPS!!! The description of an event cannot be empty.")
    description, raw_date = split_task_args(raw, " /at ", EVENT_USAGE)
    return task_list.add(event_task(description, parse_date(raw_date)))


def cmd_find(task_list: TaskList, rest: str | None) -> str:
    keyword = _require(rest, "OOPS!!! Type in the keyword you want to search.")
    return task_list.find(keyword)


def cmd_help(task_list: TaskList, rest: str | None) -> str:
    return registry.build_help()


registry.register("list", cmd_list, help_text="list - show all tasks")
registry.register("todo", cmd_todo, help_text="todo <description> - add a plain task")
registry.register("deadline", cmd_deadline, help_text=f"{DEADLINE_USAGE} - add a deadline")
registry.register("event", cmd_event, help_text=f"{EVENT_USAGE} - add an event")
registry.register("done", cmd_done, help_text="done <number> - mark a task as done")
registry.register("delete", cmd_delete, help_text="delete <number> - remove a task")
registry.register("find", cmd_find, help_text="find <keyword> - search task descriptions")
registry.register("help", cmd_help, help_text="help - show this help")


def interpret(task_list: TaskList, line: str) -> str:
    return registry.interpret(task_list, line)
