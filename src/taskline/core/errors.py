# src/taskline/core/errors.py

"""
Error taxonomy.

Every user-facing error carries a fixed message so connectors can print it as-is.
The dispatcher turns CommandError / ValidationError into replies; storage errors
are reported by the task list and never abort a command.
"""

from __future__ import annotations

from typing import ClassVar


class TasklineError(Exception):
    """Base class for all taskline errors."""

    message: ClassVar[str] = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class ValidationError(TasklineError):
    message = "OOPS!!! The description of a task cannot be empty."


# ---- command errors ----


class CommandError(TasklineError):
    message = "OOPS!!! Invalid command."


class UnknownCommandError(CommandError):
    message = "OOPS!!! I'm sorry, but I don't know what that means :-("


class NotANumberError(CommandError):
    message = "OOPS!!! The task number you typed in is not a number."


class IndexOutOfRangeError(CommandError):
    message = "OOPS!!! The task number should be between 1 and {upper}."

    def __init__(self, upper: int) -> None:
        self.upper = upper
        super().__init__(self.message.format(upper=upper))


class EmptyListError(CommandError):
    message = "OOPS!!! The task list is currently empty."


class BadDateFormatError(CommandError):
    message = "OOPS!!! Wrong date format. Correct format should be yyyy-mm-dd"


class BadTaskFormatError(CommandError):
    message = "OOPS!!! Wrong format."

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(f"{self.message}\nCorrect format should be: {usage}")


class MissingArgumentError(CommandError):
    message = "OOPS!!! This command needs an argument."


class UnexpectedArgumentError(CommandError):
    message = "OOPS!!! This command takes no arguments."


# ---- storage errors ----


class StorageError(TasklineError):
    message = "Task storage failed."


class StorageReadError(StorageError):
    message = "Can't read the save file."


class StorageWriteError(StorageError):
    message = "Can't write the save file. Your last change is kept in memory only."
