# src/taskline/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..core.errors import ValidationError


class TaskKind(StrEnum):
    """
    Closed set of task variants.

    The values double as the on-disk kind tag (see task_store).
    """

    PLAIN = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def is_dated(self) -> bool:
        return self is not TaskKind.PLAIN


# Label rendered before the date of dated kinds: "(by: 2024-03-01)".
_DATE_LABELS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


# Set once in __init__; only `done` changes afterwards.
_READ_ONLY_FIELDS = frozenset({"kind", "description", "when"})


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    when: date | None = None
    done: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name in _READ_ONLY_FIELDS:
            try:
                getattr(self, name)
            except AttributeError:
                pass
            else:
                raise AttributeError(f"Task.{name} is read-only")
        object.__setattr__(self, name, value)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationError()
        object.__setattr__(self, "description", self.description.strip())

        if self.kind.is_dated and self.when is None:
            raise ValidationError(f"A {self.kind.name.lower()} task needs a date.")
        if not self.kind.is_dated and self.when is not None:
            raise ValidationError("A plain task cannot have a date.")

    def describe(self) -> str:
        return self.description

    def status_glyph(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> bool:
        """Mark as done. Returns True only if this call changed the state."""
        if self.done:
            return False
        self.done = True
        return True

    def render(self) -> str:
        suffix = ""
        if self.kind.is_dated:
            assert self.when is not None
            suffix = f" ({_DATE_LABELS[self.kind]}: {self.when.isoformat()})"
        return f"[{self.status_glyph()}] {self.description}{suffix}"

    def __str__(self) -> str:
        return self.render()


def plain_task(description: str) -> Task:
    return Task(kind=TaskKind.PLAIN, description=description)


def deadline_task(description: str, when: date) -> Task:
    return Task(kind=TaskKind.DEADLINE, description=description, when=when)


def event_task(description: str, when: date) -> Task:
    return Task(kind=TaskKind.EVENT, description=description, when=when)
