# src/taskline/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import StorageReadError, StorageWriteError
from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "There is no task in the list."
NO_MATCHES_MESSAGE = "There are no tasks matching the given keyword."


def _count_phrase(n: int) -> str:
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


class TaskList:
    """
    Ordered, in-memory task collection backed by a TaskRepo.

    External indices are 1-based. Every mutation saves the whole list once;
    a failed save is logged and reported in the returned message, the
    in-memory change is kept.
    """

    def __init__(self, store: TaskRepo, tasks: Iterable[Task] = ()) -> None:
        self._store = store
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def load(cls, store: TaskRepo) -> TaskList:
        """Build from the store; an unreadable store yields an empty list."""
        try:
            tasks = store.load()
        except StorageReadError as e:
            logger.warning("%s Starting with an empty task list.", e.user_message)
            tasks = []
        return cls(store, tasks)

    # ---- internals ----

    def _persist(self) -> str:
        """Save the list. Returns a warning line for the reply, or ""."""
        try:
            self._store.save(self._tasks)
        except StorageWriteError as e:
            logger.exception("Saving task list failed.")
            return f"\nWarning: {e.user_message}"
        return ""

    def _check_index(self, index: int) -> None:
        assert 1 <= index <= len(self._tasks), f"task index {index} out of bounds"

    # ---- mutations ----

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind.value, len(self._tasks))
        return (
            "Got it. I've added this task:\n"
            f"  {task.render()}\n"
            f"{_count_phrase(len(self._tasks))}"
        ) + self._persist()

    def mark_done(self, index: int) -> str:
        self._check_index(index)
        task = self._tasks[index - 1]
        if task.mark_done():
            head = "Nice! I've marked this task as done:"
        else:
            head = "This task is already done!"
        return f"{head}\n  {task.render()}" + self._persist()

    def delete(self, index: int) -> str:
        self._check_index(index)
        task = self._tasks.pop(index - 1)
        logger.debug("Task deleted index=%d size=%d", index, len(self._tasks))
        return (
            "Noted. I've removed this task:\n"
            f"  {task.render()}\n"
            f"{_count_phrase(len(self._tasks))}"
        ) + self._persist()

    # ---- queries ----

    def find(self, keyword: str) -> str:
        lines = [
            f"{i}.{task.render()}"
            for i, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        ]
        if not lines:
            return NO_MATCHES_MESSAGE
        return "\n".join(lines)

    def render(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "\n".join(f"{i}.{task.render()}" for i, task in enumerate(self._tasks, start=1))

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        """0-based access, like a list."""
        return self._tasks[index]
