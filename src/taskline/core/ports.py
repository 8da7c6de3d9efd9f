# src/taskline/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on this Protocol instead of the concrete file store,
which keeps storage swappable and lets tests use in-memory fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable round-trip of the whole ordered task sequence."""

    def load(self) -> list[Task]:
        """Raise StorageReadError if the medium is missing, unreadable or corrupt."""
        ...

    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the stored sequence. Raise StorageWriteError on failure."""
        ...
