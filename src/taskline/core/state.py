# src/taskline/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    task_store: TaskRepo
    task_list: TaskList

    # Held around every dispatch: one writer for the task list + store pair.
    lock: threading.RLock = field(default_factory=threading.RLock)
