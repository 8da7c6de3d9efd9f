# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskline.core.state import AppState
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_store import TaskStore

from .fakes import InMemoryTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskline",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.jsonl",
        log_dir=tmp_path / "logs",
        frame_output=False,
        frame_width=60,
    )


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def task_list(store: InMemoryTaskStore) -> TaskList:
    return TaskList(store)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real file store under tmp_path.

    The file store's round-trip is part of what the end-to-end tests check.
    """
    file_store = TaskStore(settings.tasks_path)
    return AppState(
        settings=settings,
        task_store=file_store,
        task_list=TaskList.load(file_store),
    )
