# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from taskline.cli.bootstrap import create_initial_state
from taskline.logging_setup import setup_logging


def test_missing_store_starts_empty(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)
    assert state.task_list.size() == 0
    assert settings.data_dir.is_dir()


def test_corrupt_store_starts_empty_with_warning(
    settings: SimpleNamespace, caplog: pytest.LogCaptureFixture
) -> None:
    settings.data_dir.mkdir(parents=True)
    settings.tasks_path.write_text("{broken\n", "utf-8")

    with caplog.at_level(logging.WARNING, logger="taskline"):
        state = create_initial_state(settings=settings)

    assert state.task_list.size() == 0
    assert "Starting with an empty task list." in caplog.text


def test_setup_logging_writes_file(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskline.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "taskline.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
