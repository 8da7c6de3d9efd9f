# tests/test_task_store.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from taskline.core.errors import StorageReadError, StorageWriteError
from taskline.tasks.task_models import deadline_task, event_task, plain_task
from taskline.tasks.task_store import TaskStore


def test_round_trip_mixed_tasks(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.jsonl")

    done_event = event_task("team offsite", date(2025, 6, 12))
    done_event.mark_done()
    tasks = [
        plain_task("buy milk"),
        deadline_task("pay rent", date(2024, 3, 1)),
        done_event,
        # Characters that would break a naive delimited format.
        plain_task('quote " pipe | newline\\n and unicode: ünïcödé'),
        plain_task("buy milk"),
    ]

    store.save(tasks)
    loaded = store.load()

    assert loaded == tasks
    assert [t.kind for t in loaded] == [t.kind for t in tasks]
    assert loaded[2].done is True


def test_round_trip_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.jsonl")
    store.save([])
    assert store.load() == []


def test_record_layout(tmp_path: Path) -> None:
    path = tmp_path / "tasks.jsonl"
    store = TaskStore(path)
    todo = plain_task("a")
    todo.mark_done()
    store.save([todo, deadline_task("b", date(2024, 3, 1))])

    records = [json.loads(line) for line in path.read_text("utf-8").splitlines()]
    assert records == [
        {"kind": "T", "done": 1, "description": "a"},
        {"kind": "D", "done": 0, "description": "b", "date": "2024-03-01"},
    ]


def test_save_replaces_whole_file_and_leaves_no_temp(tmp_path: Path) -> None:
    path = tmp_path / "tasks.jsonl"
    store = TaskStore(path)
    store.save([plain_task("one"), plain_task("two")])
    store.save([plain_task("three")])

    assert [t.description for t in store.load()] == ["three"]
    assert [p.name for p in tmp_path.iterdir()] == ["tasks.jsonl"]


def test_save_creates_parent_dirs(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "dir" / "tasks.jsonl")
    store.save([plain_task("x")])
    assert len(store.load()) == 1


def test_missing_file_is_read_error(tmp_path: Path) -> None:
    with pytest.raises(StorageReadError):
        TaskStore(tmp_path / "nope.jsonl").load()


@pytest.mark.parametrize(
    "content",
    [
        "not json\n",
        '{"kind": "X", "done": 0, "description": "a"}\n',
        '{"kind": "T", "done": 2, "description": "a"}\n',
        '{"kind": "T", "done": 0, "description": ""}\n',
        '{"kind": "D", "done": 0, "description": "a"}\n',
        '{"kind": "D", "done": 0, "description": "a", "date": "2024-02-30"}\n',
        '{"kind": "T", "done": 0}\n',
        "[1, 2, 3]\n",
    ],
)
def test_corrupt_file_is_read_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.jsonl"
    path.write_text(content, "utf-8")
    with pytest.raises(StorageReadError):
        TaskStore(path).load()


def test_blank_lines_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "tasks.jsonl"
    path.write_text('\n{"kind": "T", "done": 0, "description": "a"}\n\n', "utf-8")
    assert [t.description for t in TaskStore(path).load()] == ["a"]


def test_unwritable_location_is_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", "utf-8")
    # Parent "directory" is a regular file, so nothing can be created under it.
    store = TaskStore(blocker / "tasks.jsonl")
    with pytest.raises(StorageWriteError):
        store.save([plain_task("x")])


def test_round_trip_unicode_line_separators(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.jsonl")
    tasks = [
        plain_task("a\u2028b"),
        plain_task("c\x85d"),
        deadline_task("e\u2028f", date(2024, 3, 1)),
        event_task("g\u2029h", date(2024, 3, 2)),
        plain_task("last"),
    ]

    store.save(tasks)

    assert store.load() == tasks
