# src/taskline/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Any

from ..core.errors import StorageReadError, StorageWriteError, ValidationError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON Lines task store.

    One JSON object per line, in list order:
      {"kind": "D", "done": 0, "description": "pay rent", "date": "2024-03-01"}

    "date" is present only for dated kinds. JSON string escaping keeps a
    description from ever breaking the line structure.

    Writes are atomic from the caller's point of view:
    - serialize into a temp file in the same directory
    - fsync, then os.replace() over the target
    """

    def __init__(self, path: str | Path = "tasks.jsonl") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- record codec ----

    @staticmethod
    def _task_to_record(task: Task) -> dict[str, Any]:
        record: dict[str, Any] = {
            "kind": task.kind.value,
            "done": 1 if task.done else 0,
            "description": task.description,
        }
        if task.when is not None:
            record["date"] = task.when.isoformat()
        return record

    @staticmethod
    def _record_to_task(record: Any) -> Task:
        if not isinstance(record, dict):
            raise ValueError("record is not an object")

        kind = TaskKind(record["kind"])
        done = record.get("done", 0)
        if done not in (0, 1):
            raise ValueError(f"bad done flag: {done!r}")

        raw_date = record.get("date")
        when = date.fromisoformat(raw_date) if raw_date is not None else None

        return Task(
            kind=kind,
            description=str(record["description"]),
            when=when,
            done=bool(done),
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        try:
            text = self._path.read_text("utf-8")
        except FileNotFoundError as e:
            raise StorageReadError(f"Save file not found: {self._path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError() from e

        tasks: list[Task] = []
        # Only "\n" ends a record; U+2028 and friends may appear raw inside a description.
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(self._record_to_task(json.loads(line)))
            except (ValueError, KeyError, TypeError, ValidationError) as e:
                logger.warning("Corrupt record at %s:%d: %s", self._path, lineno, e)
                raise StorageReadError(f"Save file is corrupt (line {lineno}).") from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = "".join(
            json.dumps(self._task_to_record(t), ensure_ascii=False) + "\n" for t in tasks
        )

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise StorageWriteError() from e
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

        with contextlib.suppress(OSError):
            # Task descriptions are personal; keep the file private on disk.
            os.chmod(self._path, 0o600)

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
