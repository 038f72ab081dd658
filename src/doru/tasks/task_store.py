# src/doru/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path
from typing import Any

from ..errors import CorruptStore, InvalidInput, NotFound, StorageUnavailable
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class TaskStore:
    """
    In-memory task collection backed by a single JSON file.

    The whole file is read on load() and rewritten on save(); nothing is
    persisted implicitly. Every mutating method validates first and only then
    touches the collection, so a failed call leaves the store unchanged.

    File format:
        {"version": 1, "next_id": 4, "tasks": [{"id": 1, "description": "...", "status": "Open"}]}

    A bare list of task records (older files, "content" instead of
    "description") is also accepted; next_id is then recomputed from the ids.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, next_id: int = 1) -> None:
        self._tasks: list[Task] = []
        seen: set[int] = set()
        for task in tasks:
            if task.id is None:
                raise ValueError("tasks passed to TaskStore must already have an id")
            if task.id in seen:
                raise ValueError(f"duplicate task id {task.id}")
            seen.add(task.id)
            self._tasks.append(replace(task))

        last_id = max(seen, default=0)
        self._next_id = max(int(next_id), last_id + 1, 1)

    def __len__(self) -> int:
        return len(self._tasks)

    def __repr__(self) -> str:
        return f"TaskStore(tasks={len(self._tasks)}, next_id={self._next_id})"

    @property
    def next_id(self) -> int:
        """Identifier the next add() will hand out."""
        return self._next_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise NotFound(task_id)

    def to_document(self) -> dict[str, Any]:
        return {
            "version": FORMAT_VERSION,
            "next_id": self._next_id,
            "tasks": [t.to_dict() for t in self._tasks],
        }

    @classmethod
    def from_document(cls, data: Any) -> TaskStore:
        """
        Build a store from decoded JSON.

        Raises TypeError/ValueError on malformed data.
        """
        if isinstance(data, list):
            # legacy: bare list of records, counter derived from ids
            return cls([Task.from_dict(r) for r in data])

        if not isinstance(data, dict):
            raise TypeError(f"expected an object or a list, got {type(data).__name__}")

        raw_tasks = data.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise TypeError("'tasks' must be a list")

        next_id = data.get("next_id", 1)
        if not isinstance(next_id, int) or isinstance(next_id, bool) or next_id < 1:
            raise ValueError(f"invalid next_id {next_id!r}")

        return cls([Task.from_dict(r) for r in raw_tasks], next_id=next_id)

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path) -> TaskStore:
        """
        Read the store from `path`.

        - missing file -> empty store (first run)
        - empty / whitespace-only file -> empty store
        - unparsable content -> CorruptStore
        - any other OS error -> StorageUnavailable
        """
        path = Path(path)
        try:
            raw = path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No store at %s, starting empty", path)
            return cls()
        except UnicodeDecodeError as exc:
            raise CorruptStore(path, "not UTF-8 text") from exc
        except OSError as exc:
            raise StorageUnavailable(path) from exc

        if not raw.strip():
            return cls()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptStore(path, f"invalid JSON at line {exc.lineno}") from exc
        except RecursionError as exc:
            raise CorruptStore(path, "JSON nested too deeply") from exc

        try:
            store = cls.from_document(data)
        except (TypeError, ValueError) as exc:
            raise CorruptStore(path, str(exc)) from exc

        logger.debug("Loaded %s from %s", store, path)
        return store

    def save(self, path: str | Path) -> None:
        """
        Write the whole store to `path`.

        Writes a sibling temp file and renames it over `path`, so a failed
        save leaves the previous file untouched.
        """
        path = Path(path)
        tmp = path.with_name(path.name + ".tmp")
        payload = json.dumps(self.to_document(), ensure_ascii=False, indent=2)
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageUnavailable(path) from exc

        logger.debug("Saved %s to %s", self, path)

    # ---- public API ----

    def add(self, description: str) -> int:
        task = Task.new(description).with_id(self._next_id)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s", task.id)
        return int(task.id)  # type: ignore[arg-type]

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return replace(task)
        return None

    def list(self, status: TaskStatus | None = None) -> list[Task]:
        """Tasks in insertion order, optionally only those with `status`."""
        return [replace(t) for t in self._tasks if status is None or t.status == status]

    def edit(self, task_id: int, new_description: str) -> None:
        if not isinstance(new_description, str) or not new_description.strip():
            raise InvalidInput("Description must not be empty.")
        self._tasks[self._index_of(task_id)].set_description(new_description)
        logger.debug("Task edited id=%s", task_id)

    def set_status(self, task_id: int, new_status: TaskStatus) -> None:
        self._tasks[self._index_of(task_id)].set_status(new_status)
        logger.debug("Task status id=%s status=%s", task_id, new_status)

    def delete(self, task_id: int) -> None:
        del self._tasks[self._index_of(task_id)]
        logger.debug("Task deleted id=%s", task_id)
