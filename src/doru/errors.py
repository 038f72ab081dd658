# src/doru/errors.py

"""Typed failures raised by the task core and reported by the CLI."""

from __future__ import annotations

from pathlib import Path


class DoruError(Exception):
    """Base class for every failure the CLI knows how to report."""


class InvalidInput(DoruError):
    pass


class NotFound(DoruError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found.")
        self.task_id = task_id


class StorageError(DoruError):
    """Failure tied to the backing file."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{reason} {path}")
        self.path = Path(path)


class CorruptStore(StorageError):
    def __init__(self, path: str | Path, detail: str = "") -> None:
        reason = "Failed parsing" if not detail else f"Failed parsing ({detail})"
        super().__init__(path, reason)
        self.detail = detail


class StorageUnavailable(StorageError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "Failed accessing")
