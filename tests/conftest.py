# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from doru.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "doru"
    return SimpleNamespace(
        app_name="doru",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        todos_path=data_dir / "todos.json",
    )


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()
