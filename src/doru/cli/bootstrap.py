# src/doru/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- picks the store file (flag > DORU_PATH > default under data_dir),
- ensures the directory holding it exists,
- loads the TaskStore the command will operate on.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings
from ..errors import StorageUnavailable
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def resolve_todos_path(settings: Settings, cli_path: str | None = None) -> Path:
    if cli_path:
        return Path(cli_path).expanduser()
    return Path(settings.todos_path)


def ensure_storage_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailable(path.parent) from exc


def open_store(settings: Settings, cli_path: str | None = None) -> tuple[Path, TaskStore]:
    """Resolve the store path, make sure it is reachable and load it."""
    path = resolve_todos_path(settings, cli_path)
    ensure_storage_dir(path)
    store = TaskStore.load(path)
    logger.info("Using task store %s (%d tasks)", path, len(store))
    return path, store
