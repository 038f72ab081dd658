# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from doru.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_filter_keeps_own_logs_and_drops_third_party(restore_root_logging) -> None:
    setup_logging(console_level=logging.DEBUG)
    (console,) = logging.getLogger().handlers

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert console.filter(record("doru.tasks.task_store", logging.DEBUG))
    assert not console.filter(record("urllib3", logging.WARNING))
    assert console.filter(record("urllib3", logging.ERROR))
    assert not console.filter(record("py.warnings", logging.WARNING))


def test_file_handler_writes_log(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("doru.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in (tmp_path / "logs" / "doru.log").read_text("utf-8")
