# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from doru.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DORU_APP_NAME", "DORU_LOG_LEVEL", "DORU_LOG_TO_FILE", "DORU_DATA_DIR", "DORU_PATH"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "doru"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.data_dir == Path("~/.doru").expanduser()
    assert s.todos_path == s.data_dir / "todos.json"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DORU_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DORU_LOG_TO_FILE", "yes")
    monkeypatch.delenv("DORU_PATH", raising=False)

    s = Settings.from_env()
    assert s.log_to_file is True
    assert s.todos_path == tmp_path / "todos.json"

    monkeypatch.setenv("DORU_PATH", str(tmp_path / "custom.json"))
    assert Settings.from_env().todos_path == tmp_path / "custom.json"
