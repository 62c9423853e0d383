"""Shared fixtures: every test gets its own database, config and data dirs and memory store."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from gastos.store.kv import clear_memory


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    db_path = tmp_path / "data" / "gastos.db"
    monkeypatch.setenv("GASTOS_DB", str(db_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))
    clear_memory()
    yield db_path
    clear_memory()
