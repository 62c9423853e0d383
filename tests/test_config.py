"""Tests for gastos.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from gastos.config import (
    create_default_config,
    get_config_path,
    get_settings,
    load_config,
    save_config,
    settings_from_config,
)
from gastos.store.schema import get_db_path


class TestConfigFile:
    """Tests for reading and writing the config file."""

    def test_config_path_follows_xdg(self, tmp_path: Path) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        assert get_config_path() == tmp_path / "config" / "gastos" / "config.toml"

    def test_create_default_config(self, tmp_path: Path) -> None:
        """Should write defaults with owner-only permissions."""
        path = tmp_path / "cfg" / "config.toml"

        create_default_config(path)

        config = load_config(path)
        assert config["default_budget"] == 3500.0
        assert config["currency_symbol"] == "R$"
        assert config["storage"]["path"] == str(get_db_path())
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Should round-trip a config dictionary."""
        path = tmp_path / "config.toml"

        save_config({"default_budget": 800.0}, path)

        assert load_config(path) == {"default_budget": 800.0}

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")


class TestSettings:
    """Tests for settings_from_config and get_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use defaults when no config exists."""
        monkeypatch.delenv("GASTOS_DB")

        settings = get_settings(tmp_path / "nope.toml")

        assert settings.db_path == get_db_path()
        assert settings.default_budget == 3500.0
        assert settings.currency_symbol == "R$"

    def test_default_db_path_follows_xdg_data_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read XDG_DATA_HOME when settings are built, not at import."""
        monkeypatch.delenv("GASTOS_DB")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))

        settings = settings_from_config({})

        assert settings.db_path == tmp_path / "share" / "gastos" / "gastos.db"

    def test_values_from_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read budget, symbol and storage path from the file."""
        monkeypatch.delenv("GASTOS_DB")
        path = tmp_path / "config.toml"
        save_config(
            {"default_budget": 700, "currency_symbol": "€", "storage": {"path": str(tmp_path / "x.db")}},
            path,
        )

        settings = get_settings(path)

        assert settings.default_budget == 700.0
        assert settings.currency_symbol == "€"
        assert settings.db_path == tmp_path / "x.db"

    def test_env_overrides_storage_path(self, tmp_path: Path) -> None:
        """Should prefer GASTOS_DB over the config file."""
        settings = settings_from_config({"storage": {"path": "/somewhere/else.db"}})

        assert settings.db_path == tmp_path / "data" / "gastos.db"

    def test_bad_values_fall_back(self) -> None:
        """Should ignore malformed values."""
        settings = settings_from_config({"default_budget": -5, "currency_symbol": 3, "storage": "oops"})

        assert settings.default_budget == 3500.0
        assert settings.currency_symbol == "R$"

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should surface broken TOML to the caller."""
        path = tmp_path / "config.toml"
        path.write_text("default_budget = = 3")

        with pytest.raises(tomllib.TOMLDecodeError):
            get_settings(path)
