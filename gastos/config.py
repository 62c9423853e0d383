"""Configuration file management for gastos."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from gastos.domain.budget import DEFAULT_BUDGET
from gastos.domain.models import Money
from gastos.store.schema import get_db_path

DB_PATH_ENV = "GASTOS_DB"


@dataclass(frozen=True)
class Settings:
    """Effective settings after merging the config file over defaults."""

    db_path: Path
    default_budget: Money
    currency_symbol: str


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "gastos" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "default_budget": float(DEFAULT_BUDGET),
        "currency_symbol": "R$",
        "storage": {"path": str(get_db_path())},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Build Settings from a config dictionary, ignoring bad values.

    Args:
        config: Configuration dictionary (may be partial).

    Returns:
        Settings with defaults for anything missing or malformed.
    """
    defaults = default_config()

    storage = config.get("storage")
    raw_path = storage.get("path") if isinstance(storage, dict) else None
    db_path = Path(raw_path).expanduser() if isinstance(raw_path, str) and raw_path else get_db_path()

    env_path = os.environ.get(DB_PATH_ENV)
    if env_path:
        db_path = Path(env_path).expanduser()

    raw_budget = config.get("default_budget")
    if isinstance(raw_budget, (int, float)) and not isinstance(raw_budget, bool) and raw_budget > 0:
        default_budget = Money(float(raw_budget))
    else:
        default_budget = Money(defaults["default_budget"])

    symbol = config.get("currency_symbol")
    if not isinstance(symbol, str) or not symbol:
        symbol = defaults["currency_symbol"]

    return Settings(db_path=db_path, default_budget=default_budget, currency_symbol=symbol)


def get_settings(config_path: Path | None = None) -> Settings:
    """Load effective settings; a missing config file means all defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings.

    Raises:
        tomllib.TOMLDecodeError: If the config file exists but is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    return settings_from_config(config)
