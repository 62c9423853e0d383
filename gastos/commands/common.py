"""Helpers shared by the command modules."""

import sys
import tomllib
from dataclasses import dataclass

from rich.console import Console

from gastos.config import Settings, get_config_path, get_settings, settings_from_config
from gastos.domain.expenses import format_money
from gastos.domain.models import Screen
from gastos.domain.state import LOGIN
from gastos.session import Session

console = Console()


@dataclass(frozen=True)
class Palette:
    primary: str
    danger: str
    muted: str


LIGHT = Palette(primary="#3B82F6", danger="#DC2626", muted="#4B5563")
DARK = Palette(primary="#60A5FA", danger="#EF4444", muted="#D1D5DB")


def load_settings() -> Settings:
    """Load settings, falling back to defaults on a broken config file."""
    try:
        return get_settings()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[yellow]Ignoring invalid config {get_config_path()}: {e}[/yellow]")
        return settings_from_config({})


def open_session() -> Session:
    return Session.open(load_settings())


def palette_for(session: Session) -> Palette:
    return DARK if session.state.is_dark_mode else LIGHT


def money(session: Session, amount: float) -> str:
    """Format an amount with the session's currency symbol."""
    return format_money(amount, session.currency_symbol)


def enter_screen(session: Session, screen: Screen) -> None:
    """Switch to a screen, exiting if it needs a login the user lacks.

    Args:
        session: Current session.
        screen: Screen the command renders.
    """
    if session.navigate(screen) == LOGIN:
        console.print("[red]You need to log in first.[/red] Run 'gastos login'.", style="bold")
        sys.exit(1)


def display_amount(session: Session, raw: object) -> str:
    """Format a stored expense value, showing malformed ones as found."""
    try:
        return money(session, float(raw))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return f"[{palette_for(session).danger}]{raw!r}[/]"
