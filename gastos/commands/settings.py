"""Settings commands for the weekly budget and the theme."""

import sys

from gastos.commands.common import console, enter_screen, money, open_session, palette_for
from gastos.domain.budget import validate_budget
from gastos.domain.expenses import parse_money_input
from gastos.domain.state import SETTINGS


def budget_command(set_value: str | None = None) -> None:
    """Show or set the weekly budget.

    Args:
        set_value: New budget as typed ("3.500,00" or "3500"). If None, only shows it.
    """
    session = open_session()
    enter_screen(session, SETTINGS)

    if set_value is None:
        palette = palette_for(session)
        console.print(f"Weekly budget: [{palette.primary}]{money(session, session.state.budget)}[/]")
        return

    amount = parse_money_input(set_value)
    if amount is None:
        console.print(f"[red]Invalid amount: {set_value}[/red]")
        sys.exit(1)

    is_valid, error = validate_budget(amount)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    session.set_budget(amount)
    console.print(f"[green]✓[/green] Weekly budget saved as {money(session, session.state.budget)}")


def theme_command(dark: bool | None = None) -> None:
    """Show, set or toggle the theme.

    Args:
        dark: True for dark, False for light, None to toggle.
    """
    session = open_session()

    if dark is None:
        session.toggle_theme()
    else:
        session.set_theme(dark)

    palette = palette_for(session)
    name = "dark" if session.state.is_dark_mode else "light"
    console.print(f"[{palette.primary}]Theme: {name}[/]")
