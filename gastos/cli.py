"""CLI entry point for gastos."""

import logging

import typer
from rich.logging import RichHandler

from gastos.commands.admin import init_command, reset_command
from gastos.commands.auth import login_command, logout_command
from gastos.commands.expenses import add_command, categories_command, delete_command, list_command
from gastos.commands.report import dashboard_command, stats_command
from gastos.commands.settings import budget_command, theme_command

app = typer.Typer(
    name="gastos",
    help="Registro de Gastos da Semana - track your weekly spending against a budget",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Send log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=False, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging (storage fallbacks, rejected input)"
    ),
) -> None:
    """Registro de Gastos da Semana - track your weekly spending against a budget."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Rewrite an existing config with defaults (saved data is kept)"
    ),
) -> None:
    """Write the default config and prepare the database."""
    init_command(force)


@app.command()
def login(
    email: str = typer.Option(None, "--email", "-e", help="Email address (prompted if omitted)"),
    password: str = typer.Option(None, "--password", help="Password (prompted if omitted)"),
) -> None:
    """Log in to see and record your expenses."""
    login_command(email, password)


@app.command()
def logout() -> None:
    """Log out."""
    logout_command()


@app.command()
def add(
    name: str,
    value: str,
    category: str = typer.Option(None, "--category", "-c", help="Category name or number (default: Alimentação)"),
    date: str = typer.Option(None, "--date", "-d", help="Date label (default: today, dd/mm/yyyy)"),
) -> None:
    """Add an expense, e.g. gastos add Almoço 25,50 -c Alimentação."""
    add_command(name, value, category, date)


@app.command()
def delete(
    expense_id: int,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete an expense by ID."""
    delete_command(expense_id, yes)


@app.command(name="list")
def list_expenses(
    limit: int = typer.Option(50, help="Maximum expenses to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all your expenses"),
) -> None:
    """List your expenses, most recent first."""
    list_command(limit, all)


@app.command()
def dashboard() -> None:
    """Show your weekly budget progress and spending by category."""
    dashboard_command()


@app.command()
def stats() -> None:
    """Show your budget situation and per-category statistics."""
    stats_command()


@app.command()
def budget(
    set_value: str = typer.Option(None, "--set", help="Set your weekly budget (e.g. 3.500,00)"),
) -> None:
    """Show or set your weekly budget."""
    budget_command(set_value)


@app.command()
def theme(
    dark: bool = typer.Option(False, "--dark", help="Use the dark theme"),
    light: bool = typer.Option(False, "--light", help="Use the light theme"),
) -> None:
    """Switch between the light and dark theme (toggles when no option is given)."""
    if dark and light:
        raise typer.BadParameter("Choose either --dark or --light")
    if dark:
        theme_command(True)
    elif light:
        theme_command(False)
    else:
        theme_command(None)


@app.command()
def categories() -> None:
    """List the expense categories."""
    categories_command()


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Remove all saved expenses and settings."""
    reset_command(yes)


if __name__ == "__main__":
    app()
