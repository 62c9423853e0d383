"""Admin commands for init and reset."""

import sqlite3
import sys
from pathlib import Path

import typer

from gastos.commands.common import console, load_settings, open_session
from gastos.config import create_default_config, get_config_path
from gastos.store.schema import database_exists, init_database


def prepare_storage(db_path: Path) -> None:
    """Make sure the kv table exists. Saved data is never touched."""
    existed = database_exists(db_path)
    init_database(db_path)
    if existed:
        console.print(f"[green]✓[/green] Database ready at {db_path} [dim](existing data kept)[/dim]")
    else:
        console.print(f"[green]✓[/green] Database created at {db_path}")


def write_config(config_path: Path) -> None:
    create_default_config(config_path)
    console.print(f"[green]✓[/green] Config written to {config_path} [dim](permissions: 600)[/dim]")


def init_command(force: bool = False) -> None:
    """Write the default config and prepare the database.

    The database is created on first use by every command, so only an
    existing config file stops init; --force rewrites it with defaults.

    Args:
        force: Replace an existing config file.
    """
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path}[/red]", style="bold")
        console.print("[yellow]Use 'gastos init --force' to reset it to defaults[/yellow]")
        sys.exit(1)

    try:
        write_config(config_path)
        prepare_storage(load_settings().db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Ready.[/green] Run 'gastos login' to start.", style="bold")


def reset_command(yes: bool = False) -> None:
    """Remove all saved data: expenses, budget, theme and login."""
    if not yes:
        confirmed = typer.confirm("Delete all expenses and settings?", default=False)
        if not confirmed:
            console.print("[dim]Cancelled[/dim]")
            return

    session = open_session()
    session.reset()
    console.print("[green]✓[/green] All saved data removed")
