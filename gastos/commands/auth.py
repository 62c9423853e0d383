"""Login and logout commands.

Authentication is simulated locally: any well-formed email with a password
of six or more characters is accepted. Nothing leaves the machine.
"""

import sys

import typer

from gastos.commands.common import console, open_session


def login_command(email: str | None = None, password: str | None = None) -> None:
    """Log in, prompting for missing credentials."""
    session = open_session()

    if session.state.is_authenticated:
        console.print("[dim]Already logged in[/dim]")
        return

    if email is None:
        email = typer.prompt("Email", type=str)
    if password is None:
        password = typer.prompt("Password", type=str, hide_input=True)

    logged_in, error = session.login(email, password)
    if not logged_in:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Logged in as {email.strip()}")


def logout_command() -> None:
    """Log out. Expenses and settings are kept."""
    session = open_session()
    session.logout()
    console.print("[green]✓[/green] Session closed")
