"""Expense management commands (add, delete, list, categories)."""

import sys

import typer
from rich.table import Table

from gastos.commands.common import console, display_amount, enter_screen, money, open_session, palette_for
from gastos.dates import normalize_date_label, today_label
from gastos.domain.categories import CATEGORIES, DEFAULT_CATEGORY, KNOWN_CATEGORIES, category_color, match_category
from gastos.domain.expenses import ExpenseDraft, find_expense, parse_money_input, validate_draft
from gastos.domain.state import EXPENSE_LIST, HISTORY


def add_command(
    name: str,
    value: str,
    category: str | None = None,
    date: str | None = None,
) -> None:
    """Add an expense.

    Args:
        name: Expense name.
        value: Amount as typed ("25,50", "1.234,56" or "25.50").
        category: Category name or 1-based index. Defaults to the first category.
        date: Display date. Defaults to today.
    """
    session = open_session()
    enter_screen(session, HISTORY)

    amount = parse_money_input(value)
    if amount is None:
        console.print(f"[red]Invalid amount: {value}[/red]")
        sys.exit(1)

    if category is None:
        category_name = DEFAULT_CATEGORY
    else:
        matched = match_category(category)
        if matched is None:
            console.print(f"[red]Unknown category: {category}[/red]")
            console.print(f"[dim]Choose one of: {', '.join(KNOWN_CATEGORIES)}[/dim]")
            sys.exit(1)
        category_name = matched

    draft = ExpenseDraft(
        name=name,
        value=amount,
        category=category_name,
        date=normalize_date_label(date) if date else today_label(),
    )

    is_valid, error = validate_draft(draft)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    expense = session.add_expense(draft)
    if expense is None:
        console.print("[red]Expense was not saved[/red]")
        sys.exit(1)

    palette = palette_for(session)
    console.print(f"[green]✓[/green] {expense.name} of {money(session, expense.value)} saved")
    console.print(f"  [{palette.muted}]Category: {expense.category}  Date: {expense.date}  ID: {expense.id}[/]")


def delete_command(expense_id: int, yes: bool = False) -> None:
    """Delete an expense by id.

    Args:
        expense_id: Expense id (from 'gastos list').
        yes: Skip the confirmation prompt.
    """
    session = open_session()
    enter_screen(session, EXPENSE_LIST)

    target = find_expense(session.state.expenses, expense_id)
    if target is None:
        console.print(f"[yellow]No expense with ID {expense_id}[/yellow]")
        return

    if not yes:
        confirmed = typer.confirm(f"Delete '{target.name}' ({display_amount(session, target.value)})?", default=False)
        if not confirmed:
            console.print("[dim]Cancelled[/dim]")
            return

    session.delete_expense(expense_id)
    console.print(f"[green]✓[/green] Expense removed: {target.name}")


def list_command(limit: int = 50, all: bool = False) -> None:
    """List expenses, most recent first."""
    session = open_session()
    enter_screen(session, EXPENSE_LIST)

    history = session.history()
    if not history:
        console.print("[yellow]No expenses recorded yet.[/yellow]")
        return

    shown = history if all else history[:limit]
    if len(shown) == len(history):
        title = f"Expenses (showing all {len(shown)})"
    else:
        title = f"Expenses (showing {len(shown)} of {len(history)})"

    palette = palette_for(session)
    table = Table(title=title)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Category")
    table.add_column("Amount", justify="right")

    for expense in shown:
        color = category_color(expense.category) or palette.muted
        table.add_row(
            str(expense.id),
            expense.date,
            expense.name,
            f"[{color}]●[/] {expense.category}",
            display_amount(session, expense.value),
        )

    console.print(table)


def categories_command() -> None:
    """List the expense categories."""
    table = Table(title="Categories")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category")
    table.add_column("Color", style="dim")

    for idx, name in enumerate(KNOWN_CATEGORIES, 1):
        color = CATEGORIES[name].color
        table.add_row(str(idx), f"[{color}]●[/] {name}", color)

    console.print(table)
