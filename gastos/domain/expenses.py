"""Pure functions for the expense collection.

This module contains the functional core for expense operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

The collection is an immutable tuple in insertion order (oldest first).
Every operation returns a new tuple; there is no update-in-place.
"""

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, TypedDict

from gastos.domain.models import CategoryName, ExpenseId, Money

_THOUSANDS_ONLY = re.compile(r"^\d{1,3}(\.\d{3})+$")


class ExpenseDraft(TypedDict):
    """Expense data as entered, before an id is assigned."""

    name: str
    value: float
    category: str
    date: str


@dataclass(frozen=True)
class Expense:
    """Immutable expense record.

    Records read back from storage are kept as found, so ``value`` and
    ``category`` may hold malformed data; aggregation copes with that.
    """

    id: ExpenseId
    name: str
    value: Money
    category: CategoryName
    date: str


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    """Convert an expense to its JSON-ready form."""
    return asdict(expense)


def expense_from_dict(raw: dict[str, Any]) -> Expense | None:
    """Rebuild an expense from its stored form.

    Args:
        raw: Dictionary as decoded from storage.

    Returns:
        Expense, or None if the record has no usable id.
    """
    raw_id = raw.get("id")
    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float)):
        return None
    # NaN, infinite and fractional ids cannot be matched for delete
    if isinstance(raw_id, float) and not (math.isfinite(raw_id) and raw_id.is_integer()):
        return None

    return Expense(
        id=ExpenseId(int(raw_id)),
        name=str(raw.get("name", "")),
        value=raw.get("value"),  # type: ignore[arg-type]
        category=CategoryName(str(raw.get("category", ""))),
        date=str(raw.get("date", "")),
    )


def validate_draft(draft: ExpenseDraft) -> tuple[bool, str | None]:
    """Validate an expense draft.

    Args:
        draft: Expense data as entered.

    Returns:
        Tuple of (is_valid, error_message).
    """
    name = draft.get("name")
    if not isinstance(name, str) or not name.strip():
        return False, "Name must not be empty"

    value = draft.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, "Amount must be a number"

    if not math.isfinite(value) or value <= 0:
        return False, "Amount must be positive"

    return True, None


def next_expense_id(current: tuple[Expense, ...], now_ms: int) -> ExpenseId:
    """Pick the id for a new expense.

    Ids are creation timestamps; when the clock has not moved past the
    newest id, the newest id plus one is used instead.

    Args:
        current: Existing expenses.
        now_ms: Current time in milliseconds since the epoch.

    Returns:
        Id greater than every existing id.
    """
    if not current:
        return ExpenseId(now_ms)
    newest = max(expense.id for expense in current)
    return ExpenseId(max(now_ms, newest + 1))


def add_expense(current: tuple[Expense, ...], draft: ExpenseDraft, now_ms: int) -> tuple[Expense, ...]:
    """Append a new expense to the collection.

    Invalid drafts are ignored and the collection is returned unchanged.

    Args:
        current: Existing expenses, oldest first.
        draft: Expense data as entered.
        now_ms: Current time in milliseconds since the epoch.

    Returns:
        New collection with the expense appended at the end.
    """
    is_valid, _ = validate_draft(draft)
    if not is_valid:
        return current

    expense = Expense(
        id=next_expense_id(current, now_ms),
        name=draft["name"].strip(),
        value=Money(float(draft["value"])),
        category=CategoryName(draft["category"]),
        date=draft["date"],
    )
    return (*current, expense)


def delete_expense(current: tuple[Expense, ...], expense_id: int) -> tuple[Expense, ...]:
    """Remove the expense with the given id.

    A missing id is not an error; an equal collection comes back.

    Args:
        current: Existing expenses.
        expense_id: Id of the expense to remove.

    Returns:
        New collection without the matching expense.
    """
    return tuple(expense for expense in current if expense.id != expense_id)


def find_expense(current: tuple[Expense, ...], expense_id: int) -> Expense | None:
    """Find an expense by id."""
    return next((expense for expense in current if expense.id == expense_id), None)


def history_order(current: tuple[Expense, ...]) -> list[Expense]:
    """List expenses most recent first, for display."""
    return list(reversed(current))


def parse_money_input(text: str) -> Money | None:
    """Parse an amount typed in Brazilian notation.

    "1.234,56", "25,50", "25.50" and "R$ 4,50" are all accepted. Without a
    comma, dots followed by groups of three digits are read as thousands
    separators ("1.234" is 1234), any other dot as the decimal point.

    Args:
        text: Raw user input.

    Returns:
        Parsed amount, or None if the input is not a finite number.
    """
    cleaned = text.strip().replace("R$", "").replace(" ", "")
    if not cleaned:
        return None

    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif _THOUSANDS_ONLY.match(cleaned):
        cleaned = cleaned.replace(".", "")

    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return Money(value)


def format_money(amount: float, symbol: str = "R$") -> str:
    """Format an amount for display with Brazilian separators.

    Args:
        amount: Amount to format.
        symbol: Currency symbol.

    Returns:
        Formatted string (e.g., "R$ 1.234,56" or "-R$ 500,00").
    """
    formatted = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {formatted}"
