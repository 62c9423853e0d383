"""Reading and writing the persisted application state.

Four keys make up the state; each is read and written independently.
Load functions return None for a key that was never written, so callers
apply defaults only on true absence and never on a valid falsy value.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any

from gastos.domain.expenses import Expense, expense_from_dict, expense_to_dict
from gastos.domain.models import Money
from gastos.domain.state import PersistedState
from gastos.store.kv import safe_get_item, safe_remove_item, safe_set_item

logger = logging.getLogger(__name__)


class StorageKeys:
    THEME = "app.theme"
    BUDGET = "app.budget"
    EXPENSES = "app.expenses"
    AUTH = "app.auth"

    ALL = (THEME, BUDGET, EXPENSES, AUTH)


def parse_theme(raw: str | None) -> bool | None:
    """Parse the stored theme; True means dark mode."""
    if not raw:
        return None
    return raw == "dark"


def parse_auth(raw: str | None) -> bool | None:
    if not raw:
        return None
    return raw == "1"


def parse_budget(raw: str | None) -> Money | None:
    """Parse the stored budget.

    Args:
        raw: Stored string.

    Returns:
        Budget, or None if unset or unparseable.
    """
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring stored budget %r: not a number", raw)
        return None
    if not math.isfinite(value):
        logger.warning("Ignoring stored budget %r: not finite", raw)
        return None
    return Money(value)


def parse_expenses(raw: str | None) -> tuple[Expense, ...] | None:
    """Decode the stored expense list.

    Records without a usable id are dropped; other malformed fields are
    kept as found and left for aggregation to skip.

    Args:
        raw: Stored JSON string.

    Returns:
        Expenses in stored order, or None if unset or not a JSON array.
    """
    if not raw:
        return None
    try:
        decoded: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring stored expenses: %s", e)
        return None
    if not isinstance(decoded, list):
        logger.warning("Ignoring stored expenses: expected a list, got %s", type(decoded).__name__)
        return None

    expenses: list[Expense] = []
    for item in decoded:
        expense = expense_from_dict(item) if isinstance(item, dict) else None
        if expense is None:
            logger.warning("Dropping stored expense without an id: %r", item)
            continue
        expenses.append(expense)
    return tuple(expenses)


def load_app_state(db_path: Path | None = None) -> PersistedState:
    """Load all persisted values.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        PersistedState with None for every absent key.
    """
    return PersistedState(
        is_dark_mode=parse_theme(safe_get_item(StorageKeys.THEME, db_path)),
        budget=parse_budget(safe_get_item(StorageKeys.BUDGET, db_path)),
        expenses=parse_expenses(safe_get_item(StorageKeys.EXPENSES, db_path)),
        is_authenticated=parse_auth(safe_get_item(StorageKeys.AUTH, db_path)),
    )


def persist_theme(is_dark_mode: bool, db_path: Path | None = None) -> None:
    safe_set_item(StorageKeys.THEME, "dark" if is_dark_mode else "light", db_path)


def persist_budget(budget: Money, db_path: Path | None = None) -> None:
    safe_set_item(StorageKeys.BUDGET, str(budget), db_path)


def persist_expenses(expenses: tuple[Expense, ...], db_path: Path | None = None) -> None:
    payload = [expense_to_dict(expense) for expense in expenses]
    safe_set_item(StorageKeys.EXPENSES, json.dumps(payload, ensure_ascii=False), db_path)


def persist_auth(is_authenticated: bool, db_path: Path | None = None) -> None:
    safe_set_item(StorageKeys.AUTH, "1" if is_authenticated else "0", db_path)


def clear_all(db_path: Path | None = None) -> None:
    """Remove every persisted key.

    Args:
        db_path: Path to the database file. If None, uses default location.
    """
    for key in StorageKeys.ALL:
        safe_remove_item(key, db_path)
