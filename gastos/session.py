"""Session controller: owns the application state for one process.

The session loads state from storage once, applies user actions through the
pure reducers in ``gastos.domain.state`` and writes the changed slice back
after each one. The in-memory state is the source of truth; storage is a
best-effort mirror whose failures are absorbed by the store layer.
"""

import logging
import sqlite3
import time
from collections.abc import Callable
from pathlib import Path

from gastos.config import Settings
from gastos.domain.budget import DEFAULT_BUDGET, BudgetProjection, project_budget
from gastos.domain.expenses import Expense, ExpenseDraft, find_expense, history_order
from gastos.domain.models import Money, Screen
from gastos.domain.state import (
    AppState,
    apply_add_expense,
    apply_delete_expense,
    apply_login,
    apply_logout,
    apply_navigate,
    apply_set_budget,
    apply_set_theme,
    apply_toggle_theme,
    state_from_persisted,
    validate_credentials,
)
from gastos.domain.summary import Summary, summarize
from gastos.store.app_state import (
    clear_all,
    load_app_state,
    persist_auth,
    persist_budget,
    persist_expenses,
    persist_theme,
)
from gastos.store.schema import database_exists, init_database

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class Session:
    """Holds the current AppState and routes every mutation through it."""

    def __init__(
        self,
        state: AppState,
        db_path: Path | None = None,
        default_budget: Money = DEFAULT_BUDGET,
        clock: Callable[[], int] = now_ms,
        currency_symbol: str = "R$",
    ) -> None:
        self._state = state
        self.db_path = db_path
        self.default_budget = default_budget
        self.currency_symbol = currency_symbol
        self._clock = clock

    @classmethod
    def open(cls, settings: Settings, clock: Callable[[], int] = now_ms) -> "Session":
        """Load a session from storage, creating the database if needed.

        Args:
            settings: Effective settings.
            clock: Millisecond clock used for new expense ids.

        Returns:
            Session initialised from persisted values and defaults.
        """
        ensure_database(settings.db_path)
        persisted = load_app_state(settings.db_path)
        state = state_from_persisted(persisted, settings.default_budget)
        return cls(state, settings.db_path, settings.default_budget, clock, settings.currency_symbol)

    @property
    def state(self) -> AppState:
        return self._state

    def summary(self) -> Summary:
        """Summary of the current expenses, computed fresh on every call."""
        return summarize(self._state.expenses)

    def projection(self) -> BudgetProjection:
        """Budget progress for the current expenses and budget."""
        return project_budget(self.summary().total_spent, self._state.budget)

    def history(self) -> list[Expense]:
        """Expenses most recent first."""
        return history_order(self._state.expenses)

    def add_expense(self, draft: ExpenseDraft) -> Expense | None:
        """Add an expense.

        Args:
            draft: Expense data as entered.

        Returns:
            The stored expense, or None if the draft was rejected.
        """
        new_state = apply_add_expense(self._state, draft, self._clock())
        if new_state is self._state:
            logger.debug("Rejected expense draft: %r", draft)
            return None
        self._state = new_state
        persist_expenses(new_state.expenses, self.db_path)
        return new_state.expenses[-1]

    def delete_expense(self, expense_id: int) -> Expense | None:
        """Delete an expense.

        Args:
            expense_id: Id of the expense to delete.

        Returns:
            The removed expense, or None if no expense had that id.
        """
        removed = find_expense(self._state.expenses, expense_id)
        self._state = apply_delete_expense(self._state, expense_id)
        if removed is not None:
            persist_expenses(self._state.expenses, self.db_path)
        return removed

    def set_budget(self, budget: float) -> bool:
        """Set the weekly budget; returns False if the value was rejected."""
        new_state = apply_set_budget(self._state, budget)
        if new_state is self._state:
            return False
        self._state = new_state
        persist_budget(new_state.budget, self.db_path)
        return True

    def set_theme(self, is_dark_mode: bool) -> None:
        self._state = apply_set_theme(self._state, is_dark_mode)
        persist_theme(self._state.is_dark_mode, self.db_path)

    def toggle_theme(self) -> None:
        self._state = apply_toggle_theme(self._state)
        persist_theme(self._state.is_dark_mode, self.db_path)

    def login(self, email: str, password: str) -> tuple[bool, str | None]:
        """Simulated sign-in: any well-formed email and password is accepted.

        Args:
            email: Email address.
            password: Password.

        Returns:
            Tuple of (logged_in, error_message).
        """
        is_valid, error = validate_credentials(email, password)
        if not is_valid:
            return False, error
        self._state = apply_login(self._state)
        persist_auth(True, self.db_path)
        return True, None

    def logout(self) -> None:
        self._state = apply_logout(self._state)
        persist_auth(False, self.db_path)

    def navigate(self, screen: Screen) -> Screen:
        """Move to a screen; returns the screen actually shown."""
        self._state = apply_navigate(self._state, screen)
        return self._state.current_screen

    def reset(self) -> None:
        """Forget every persisted value and return to defaults."""
        clear_all(self.db_path)
        self._state = AppState(budget=self.default_budget)


def ensure_database(db_path: Path) -> None:
    """Create the database if it is missing.

    Failure is not fatal: storage falls back to memory for this process.

    Args:
        db_path: Path to the database file.
    """
    if database_exists(db_path):
        return
    try:
        init_database(db_path)
    except (sqlite3.Error, OSError) as e:
        logger.debug("Could not create database at %s, state will not persist: %s", db_path, e)
