"""Application state and the pure reducers that update it.

Every reducer takes a state snapshot and returns a new one; nothing here
touches storage. The session controller persists whichever slice changed.
"""

import re
from dataclasses import dataclass, replace

from gastos.domain.budget import DEFAULT_BUDGET, validate_budget
from gastos.domain.expenses import Expense, ExpenseDraft, add_expense, delete_expense
from gastos.domain.models import Money, Screen

WELCOME = Screen("welcome")
LOGIN = Screen("login")
DASHBOARD = Screen("dashboard")
HISTORY = Screen("history")
EXPENSE_LIST = Screen("expense_list")
STATS = Screen("stats")
SETTINGS = Screen("settings")

# Screens that need a logged-in user
PROTECTED_SCREENS = frozenset({DASHBOARD, HISTORY, EXPENSE_LIST, STATS, SETTINGS})

_EMAIL_PATTERN = re.compile(r".+@.+\..+")
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of the whole application state."""

    is_authenticated: bool = False
    is_dark_mode: bool = False
    budget: Money = DEFAULT_BUDGET
    expenses: tuple[Expense, ...] = ()
    current_screen: Screen = WELCOME


@dataclass(frozen=True)
class PersistedState:
    """Values read back from storage; None means the key was never written."""

    is_dark_mode: bool | None = None
    budget: Money | None = None
    expenses: tuple[Expense, ...] | None = None
    is_authenticated: bool | None = None


def state_from_persisted(persisted: PersistedState, default_budget: Money = DEFAULT_BUDGET) -> AppState:
    """Build the startup state, using defaults only for absent values.

    Args:
        persisted: Values loaded from storage.
        default_budget: Budget to use when none was saved.

    Returns:
        Initial AppState.
    """
    return AppState(
        is_authenticated=persisted.is_authenticated if persisted.is_authenticated is not None else False,
        is_dark_mode=persisted.is_dark_mode if persisted.is_dark_mode is not None else False,
        budget=persisted.budget if persisted.budget is not None else default_budget,
        expenses=persisted.expenses if persisted.expenses is not None else (),
    )


def apply_add_expense(state: AppState, draft: ExpenseDraft, now_ms: int) -> AppState:
    """Add an expense. Invalid drafts leave the state unchanged."""
    expenses = add_expense(state.expenses, draft, now_ms)
    if expenses is state.expenses:
        return state
    return replace(state, expenses=expenses)


def apply_delete_expense(state: AppState, expense_id: int) -> AppState:
    """Delete an expense by id. A missing id leaves the expenses unchanged."""
    return replace(state, expenses=delete_expense(state.expenses, expense_id))


def apply_set_budget(state: AppState, budget: float) -> AppState:
    """Set the weekly budget. Non-positive or non-finite values are ignored."""
    is_valid, _ = validate_budget(budget)
    if not is_valid:
        return state
    return replace(state, budget=Money(float(budget)))


def apply_set_theme(state: AppState, is_dark_mode: bool) -> AppState:
    return replace(state, is_dark_mode=is_dark_mode)


def apply_toggle_theme(state: AppState) -> AppState:
    return replace(state, is_dark_mode=not state.is_dark_mode)


def apply_login(state: AppState) -> AppState:
    """Mark the user as logged in and land on the dashboard."""
    return replace(state, is_authenticated=True, current_screen=DASHBOARD)


def apply_logout(state: AppState) -> AppState:
    """Log out and return to the welcome screen. Expenses are kept."""
    return replace(state, is_authenticated=False, current_screen=WELCOME)


def apply_navigate(state: AppState, screen: Screen) -> AppState:
    """Move to a screen, redirecting to login when it needs a session.

    Args:
        state: Current state.
        screen: Requested screen.

    Returns:
        New state showing either the requested screen or the login screen.
    """
    if screen in PROTECTED_SCREENS and not state.is_authenticated:
        return replace(state, current_screen=LOGIN)
    return replace(state, current_screen=screen)


def validate_credentials(email: str, password: str) -> tuple[bool, str | None]:
    """Validate login input for the simulated sign-in.

    Args:
        email: Email address.
        password: Password.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not _EMAIL_PATTERN.search(email.strip()):
        return False, "Invalid email"

    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must have at least {MIN_PASSWORD_LENGTH} characters"

    return True, None
