"""Storage layer - provides persistence for the application.

This module re-exports all public storage functions for easy importing.
"""

from gastos.store.app_state import (
    StorageKeys,
    clear_all,
    load_app_state,
    persist_auth,
    persist_budget,
    persist_expenses,
    persist_theme,
)
from gastos.store.kv import safe_get_item, safe_remove_item, safe_set_item
from gastos.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Key-value
    "safe_get_item",
    "safe_remove_item",
    "safe_set_item",
    # App state
    "StorageKeys",
    "clear_all",
    "load_app_state",
    "persist_auth",
    "persist_budget",
    "persist_expenses",
    "persist_theme",
]
