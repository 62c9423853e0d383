"""Date utilities for gastos.

Expense dates are free-form display strings. These helpers produce the
default label and tidy up user input when it looks like a date.
"""

from datetime import date

import pandas as pd

DISPLAY_FORMAT = "%d/%m/%Y"


def today_label(today: date | None = None) -> str:
    """Format a date the way expenses show it (e.g., "19/10/2026").

    Args:
        today: Date to format. If None, uses the current date.

    Returns:
        Date in dd/mm/yyyy format.
    """
    if today is None:
        today = date.today()
    return today.strftime(DISPLAY_FORMAT)


def normalize_date_label(text: str) -> str:
    """Normalize a typed date to dd/mm/yyyy when it can be parsed.

    Day-first input is assumed ("3/4/2026" is 3 April). Anything that does
    not parse is kept verbatim, since dates are labels and never used for
    ordering.

    Args:
        text: Date as typed.

    Returns:
        Normalized label, or the stripped input if it is not a date.
    """
    cleaned = text.strip()
    if not cleaned:
        return cleaned
    try:
        parsed = pd.to_datetime(cleaned, dayfirst=True)
    except (ValueError, OverflowError):
        return cleaned
    if pd.isna(parsed):
        return cleaned
    return parsed.strftime(DISPLAY_FORMAT)
