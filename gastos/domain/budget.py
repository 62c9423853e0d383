"""Pure functions for budget calculations.

This module contains the functional core for budget progress:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

A budget of zero or less never divides: ratios and impacts come out as 0.0,
since the display layer does not guard against inf or NaN.
"""

import math
from dataclasses import dataclass

from gastos.domain.models import Money

DEFAULT_BUDGET = Money(3500.00)


@dataclass(frozen=True)
class BudgetProjection:
    """Immutable budget progress for the week."""

    ratio: float  # spent / budget, clamped to [0, 1] for progress bars
    remaining: Money  # negative when the budget is exceeded
    is_exceeded: bool


def calculate_progress_ratio(total_spent: Money, budget: Money) -> float:
    """Calculate how much of the budget is used, for a progress bar.

    Args:
        total_spent: Total spent this week.
        budget: Weekly budget.

    Returns:
        Ratio clamped to at most 1.0, or 0.0 when the budget is not positive.
    """
    if budget <= 0:
        return 0.0
    return min(total_spent / budget, 1.0)


def project_budget(total_spent: Money, budget: Money) -> BudgetProjection:
    """Derive progress, remaining amount and exceeded flag.

    Args:
        total_spent: Total spent this week.
        budget: Weekly budget.

    Returns:
        BudgetProjection. The clamp only applies to ``ratio``.
    """
    return BudgetProjection(
        ratio=calculate_progress_ratio(total_spent, budget),
        remaining=Money(budget - total_spent),
        is_exceeded=total_spent > budget,
    )


def project_category_impact(category_value: Money, budget: Money) -> float:
    """Calculate a category's share of the budget.

    Args:
        category_value: Amount spent in the category.
        budget: Weekly budget.

    Returns:
        Percentage of the budget (0-100+, not clamped).
    """
    if budget <= 0:
        return 0.0
    return (category_value / budget) * 100


def validate_budget(value: float) -> tuple[bool, str | None]:
    """Validate a new weekly budget.

    Args:
        value: Proposed budget.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return False, "Budget must be a number"

    if value <= 0:
        return False, "Budget must be positive"

    return True, None
