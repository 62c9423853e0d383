"""Pure functions for expense aggregation.

This module contains the functional core for the spending summary:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

A summary is recomputed from the full expense list on every read. Expense
counts are small (one user, one week), so there is no caching and no
incremental update; calling summarize twice on the same list yields equal
results.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from gastos.domain.categories import CATEGORIES, KNOWN_CATEGORIES, OUTROS, VAZIO, category_color, resolve_category
from gastos.domain.expenses import Expense
from gastos.domain.models import CategoryName, Money


@dataclass(frozen=True)
class CategoryAggregate:
    """Immutable spending total for one category."""

    name: CategoryName
    value: Money
    percentage: int  # of total spend, rounded half up
    color: str


EMPTY_AGGREGATE = CategoryAggregate(
    name=VAZIO,
    value=Money(0.0),
    percentage=100,
    color=CATEGORIES[VAZIO].color,
)


@dataclass(frozen=True)
class EmptySummary:
    """Summary of a week with nothing spent."""

    total_spent: Money = Money(0.0)

    @property
    def categories(self) -> tuple[CategoryAggregate, ...]:
        """The single synthetic Vazio entry at 100%."""
        return (EMPTY_AGGREGATE,)

    @property
    def breakdown(self) -> tuple[CategoryAggregate, ...]:
        """Real categories only (none)."""
        return ()

    @property
    def top_category(self) -> CategoryAggregate | None:
        return None


@dataclass(frozen=True)
class SpendingSummary:
    """Summary of a week with at least one valid expense."""

    total_spent: Money
    aggregates: tuple[CategoryAggregate, ...]

    @property
    def categories(self) -> tuple[CategoryAggregate, ...]:
        return self.aggregates

    @property
    def breakdown(self) -> tuple[CategoryAggregate, ...]:
        return self.aggregates

    @property
    def top_category(self) -> CategoryAggregate | None:
        return self.aggregates[0] if self.aggregates else None


Summary = EmptySummary | SpendingSummary


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Python's round() rounds halves to even, which would turn 12.5% into 12.

    Args:
        value: Number to round.

    Returns:
        Rounded integer.
    """
    return math.floor(value + 0.5)


def coerce_expense_value(raw: Any) -> Money | None:
    """Read an expense value as a positive finite amount.

    Persisted data may carry strings or garbage; numeric strings are
    accepted, everything else is rejected.

    Args:
        raw: Value as found on the expense record.

    Returns:
        Amount, or None if the value is not a valid positive number.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value) or value <= 0:
        return None
    return Money(value)


def accumulate_by_category(
    expenses: Iterable[Expense],
    categories: tuple[CategoryName, ...] = KNOWN_CATEGORIES,
) -> tuple[Money, dict[CategoryName, Money]]:
    """Sum valid expense values, overall and per category.

    Malformed values are skipped silently. Unknown categories count
    towards "Outros".

    Args:
        expenses: Expense records.
        categories: Known categories, in display order.

    Returns:
        Tuple of (total_spent, totals) where totals holds every known
        category in display order, zero included, plus "Outros" last when
        the known set lacks it.
    """
    totals: dict[CategoryName, Money] = {name: Money(0.0) for name in categories}
    totals.setdefault(OUTROS, Money(0.0))
    total_spent = 0.0

    for expense in expenses:
        value = coerce_expense_value(expense.value)
        if value is None:
            continue

        total_spent += value
        category = resolve_category(expense.category, categories)
        totals[category] = Money(totals[category] + value)

    return Money(total_spent), totals


def summarize(
    expenses: Iterable[Expense],
    categories: tuple[CategoryName, ...] = KNOWN_CATEGORIES,
) -> Summary:
    """Build the category breakdown for a list of expenses.

    Args:
        expenses: Expense records, in any order.
        categories: Known categories, in display order (breaks ties).

    Returns:
        EmptySummary when nothing valid was spent, otherwise a
        SpendingSummary sorted by percentage, highest first.
    """
    total_spent, totals = accumulate_by_category(expenses, categories)

    if total_spent == 0:
        return EmptySummary()

    aggregates = [
        CategoryAggregate(
            name=name,
            value=value,
            percentage=round_half_up(100 * value / total_spent),
            color=category_color(name) or CATEGORIES[OUTROS].color,
        )
        for name, value in totals.items()
        if value > 0
    ]

    # sorted() is stable, so categories with equal percentages keep display order
    aggregates = sorted(aggregates, key=lambda agg: agg.percentage, reverse=True)

    return SpendingSummary(total_spent=total_spent, aggregates=tuple(aggregates))


def dominant_color(summary: Summary) -> str:
    """Get the colour standing in for the pie chart.

    Args:
        summary: Spending summary.

    Returns:
        Colour of the largest slice, or the Vazio colour when nothing was spent.
    """
    return summary.categories[0].color


def calculate_bar_length(percentage: float, bar_width: int) -> int:
    """Calculate bar length for a percentage.

    Args:
        percentage: Percentage to display (clamped to 0-100).
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if bar_width <= 0:
        return 0
    clamped = min(max(percentage, 0.0), 100.0)
    return int(clamped / 100 * bar_width)
