"""Expense categories and their display metadata.

The category set is closed and fixed for the lifetime of the process.
Every category, including the synthetic "Vazio" entry, has exactly one
colour, so colour and display order live in a single lookup table.
"""

import unicodedata
from dataclasses import dataclass

from gastos.domain.models import CategoryName


@dataclass(frozen=True)
class CategoryInfo:
    """Immutable display metadata for a category."""

    color: str
    order: int


ALIMENTACAO = CategoryName("Alimentação")
TRANSPORTE = CategoryName("Transporte")
LAZER = CategoryName("Lazer")
MORADIA = CategoryName("Moradia")
OUTROS = CategoryName("Outros")

# Synthetic category shown when nothing has been spent
VAZIO = CategoryName("Vazio")

CATEGORIES: dict[CategoryName, CategoryInfo] = {
    ALIMENTACAO: CategoryInfo(color="#3B82F6", order=0),
    TRANSPORTE: CategoryInfo(color="#60A5FA", order=1),
    LAZER: CategoryInfo(color="#93C5FD", order=2),
    MORADIA: CategoryInfo(color="#10B981", order=3),
    OUTROS: CategoryInfo(color="#F87171", order=4),
    VAZIO: CategoryInfo(color="#E5E7EB", order=5),
}

# Categories an expense can be filed under, in display order
KNOWN_CATEGORIES: tuple[CategoryName, ...] = tuple(
    sorted((name for name in CATEGORIES if name != VAZIO), key=lambda name: CATEGORIES[name].order)
)

DEFAULT_CATEGORY = KNOWN_CATEGORIES[0]


def category_color(name: str) -> str | None:
    """Get the display colour for a category.

    Args:
        name: Category name.

    Returns:
        Hex colour string, or None if the category is unknown.
    """
    info = CATEGORIES.get(CategoryName(name))
    return info.color if info else None


def resolve_category(name: str, known: tuple[CategoryName, ...] = KNOWN_CATEGORIES) -> CategoryName:
    """Map a category name onto the known set.

    Unknown names fold into "Outros". The caller's record is not touched.

    Args:
        name: Category name as stored on an expense.
        known: Known categories.

    Returns:
        The category the value should be accumulated under.
    """
    if name in known:
        return CategoryName(name)
    return OUTROS


def match_category(text: str) -> CategoryName | None:
    """Match user input against known categories.

    Accepts the exact name, a case-insensitive name, a name typed without
    accents, or a 1-based index into the display order.

    Args:
        text: Raw user input.

    Returns:
        Matching category, or None if nothing matches.
    """
    cleaned = text.strip()
    if not cleaned:
        return None

    if cleaned.isdigit():
        idx = int(cleaned) - 1
        if 0 <= idx < len(KNOWN_CATEGORIES):
            return KNOWN_CATEGORIES[idx]
        return None

    wanted = _fold(cleaned)
    for name in KNOWN_CATEGORIES:
        if _fold(name) == wanted:
            return name
    return None


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
