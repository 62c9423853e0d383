"""Tests for gastos.domain.categories."""

from gastos.domain.categories import (
    CATEGORIES,
    KNOWN_CATEGORIES,
    OUTROS,
    TRANSPORTE,
    VAZIO,
    category_color,
    match_category,
    resolve_category,
)


class TestCategoryTable:
    """Tests for the category lookup table."""

    def test_known_categories_in_display_order(self) -> None:
        """Should list real categories in display order, without Vazio."""
        assert KNOWN_CATEGORIES == ("Alimentação", "Transporte", "Lazer", "Moradia", "Outros")

    def test_every_category_has_one_color(self) -> None:
        """Should give every category, Vazio included, a colour."""
        assert set(CATEGORIES) == {*KNOWN_CATEGORIES, VAZIO}
        assert all(info.color.startswith("#") for info in CATEGORIES.values())

    def test_category_color(self) -> None:
        """Should look up colours and return None for unknown names."""
        assert category_color("Moradia") == "#10B981"
        assert category_color("Viagem") is None


class TestResolveCategory:
    """Tests for resolve_category."""

    def test_known(self) -> None:
        """Should keep known categories."""
        assert resolve_category("Transporte") == TRANSPORTE

    def test_unknown_goes_to_outros(self) -> None:
        """Should map unknown names, and Vazio, to Outros."""
        assert resolve_category("Unknown") == OUTROS
        assert resolve_category("Vazio") == OUTROS
        assert resolve_category("") == OUTROS


class TestMatchCategory:
    """Tests for match_category."""

    def test_exact_and_case_insensitive(self) -> None:
        """Should match names regardless of case."""
        assert match_category("Lazer") == "Lazer"
        assert match_category("lazer") == "Lazer"

    def test_without_accents(self) -> None:
        """Should match names typed without accents."""
        assert match_category("alimentacao") == "Alimentação"

    def test_by_index(self) -> None:
        """Should match 1-based positions."""
        assert match_category("1") == "Alimentação"
        assert match_category("5") == "Outros"
        assert match_category("6") is None
        assert match_category("0") is None

    def test_no_match(self) -> None:
        """Should return None for unknown input."""
        assert match_category("Viagem") is None
        assert match_category("") is None
        assert match_category("Vazio") is None
