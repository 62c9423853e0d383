"""Tests for gastos.domain.expenses pure functions."""

from gastos.domain.expenses import (
    Expense,
    ExpenseDraft,
    add_expense,
    delete_expense,
    expense_from_dict,
    expense_to_dict,
    find_expense,
    format_money,
    history_order,
    next_expense_id,
    parse_money_input,
    validate_draft,
)
from gastos.domain.models import CategoryName, ExpenseId, Money


def make_draft(name: str = "Lunch", value: float = 25.50, category: str = "Alimentação") -> ExpenseDraft:
    return ExpenseDraft(name=name, value=value, category=category, date="19/10/2026")


class TestAddExpense:
    """Tests for add_expense."""

    def test_appends_with_timestamp_id(self) -> None:
        """Should append a new expense with the clock as id."""
        result = add_expense((), make_draft(), now_ms=1_000)

        assert len(result) == 1
        assert result[0] == Expense(
            id=ExpenseId(1_000),
            name="Lunch",
            value=Money(25.50),
            category=CategoryName("Alimentação"),
            date="19/10/2026",
        )

    def test_keeps_insertion_order(self) -> None:
        """Should put the newest expense last."""
        first = add_expense((), make_draft("Lunch"), now_ms=1_000)
        second = add_expense(first, make_draft("Bus", 4.50, "Transporte"), now_ms=2_000)

        assert [e.name for e in second] == ["Lunch", "Bus"]

    def test_does_not_mutate_input(self) -> None:
        """Should return a new collection."""
        original = add_expense((), make_draft(), now_ms=1_000)
        updated = add_expense(original, make_draft("Bus"), now_ms=2_000)

        assert len(original) == 1
        assert len(updated) == 2

    def test_ids_stay_unique_when_clock_stalls(self) -> None:
        """Should bump the id when the clock has not moved."""
        first = add_expense((), make_draft(), now_ms=1_000)
        second = add_expense(first, make_draft(), now_ms=1_000)

        assert [e.id for e in second] == [1_000, 1_001]

    def test_ids_increase_when_clock_goes_back(self) -> None:
        """Should keep ids increasing even if the clock steps back."""
        first = add_expense((), make_draft(), now_ms=5_000)
        second = add_expense(first, make_draft(), now_ms=3_000)

        assert second[1].id == 5_001

    def test_strips_name(self) -> None:
        """Should trim whitespace around the name."""
        result = add_expense((), make_draft("  Lunch  "), now_ms=1)

        assert result[0].name == "Lunch"

    def test_ignores_empty_name(self) -> None:
        """Should return the collection unchanged for a blank name."""
        current = add_expense((), make_draft(), now_ms=1)

        assert add_expense(current, make_draft(name="   "), now_ms=2) is current

    def test_ignores_non_positive_value(self) -> None:
        """Should return the collection unchanged for zero or negative values."""
        assert add_expense((), make_draft(value=0.0), now_ms=1) == ()
        assert add_expense((), make_draft(value=-3.0), now_ms=1) == ()

    def test_ignores_non_finite_value(self) -> None:
        """Should return the collection unchanged for inf and NaN."""
        assert add_expense((), make_draft(value=float("nan")), now_ms=1) == ()
        assert add_expense((), make_draft(value=float("inf")), now_ms=1) == ()


class TestValidateDraft:
    """Tests for validate_draft."""

    def test_valid(self) -> None:
        """Should accept a complete draft."""
        assert validate_draft(make_draft()) == (True, None)

    def test_empty_name(self) -> None:
        """Should reject an empty name."""
        assert validate_draft(make_draft(name="")) == (False, "Name must not be empty")

    def test_non_numeric_value(self) -> None:
        """Should reject a value that is not a number."""
        draft = make_draft()
        draft["value"] = "25,50"  # type: ignore[typeddict-item]

        assert validate_draft(draft) == (False, "Amount must be a number")

    def test_non_positive_value(self) -> None:
        """Should reject zero."""
        assert validate_draft(make_draft(value=0)) == (False, "Amount must be positive")


class TestDeleteExpense:
    """Tests for delete_expense."""

    def test_removes_matching_expense(self) -> None:
        """Should drop only the expense with the given id."""
        current = add_expense(add_expense((), make_draft("Lunch"), now_ms=1), make_draft("Bus"), now_ms=2)

        result = delete_expense(current, 1)

        assert [e.name for e in result] == ["Bus"]

    def test_missing_id_is_a_no_op(self) -> None:
        """Should return an equal collection when nothing matches."""
        current = add_expense((), make_draft(), now_ms=1)

        assert delete_expense(current, 999) == current

    def test_empty_collection(self) -> None:
        """Should not fail on an empty collection."""
        assert delete_expense((), 1) == ()


class TestFindExpense:
    """Tests for find_expense."""

    def test_finds_by_id(self) -> None:
        """Should return the matching expense or None."""
        current = add_expense((), make_draft(), now_ms=7)

        assert find_expense(current, 7) == current[0]
        assert find_expense(current, 8) is None


class TestHistoryOrder:
    """Tests for history_order."""

    def test_most_recent_first(self) -> None:
        """Should list the newest expense first without touching the input."""
        current = add_expense(add_expense((), make_draft("Lunch"), now_ms=1), make_draft("Bus"), now_ms=2)

        assert [e.name for e in history_order(current)] == ["Bus", "Lunch"]
        assert [e.name for e in current] == ["Lunch", "Bus"]


class TestNextExpenseId:
    """Tests for next_expense_id."""

    def test_first_id_is_clock(self) -> None:
        """Should use the clock for the first expense."""
        assert next_expense_id((), 42) == 42


class TestExpenseDict:
    """Tests for expense_to_dict and expense_from_dict."""

    def test_to_dict_shape(self) -> None:
        """Should produce the stored JSON shape."""
        expense = add_expense((), make_draft(), now_ms=10)[0]

        assert expense_to_dict(expense) == {
            "id": 10,
            "name": "Lunch",
            "value": 25.50,
            "category": "Alimentação",
            "date": "19/10/2026",
        }

    def test_from_dict_keeps_malformed_value(self) -> None:
        """Should keep a bad value as found for aggregation to skip."""
        expense = expense_from_dict({"id": 3, "name": "X", "value": "abc", "category": "Lazer", "date": ""})

        assert expense is not None
        assert expense.value == "abc"

    def test_from_dict_without_id(self) -> None:
        """Should reject records without a numeric id."""
        assert expense_from_dict({"name": "X", "value": 1}) is None
        assert expense_from_dict({"id": "1", "name": "X"}) is None
        assert expense_from_dict({"id": True, "name": "X"}) is None

    def test_from_dict_float_id(self) -> None:
        """Should accept ids stored as floats."""
        expense = expense_from_dict({"id": 1700000000000.0, "name": "X", "value": 1, "category": "Lazer"})

        assert expense is not None
        assert expense.id == 1700000000000


class TestParseMoneyInput:
    """Tests for parse_money_input."""

    def test_brazilian_decimal_comma(self) -> None:
        """Should read a comma as the decimal separator."""
        assert parse_money_input("25,50") == 25.50

    def test_thousands_and_decimals(self) -> None:
        """Should read dots as thousands separators when a comma is present."""
        assert parse_money_input("1.234,56") == 1234.56

    def test_dot_decimal(self) -> None:
        """Should read a lone dot with two decimals as the decimal point."""
        assert parse_money_input("25.50") == 25.50

    def test_dot_thousands(self) -> None:
        """Should read dot-separated groups of three as thousands."""
        assert parse_money_input("1.234") == 1234.0
        assert parse_money_input("3.500") == 3500.0

    def test_currency_symbol(self) -> None:
        """Should ignore the currency symbol."""
        assert parse_money_input("R$ 4,50") == 4.50

    def test_invalid(self) -> None:
        """Should return None for anything that is not a finite number."""
        for text in ("", "   ", "abc", "nan", "inf", "1,2,3"):
            assert parse_money_input(text) is None


class TestFormatMoney:
    """Tests for format_money."""

    def test_brazilian_separators(self) -> None:
        """Should use dots for thousands and a comma for decimals."""
        assert format_money(1234.56) == "R$ 1.234,56"
        assert format_money(25.5) == "R$ 25,50"

    def test_zero(self) -> None:
        """Should format zero."""
        assert format_money(0) == "R$ 0,00"

    def test_negative(self) -> None:
        """Should put the sign before the symbol."""
        assert format_money(-500) == "-R$ 500,00"

    def test_custom_symbol(self) -> None:
        """Should use the given symbol."""
        assert format_money(1_000_000, "€") == "€ 1.000.000,00"
