"""
Unit tests for Money.

Tests cover:
- Construction and amount coercion
- Arithmetic and comparison within one currency
- Currency mismatch handling
- Immutability and formatting
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from orderflow.exceptions import CurrencyMismatchError
from orderflow.money import DEFAULT_CURRENCY, Money


class TestMoneyConstruction:
    def test_defaults(self):
        money = Money()
        assert money.amount == Decimal("0")
        assert money.currency == DEFAULT_CURRENCY

    def test_positional_amount_and_currency(self):
        money = Money(10, "USD")
        assert money.amount == Decimal("10")
        assert money.currency == "USD"

    def test_string_amount(self):
        assert Money("5.50").amount == Decimal("5.50")

    def test_float_goes_through_string(self):
        """Floats must not leak binary representation errors."""
        assert Money(0.1).amount == Decimal("0.1")

    def test_invalid_currency_rejected(self):
        with pytest.raises(ValidationError):
            Money(10, "eur")

    def test_zero(self):
        zero = Money.zero("USD")
        assert zero.is_zero()
        assert zero.currency == "USD"

    def test_frozen(self):
        money = Money(10)
        with pytest.raises(ValidationError):
            money.amount = Decimal("20")  # type: ignore[misc]


class TestMoneyArithmetic:
    def test_add(self):
        assert Money("5.50") + Money(10) == Money("15.50")

    def test_subtract_can_go_negative(self):
        result = Money(10) - Money(15)
        assert result == Money(-5)
        assert result.is_negative()

    def test_negate(self):
        assert -Money(5) == Money(-5)

    def test_multiply_by_int(self):
        assert Money(10) * 3 == Money(30)
        assert 3 * Money(10) == Money(30)

    def test_multiply_by_decimal(self):
        assert Money(10) * Decimal("1.5") == Money(15)

    def test_multiply_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money(10) * True  # noqa: B018

    def test_add_non_money_rejected(self):
        with pytest.raises(TypeError):
            Money(10) + 5  # type: ignore[operator]

    def test_sum(self):
        assert Money.sum([Money(1), Money(2), Money("0.5")]) == Money("3.5")

    def test_sum_of_nothing_is_zero(self):
        assert Money.sum([], "USD") == Money.zero("USD")

    def test_predicates(self):
        assert Money(1).is_positive()
        assert not Money(0).is_positive()
        assert Money(0).is_zero()
        assert Money(-1).is_negative()


class TestMoneyCurrencies:
    def test_add_different_currency_raises(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            Money(10, "EUR") + Money(10, "USD")
        assert exc_info.value.expected == "EUR"
        assert exc_info.value.actual == "USD"

    def test_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            Money(10, "EUR") - Money(1, "GBP")

    def test_compare_different_currency_raises(self):
        with pytest.raises(CurrencyMismatchError):
            _ = Money(10, "USD") < Money(1)

    def test_sum_checks_currency(self):
        with pytest.raises(CurrencyMismatchError):
            Money.sum([Money(1, "USD")])


class TestMoneyComparison:
    def test_ordering(self):
        assert Money(10) < Money(11)
        assert Money(11) > Money(10)
        assert Money(10) <= Money(10)
        assert Money(10) >= Money(10)

    def test_equality_ignores_scale(self):
        assert Money(10) == Money("10.00")

    def test_equality_respects_currency(self):
        assert Money(10, "EUR") != Money(10, "USD")


class TestMoneyFormatting:
    def test_str(self):
        assert str(Money(10)) == "10.00 EUR"
        assert str(Money("3.5", "USD")) == "3.50 USD"
