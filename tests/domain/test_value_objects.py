"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, format_whole_amount


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("1500"))
        assert m.amount == Decimal("1500")
        assert m.currency == "ARS"

    def test_of_factory_from_string(self):
        assert Money.of("25990").amount == Decimal("25990")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_rejects_none(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(None)

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("1000") + Money.of("500") == Money.of("1500")

    def test_multiplication_by_int(self):
        assert Money.of("7500") * 3 == Money.of("22500")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "ARS") + Money(Decimal("5"), "USD")

    def test_str_uses_whole_pesos_with_grouping(self):
        assert str(Money.of("15000")) == "$15.000"
        assert str(Money.of("1234567")) == "$1.234.567"
        assert str(Money.of("999")) == "$999"

    def test_display_other_locale(self):
        assert Money.of("15000").display("en-US") == "$15,000"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestFormatWholeAmount:

    def test_rounds_half_up(self):
        assert format_whole_amount(Decimal("1499.5")) == "1.500"
        assert format_whole_amount(Decimal("1499.49")) == "1.499"

    def test_unknown_locale_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported locale"):
            format_whole_amount(Decimal("1"), "xx-XX")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
