"""Unit tests for Money value object."""

from decimal import Decimal

import pytest

from transfer_engine.domain.exceptions import CurrencyMismatchError, InvalidMoneyError
from transfer_engine.domain.value_objects.currency import EUR, TRY, USD, Currency
from transfer_engine.domain.value_objects.money import Money, to_decimal


class TestMoneyCreation:
    """Test Money value object creation."""

    def test_create_money_with_decimal(self):
        """Test creating money with Decimal amount."""
        money = Money(amount=Decimal("100.50"), currency=USD)
        assert money.amount == Decimal("100.50")
        assert money.currency == USD

    def test_create_money_with_int(self):
        """Test creating money with int amount."""
        money = Money(amount=100, currency=USD)
        assert money.amount == Decimal("100")

    def test_create_money_with_float(self):
        """Test creating money with float amount keeps its decimal form."""
        money = Money(amount=0.1, currency=USD)
        assert money.amount == Decimal("0.1")

    def test_amount_kept_exactly(self):
        """Test amounts finer than minor units are not rounded on creation."""
        assert Money(amount=Decimal("99.995"), currency=TRY).amount == Decimal("99.995")


class TestMoneyRounding:
    """Test rounding to minor units."""

    def test_half_rounds_away_from_zero(self):
        """Test halves round away from zero in both directions."""
        assert Money(amount=Decimal("2.675"), currency=TRY).rounded().amount == Decimal("2.68")
        assert Money(amount=Decimal("-2.675"), currency=TRY).rounded().amount == Decimal("-2.68")
        assert Money(amount=Decimal("2.665"), currency=TRY).rounded().amount == Decimal("2.67")

    def test_rounds_to_currency_minor_units(self):
        """Test rounding follows the currency's precision."""
        yen = Currency(numeric_code=9, code="JPY", symbol="¥", name="Yen", minor_units=0)
        assert Money(amount=Decimal("10.5"), currency=yen).rounded().amount == Decimal("11")


class TestMoneyValidation:
    """Test Money validation."""

    @pytest.mark.parametrize("value", ["invalid", "NaN", "Infinity", None, True])
    def test_invalid_amount_raises_error(self, value):
        """Test non-numeric and non-finite amounts raise error."""
        with pytest.raises(InvalidMoneyError):
            Money(amount=value, currency=USD)  # type: ignore

    def test_to_decimal_passes_decimals_through(self):
        """Test Decimal values are returned unchanged."""
        value = Decimal("1.23456")
        assert to_decimal(value) is value


class TestMoneyArithmetic:
    """Test Money arithmetic operations."""

    def test_add_money(self):
        """Test adding two money amounts."""
        result = Money(amount=100, currency=USD).add(Money(amount=50, currency=USD))
        assert result == Money(amount=150, currency=USD)

    def test_add_money_different_currency_raises_error(self):
        """Test adding money with different currencies raises error."""
        with pytest.raises(CurrencyMismatchError):
            Money(amount=100, currency=USD).add(Money(amount=50, currency=EUR))

    def test_subtract_money(self):
        """Test subtracting money."""
        result = Money(amount=100, currency=TRY).subtract(Money(amount=30, currency=TRY))
        assert result.amount == Decimal("70")

    def test_convert(self):
        """Test conversion rounds the product in the target currency."""
        result = Money(amount=100, currency=USD).convert(Decimal("32.15467"), TRY)
        assert result == Money(amount=Decimal("3215.47"), currency=TRY)

    def test_convert_uses_exact_source_amount(self):
        """Test the source amount is not rounded before conversion."""
        result = Money(amount=Decimal("0.005"), currency=TRY).convert(Decimal("1000"), USD)
        assert result.amount == Decimal("5.00")


class TestMoneyComparison:
    """Test Money comparison operations."""

    def test_equal_money_amounts(self):
        """Test equal money amounts."""
        assert Money(amount=100, currency=USD) == Money(amount="100.00", currency=USD)

    def test_same_amount_different_currency_not_equal(self):
        """Test currency takes part in equality."""
        assert Money(amount=100, currency=USD) != Money(amount=100, currency=EUR)


class TestMoneyFormatting:
    """Test Money display formatting."""

    def test_format_groups_thousands(self):
        """Test display form with grouping and symbol."""
        assert Money(amount=Decimal("1250.5"), currency=TRY).format() == "1,250.50 ₺"

    def test_str(self):
        """Test __str__ uses the ISO code."""
        assert str(Money(amount=3, currency=EUR)) == "EUR 3.00"

    def test_format_rounds_half_away_from_zero(self):
        """Test display form rounds sub-cent amounts."""
        assert Money(amount=Decimal("0.125"), currency=USD).format() == "0.13 $"
