"""Unit tests for ExchangeRate value object and RateTable."""

from decimal import Decimal

import pytest

from transfer_engine.domain.exceptions import (
    DuplicateExchangeRateError,
    InvalidExchangeRateError,
)
from transfer_engine.domain.value_objects.currency import EUR, TRY, USD
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.rate_table import RateTable


class TestExchangeRate:
    """Test ExchangeRate value object."""

    def test_rate_coerced_to_decimal(self):
        """Test float rates become Decimal through their string form."""
        rate = ExchangeRate(from_currency=TRY, to_currency=USD, rate=0.031)
        assert rate.rate == Decimal("0.031")

    @pytest.mark.parametrize("value", [0, Decimal("-1.5"), "abc", "NaN"])
    def test_non_positive_or_invalid_rate_raises_error(self, value):
        """Test rates must be strictly positive numbers."""
        with pytest.raises(InvalidExchangeRateError) as exc_info:
            ExchangeRate(from_currency=TRY, to_currency=USD, rate=value)
        assert "TRY/USD" in str(exc_info.value)

    def test_pair_and_key(self):
        """Test pair label and lookup key follow the ordered pair."""
        rate = ExchangeRate(from_currency=USD, to_currency=EUR, rate=Decimal("0.92"))
        assert rate.pair == "USD/EUR"
        assert rate.key == (2, 3)

    def test_last_updated_optional(self):
        """Test timestamp defaults to None."""
        rate = ExchangeRate(from_currency=USD, to_currency=EUR, rate=1)
        assert rate.last_updated is None


class TestRateTable:
    """Test RateTable snapshot."""

    def test_find_ordered_pair(self, try_usd_rate, usd_try_rate):
        """Test lookup by ordered pair."""
        table = RateTable([try_usd_rate, usd_try_rate])
        assert table.find(TRY, USD) is try_usd_rate
        assert table.find(USD, TRY) is usd_try_rate

    def test_find_does_not_derive_inverse(self, try_usd_rate):
        """Test a rate is not used in the reverse direction."""
        table = RateTable([try_usd_rate])
        assert table.find(USD, TRY) is None

    def test_find_missing_pair(self, rates):
        """Test missing pair returns None."""
        assert RateTable(rates).find(TRY, EUR) is None

    def test_duplicate_pair_raises_error(self, try_usd_rate):
        """Test at most one rate per ordered pair."""
        other = ExchangeRate(from_currency=TRY, to_currency=USD, rate=Decimal("0.03"))
        with pytest.raises(DuplicateExchangeRateError):
            RateTable([try_usd_rate, other])

    def test_of_returns_table_unchanged(self, rates):
        """Test of() does not rebuild an existing table."""
        table = RateTable(rates)
        assert RateTable.of(table) is table

    def test_of_builds_table_from_iterable(self, rates):
        """Test of() accepts any iterable of rates."""
        table = RateTable.of(iter(rates))
        assert len(table) == 2
        assert set(table) == set(rates)

    def test_empty_table(self):
        """Test empty snapshot."""
        table = RateTable()
        assert len(table) == 0
        assert table.find(TRY, USD) is None

    def test_equality(self, try_usd_rate, usd_try_rate):
        """Test tables with the same rates are equal regardless of order."""
        assert RateTable([try_usd_rate, usd_try_rate]) == RateTable(
            [usd_try_rate, try_usd_rate]
        )
