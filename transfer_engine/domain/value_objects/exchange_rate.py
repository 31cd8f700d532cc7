"""Exchange rate value object."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from transfer_engine.domain.exceptions import (
    InvalidExchangeRateError,
    InvalidMoneyError,
)
from transfer_engine.domain.value_objects.currency import Currency
from transfer_engine.domain.value_objects.money import to_decimal


@dataclass(frozen=True)
class ExchangeRate:
    """
    Conversion rate for an ordered currency pair.

    ``rate`` is the number of ``to_currency`` units one unit of
    ``from_currency`` buys. Rates are strictly positive.
    """

    from_currency: Currency
    to_currency: Currency
    rate: Decimal
    last_updated: datetime | None = None

    def __post_init__(self) -> None:
        """Coerce rate to Decimal and validate it."""
        try:
            rate = to_decimal(self.rate)
        except InvalidMoneyError:
            raise InvalidExchangeRateError(self.pair, repr(self.rate))

        if rate <= 0:
            raise InvalidExchangeRateError(self.pair, str(rate))

        object.__setattr__(self, "rate", rate)

    @property
    def key(self) -> tuple[int, int]:
        """Lookup key: ordered pair of numeric currency codes."""
        return (self.from_currency.numeric_code, self.to_currency.numeric_code)

    @property
    def pair(self) -> str:
        """Currency pair string like 'TRY/USD'."""
        return f"{self.from_currency.code}/{self.to_currency.code}"

    def __repr__(self) -> str:
        return f"ExchangeRate({self.pair}={self.rate})"
