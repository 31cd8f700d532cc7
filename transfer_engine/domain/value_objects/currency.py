"""Currency value object and currency registry."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal

from transfer_engine.domain.exceptions import (
    InvalidCurrencyError,
    UnsupportedCurrencyError,
)


@dataclass(frozen=True)
class Currency:
    """
    Currency supported by the ledger.

    The ledger identifies currencies by a small numeric code on the wire
    (TRY=1, USD=2, EUR=3). Each currency carries its display symbol, display
    name and the number of minor-unit digits used for settlement.
    """

    numeric_code: int
    code: str
    symbol: str
    name: str
    minor_units: int = 2

    def __post_init__(self) -> None:
        """Validate currency definition."""
        if self.numeric_code <= 0:
            raise InvalidCurrencyError(
                f"numeric code must be positive, got {self.numeric_code}"
            )

        if len(self.code) != 3 or not self.code.isalpha():
            raise InvalidCurrencyError(f"code must be 3 letters, got {self.code!r}")

        if not self.symbol:
            raise InvalidCurrencyError(f"symbol cannot be empty for {self.code}")

        if not 0 <= self.minor_units <= 8:
            raise InvalidCurrencyError(
                f"minor units must be between 0 and 8, got {self.minor_units}"
            )

        object.__setattr__(self, "code", self.code.upper())

    @property
    def quantum(self) -> Decimal:
        """Smallest settlement step, e.g. Decimal('0.01') for two minor units."""
        return Decimal(1).scaleb(-self.minor_units)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency.{self.code}"


TRY = Currency(numeric_code=1, code="TRY", symbol="₺", name="Türk Lirası")
USD = Currency(numeric_code=2, code="USD", symbol="$", name="Amerikan Doları")
EUR = Currency(numeric_code=3, code="EUR", symbol="€", name="Euro")

DEFAULT_CURRENCIES: tuple[Currency, ...] = (TRY, USD, EUR)


class CurrencyRegistry:
    """
    Lookup table from currency codes to currency definitions.

    The registry is a configuration table rather than a closed enum, so new
    currencies can be supported by extending it. Registries are immutable;
    ``extend`` returns a new registry.
    """

    def __init__(self, currencies: Iterable[Currency]):
        """
        Build a registry.

        Args:
            currencies: Currency definitions

        Raises:
            InvalidCurrencyError: If two definitions share a numeric or ISO code
        """
        by_numeric: dict[int, Currency] = {}
        codes: set[str] = set()
        for currency in currencies:
            if currency.numeric_code in by_numeric:
                raise InvalidCurrencyError(
                    f"duplicate numeric code {currency.numeric_code}"
                )
            if currency.code in codes:
                raise InvalidCurrencyError(f"duplicate code {currency.code}")
            by_numeric[currency.numeric_code] = currency
            codes.add(currency.code)

        self._by_numeric = by_numeric

    @classmethod
    def default(cls) -> "CurrencyRegistry":
        """Registry with the three currencies the ledger ships with."""
        return cls(DEFAULT_CURRENCIES)

    def extend(self, currencies: Iterable[Currency]) -> "CurrencyRegistry":
        """Return a new registry with additional currencies."""
        return CurrencyRegistry([*self, *currencies])

    def get(self, numeric_code: int) -> Currency:
        """
        Get currency by its numeric wire code.

        Args:
            numeric_code: Numeric currency code (e.g. 1 for TRY)

        Returns:
            Currency definition

        Raises:
            UnsupportedCurrencyError: If code is not registered
        """
        try:
            return self._by_numeric[numeric_code]
        except KeyError:
            raise UnsupportedCurrencyError(
                str(numeric_code), [str(code) for code in self._by_numeric]
            )

    def __contains__(self, numeric_code: object) -> bool:
        return numeric_code in self._by_numeric

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._by_numeric.values())

    def __len__(self) -> int:
        return len(self._by_numeric)
