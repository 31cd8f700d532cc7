"""Rate table value object (an exchange rate snapshot)."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from transfer_engine.domain.exceptions import DuplicateExchangeRateError
from transfer_engine.domain.value_objects.currency import Currency
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate


class RateTable:
    """
    Immutable snapshot of exchange rates keyed by ordered currency pair.

    A snapshot holds at most one rate per ordered pair. TRY->USD and USD->TRY
    are distinct entries; no inverse is derived.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Iterable[ExchangeRate] = ()):
        """
        Build a snapshot.

        Args:
            rates: Exchange rates

        Raises:
            DuplicateExchangeRateError: If two rates share the same ordered pair
        """
        table: dict[tuple[int, int], ExchangeRate] = {}
        for rate in rates:
            if rate.key in table:
                raise DuplicateExchangeRateError(rate.pair)
            table[rate.key] = rate
        self._rates: Mapping[tuple[int, int], ExchangeRate] = MappingProxyType(table)

    @classmethod
    def of(cls, rates: "RateTable | Iterable[ExchangeRate]") -> "RateTable":
        """Return ``rates`` unchanged if already a table, otherwise build one."""
        if isinstance(rates, RateTable):
            return rates
        return cls(rates)

    def find(
        self, from_currency: Currency, to_currency: Currency
    ) -> ExchangeRate | None:
        """
        Find the rate for an ordered pair.

        Returns:
            ExchangeRate if present, None otherwise
        """
        return self._rates.get((from_currency.numeric_code, to_currency.numeric_code))

    def __iter__(self) -> Iterator[ExchangeRate]:
        return iter(self._rates.values())

    def __len__(self) -> int:
        return len(self._rates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return dict(self._rates) == dict(other._rates)

    def __hash__(self) -> int:
        return hash(frozenset(self._rates.items()))

    def __repr__(self) -> str:
        return f"RateTable({list(self._rates.values())!r})"
