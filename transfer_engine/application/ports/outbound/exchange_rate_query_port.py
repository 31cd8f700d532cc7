"""Exchange rate query port interface."""

from typing import Protocol

from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate


class ExchangeRateQueryPort(Protocol):
    """Read-only access to the current exchange rate snapshot."""

    async def list_rates(self) -> list[ExchangeRate]:
        """
        Fetch the current exchange rates.

        Returns:
            Rate snapshot, at most one entry per ordered currency pair

        Raises:
            ExternalServiceError: If the rate service cannot be queried
        """
        ...
