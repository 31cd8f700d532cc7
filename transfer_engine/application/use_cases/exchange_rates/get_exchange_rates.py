"""Get exchange rates use case."""

import logging

from transfer_engine.application.dto.exchange_rate_dto import (
    ExchangeRateListOutput,
    ExchangeRateOutput,
)
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)

logger = logging.getLogger(__name__)


class GetExchangeRatesUseCase:
    """Use case for fetching the current rate snapshot."""

    def __init__(self, rates: ExchangeRateQueryPort):
        """
        Initialize use case.

        Args:
            rates: Rate query collaborator
        """
        self.rates = rates

    async def execute(self) -> ExchangeRateListOutput:
        """
        Fetch the current exchange rates.

        Raises:
            ExternalServiceError: If the rate service cannot be queried
        """
        rates = await self.rates.list_rates()
        logger.info(f"Fetched {len(rates)} exchange rates")

        return ExchangeRateListOutput(
            rates=[ExchangeRateOutput.from_entity(rate) for rate in rates],
            total=len(rates),
        )
