"""Rate snapshot loading shared by the quote and transfer use cases."""

import logging

from transfer_engine.application import messages
from transfer_engine.application.exceptions import ExternalServiceError
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)
from transfer_engine.domain.exceptions import DuplicateExchangeRateError
from transfer_engine.domain.value_objects.rate_table import RateTable

logger = logging.getLogger(__name__)

RATES_SERVICE = "rates"


async def load_rate_table(rates: ExchangeRateQueryPort) -> RateTable:
    """
    Fetch rates and build a snapshot.

    Raises:
        ExternalServiceError: If the rate source fails or returns two rates
            for the same ordered pair
    """
    try:
        return RateTable(await rates.list_rates())
    except DuplicateExchangeRateError as e:
        logger.error(f"Rate source returned an inconsistent snapshot: {e.message}")
        raise ExternalServiceError(
            message=messages.LEDGER_RATES_UNAVAILABLE,
            service=RATES_SERVICE,
            error_code="INCONSISTENT_RATES",
        ) from e
