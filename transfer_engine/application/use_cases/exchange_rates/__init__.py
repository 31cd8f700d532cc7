"""Exchange rate use cases."""

from transfer_engine.application.use_cases.exchange_rates.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from transfer_engine.application.use_cases.exchange_rates.quote_exchange_rate import (
    QuoteExchangeRateUseCase,
)

__all__ = [
    "GetExchangeRatesUseCase",
    "QuoteExchangeRateUseCase",
]
