"""Application use cases."""

from transfer_engine.application.use_cases.accounts import ListAccountsUseCase
from transfer_engine.application.use_cases.exchange_rates import (
    GetExchangeRatesUseCase,
    QuoteExchangeRateUseCase,
)
from transfer_engine.application.use_cases.transfers import ExecuteTransferUseCase

__all__ = [
    "ExecuteTransferUseCase",
    "GetExchangeRatesUseCase",
    "ListAccountsUseCase",
    "QuoteExchangeRateUseCase",
]
