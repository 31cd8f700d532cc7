"""Data Transfer Objects (DTOs) for application layer."""

from transfer_engine.application.dto.account_dto import (
    AccountListOutput,
    AccountOutput,
)
from transfer_engine.application.dto.exchange_rate_dto import (
    ExchangeRateListOutput,
    ExchangeRateOutput,
    ExchangeRateQuoteOutput,
    QuoteExchangeRateInput,
)
from transfer_engine.application.dto.transfer_dto import (
    TransferInput,
    TransferOutput,
)

__all__ = [
    # Account DTOs
    "AccountListOutput",
    "AccountOutput",
    # Exchange rate DTOs
    "ExchangeRateListOutput",
    "ExchangeRateOutput",
    "ExchangeRateQuoteOutput",
    "QuoteExchangeRateInput",
    # Transfer DTOs
    "TransferInput",
    "TransferOutput",
]
