"""Domain value objects package."""

from transfer_engine.domain.value_objects.currency import (
    DEFAULT_CURRENCIES,
    EUR,
    TRY,
    USD,
    Currency,
    CurrencyRegistry,
)
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.money import Money, to_decimal
from transfer_engine.domain.value_objects.rate_table import RateTable
from transfer_engine.domain.value_objects.transfer_outcome import (
    RejectionReason,
    TransferOutcome,
)
from transfer_engine.domain.value_objects.transfer_receipt import TransferReceipt

__all__ = [
    "DEFAULT_CURRENCIES",
    "EUR",
    "TRY",
    "USD",
    "Currency",
    "CurrencyRegistry",
    "ExchangeRate",
    "Money",
    "RateTable",
    "RejectionReason",
    "TransferOutcome",
    "TransferReceipt",
    "to_decimal",
]
