"""Domain services package."""

from transfer_engine.domain.services.transfer_resolver import (
    SAME_CURRENCY_RATE,
    TransferResolver,
)

__all__ = [
    "SAME_CURRENCY_RATE",
    "TransferResolver",
]
