"""Domain entities package."""

from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import (
    MAX_DESCRIPTION_LENGTH,
    TransferRequest,
)

__all__ = [
    "Account",
    "MAX_DESCRIPTION_LENGTH",
    "TransferRequest",
]
