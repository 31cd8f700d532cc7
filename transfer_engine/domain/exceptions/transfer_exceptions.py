"""Transfer domain exceptions."""

from transfer_engine.domain.exceptions.base import DomainException


class TransferDomainException(DomainException):
    """Base exception for transfer-related domain errors."""

    code = "TRANSFER_ERROR"


class InvalidTransferRequestError(TransferDomainException):
    """Raised when a transfer request cannot be constructed."""

    code = "INVALID_TRANSFER_REQUEST"

    def __init__(self, reason: str):
        super().__init__(f"Invalid transfer request: {reason}")
