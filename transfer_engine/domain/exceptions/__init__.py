"""Domain exceptions package."""

from transfer_engine.domain.exceptions.base import DomainException
from transfer_engine.domain.exceptions.account_exceptions import (
    AccountDomainException,
    AccountNotFoundError,
    CurrencyMismatchError,
    InvalidAccountError,
    InvalidMoneyError,
)
from transfer_engine.domain.exceptions.currency_exceptions import (
    CurrencyDomainException,
    DuplicateExchangeRateError,
    InvalidCurrencyError,
    InvalidExchangeRateError,
    UnsupportedCurrencyError,
)
from transfer_engine.domain.exceptions.transfer_exceptions import (
    InvalidTransferRequestError,
    TransferDomainException,
)

__all__ = [
    # Base
    "DomainException",
    # Account exceptions
    "AccountDomainException",
    "AccountNotFoundError",
    "InvalidAccountError",
    "InvalidMoneyError",
    "CurrencyMismatchError",
    # Currency exceptions
    "CurrencyDomainException",
    "UnsupportedCurrencyError",
    "InvalidCurrencyError",
    "InvalidExchangeRateError",
    "DuplicateExchangeRateError",
    # Transfer exceptions
    "TransferDomainException",
    "InvalidTransferRequestError",
]
