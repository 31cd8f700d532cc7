"""Account and money domain exceptions."""

from transfer_engine.domain.exceptions.base import DomainException


class AccountDomainException(DomainException):
    """Base exception for account-related domain errors."""

    code = "ACCOUNT_ERROR"


class AccountNotFoundError(AccountDomainException):
    """Raised when an account is not present in the supplied snapshot."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Account not found: {identifier}")


class InvalidAccountError(AccountDomainException):
    """Raised when an account snapshot carries invalid data."""

    code = "INVALID_ACCOUNT"

    def __init__(self, reason: str):
        super().__init__(f"Invalid account: {reason}")


class InvalidMoneyError(AccountDomainException):
    """Raised when money amount or currency is invalid."""

    code = "INVALID_MONEY"

    def __init__(self, reason: str):
        super().__init__(f"Invalid money value: {reason}")


class CurrencyMismatchError(AccountDomainException):
    """Raised when attempting operations with mismatched currencies."""

    code = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str):
        super().__init__(f"Currency mismatch: {currency1} != {currency2}")
