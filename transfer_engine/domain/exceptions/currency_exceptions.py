"""Currency and exchange rate domain exceptions."""

from transfer_engine.domain.exceptions.base import DomainException


class CurrencyDomainException(DomainException):
    """Base exception for currency-related domain errors."""

    code = "CURRENCY_ERROR"


class UnsupportedCurrencyError(CurrencyDomainException):
    """Raised when a currency code is not present in the registry."""

    code = "UNSUPPORTED_CURRENCY"

    def __init__(self, currency_code: str, supported: list[str]):
        self.currency_code = currency_code
        super().__init__(
            f"Unsupported currency code: {currency_code}. "
            f"Supported currencies: {', '.join(supported)}"
        )


class InvalidCurrencyError(CurrencyDomainException):
    """Raised when a currency definition is malformed."""

    code = "INVALID_CURRENCY"

    def __init__(self, reason: str):
        super().__init__(f"Invalid currency definition: {reason}")


class InvalidExchangeRateError(CurrencyDomainException):
    """Raised when an exchange rate value is not strictly positive."""

    code = "INVALID_EXCHANGE_RATE"

    def __init__(self, pair: str, rate: str):
        super().__init__(f"Exchange rate for {pair} must be positive, got {rate}")


class DuplicateExchangeRateError(CurrencyDomainException):
    """Raised when a rate snapshot holds two entries for the same ordered pair."""

    code = "DUPLICATE_EXCHANGE_RATE"

    def __init__(self, pair: str):
        super().__init__(f"Duplicate exchange rate for pair {pair}")
