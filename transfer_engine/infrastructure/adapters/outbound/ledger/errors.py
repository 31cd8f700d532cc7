"""Ledger adapter errors."""

from transfer_engine.application import messages
from transfer_engine.application.exceptions import ExternalServiceError

LEDGER_SERVICE = "ledger"


class LedgerError(ExternalServiceError):
    """Base error for ledger calls."""

    default_code = "LEDGER_ERROR"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message=message, service=LEDGER_SERVICE, status_code=status_code)


class LedgerServerError(LedgerError):
    """Raised when the ledger call fails or the ledger reports failure."""

    default_code = "LEDGER_SERVER_ERROR"


class LedgerNoDataError(LedgerError):
    """Raised when the ledger answers with an empty body."""

    default_code = "LEDGER_NO_DATA"

    def __init__(self):
        super().__init__(messages.LEDGER_NO_DATA)


class LedgerDecodingError(LedgerError):
    """Raised when the ledger's answer cannot be decoded."""

    default_code = "LEDGER_DECODING_ERROR"

    def __init__(self):
        super().__init__(messages.LEDGER_DECODING_ERROR)
