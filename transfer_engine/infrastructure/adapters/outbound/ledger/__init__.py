"""Ledger service adapter."""

from transfer_engine.infrastructure.adapters.outbound.ledger.errors import (
    LedgerDecodingError,
    LedgerError,
    LedgerNoDataError,
    LedgerServerError,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.gateway import (
    LedgerGateway,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.transport import (
    LedgerTransport,
)

__all__ = [
    "LedgerDecodingError",
    "LedgerError",
    "LedgerGateway",
    "LedgerNoDataError",
    "LedgerServerError",
    "LedgerTransport",
]
