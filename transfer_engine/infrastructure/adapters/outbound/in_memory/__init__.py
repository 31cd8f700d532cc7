"""In-memory adapters."""

from transfer_engine.infrastructure.adapters.outbound.in_memory.ledger import (
    InMemoryLedger,
)

__all__ = [
    "InMemoryLedger",
]
