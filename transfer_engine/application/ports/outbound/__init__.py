"""Outbound ports (driven adapters interfaces)."""

from transfer_engine.application.ports.outbound.account_query_port import (
    AccountQueryPort,
)
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)
from transfer_engine.application.ports.outbound.transfer_submission_port import (
    TransferSubmissionPort,
)

__all__ = [
    "AccountQueryPort",
    "ExchangeRateQueryPort",
    "TransferSubmissionPort",
]
