"""Transfer use cases."""

from transfer_engine.application.use_cases.transfers.execute_transfer import (
    ExecuteTransferUseCase,
)

__all__ = [
    "ExecuteTransferUseCase",
]
