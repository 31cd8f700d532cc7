"""Account use cases."""

from transfer_engine.application.use_cases.accounts.list_accounts import (
    ListAccountsUseCase,
)

__all__ = [
    "ListAccountsUseCase",
]
