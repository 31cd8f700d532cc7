"""Account query port interface."""

from typing import Protocol

from transfer_engine.domain.entities.account import Account


class AccountQueryPort(Protocol):
    """Read-only access to account snapshots held by the ledger."""

    async def list_accounts(self, user_id: int) -> list[Account]:
        """
        List the accounts of a user.

        Args:
            user_id: Ledger user identifier

        Returns:
            Fresh account snapshots, in ledger order

        Raises:
            ExternalServiceError: If the ledger cannot be queried
        """
        ...
