"""List accounts use case."""

import logging

from transfer_engine.application.dto.account_dto import AccountListOutput, AccountOutput
from transfer_engine.application.ports.outbound.account_query_port import (
    AccountQueryPort,
)

logger = logging.getLogger(__name__)


class ListAccountsUseCase:
    """Use case for listing a user's accounts."""

    def __init__(self, accounts: AccountQueryPort):
        """
        Initialize use case.

        Args:
            accounts: Account query collaborator
        """
        self.accounts = accounts

    async def execute(self, user_id: int) -> AccountListOutput:
        """
        List accounts for a user.

        Args:
            user_id: Ledger user identifier

        Returns:
            The user's accounts with display labels

        Raises:
            ExternalServiceError: If the ledger cannot be queried
        """
        accounts = await self.accounts.list_accounts(user_id)
        logger.info(f"Fetched {len(accounts)} accounts for user {user_id}")

        return AccountListOutput(
            accounts=[AccountOutput.from_entity(account) for account in accounts],
            total=len(accounts),
        )
