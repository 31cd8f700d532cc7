"""Transfer submission port interface."""

from typing import Protocol

from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.value_objects.transfer_receipt import TransferReceipt


class TransferSubmissionPort(Protocol):
    """Ledger operation that performs the debit and credit of a transfer."""

    async def submit(self, request: TransferRequest) -> TransferReceipt:
        """
        Submit an approved transfer to the ledger.

        Args:
            request: Transfer request approved by the resolver

        Returns:
            Ledger receipt with the transaction id on success

        Raises:
            ExternalServiceError: If the ledger cannot be reached or refuses
                the request
        """
        ...
