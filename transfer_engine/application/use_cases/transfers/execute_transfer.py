"""Execute transfer use case."""

import logging

from transfer_engine.application import messages
from transfer_engine.application.dto.transfer_dto import TransferInput, TransferOutput
from transfer_engine.application.exceptions import (
    ExternalServiceError,
    NotFoundError,
    TransferRejectedError,
    ValidationError,
)
from transfer_engine.application.ports.outbound.account_query_port import (
    AccountQueryPort,
)
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)
from transfer_engine.application.ports.outbound.transfer_submission_port import (
    TransferSubmissionPort,
)
from transfer_engine.application.use_cases.exchange_rates.rate_snapshot import (
    load_rate_table,
)
from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.exceptions import (
    AccountNotFoundError,
    InvalidTransferRequestError,
)
from transfer_engine.domain.services.transfer_resolver import TransferResolver
from transfer_engine.domain.value_objects.rate_table import RateTable
from transfer_engine.domain.value_objects.transfer_outcome import (
    RejectionReason,
    TransferOutcome,
)

logger = logging.getLogger(__name__)


class ExecuteTransferUseCase:
    """
    Use case for moving money between two of a user's accounts.

    Loads fresh account and rate snapshots, asks the resolver whether the
    transfer is valid, and hands approved transfers to the ledger. When no
    rate is found the snapshot may be stale, so rates are re-fetched once
    before the rejection is final (``refetch_rates_on_unavailable``).
    """

    def __init__(
        self,
        accounts: AccountQueryPort,
        rates: ExchangeRateQueryPort,
        submissions: TransferSubmissionPort,
        resolver: TransferResolver | None = None,
        refetch_rates_on_unavailable: bool = True,
    ):
        """
        Initialize use case.

        Args:
            accounts: Account query collaborator
            rates: Rate query collaborator
            submissions: Ledger transfer collaborator
            resolver: Transfer resolver
            refetch_rates_on_unavailable: Re-fetch rates once on RateUnavailable
        """
        self.accounts = accounts
        self.rates = rates
        self.submissions = submissions
        self.resolver = resolver or TransferResolver()
        self.refetch_rates_on_unavailable = refetch_rates_on_unavailable

    async def execute(self, transfer_input: TransferInput) -> TransferOutput:
        """
        Execute a transfer.

        Args:
            transfer_input: Transfer details

        Returns:
            Ledger confirmation with the converted amount

        Raises:
            ValidationError: If the request cannot be built
            NotFoundError: If either account is not one of the user's accounts
            TransferRejectedError: If the resolver rejects the transfer
            ExternalServiceError: If the ledger fails or refuses the transfer,
                or the rate snapshot is inconsistent
        """
        try:
            request = TransferRequest(
                source_account_id=transfer_input.from_account_id,
                destination_account_id=transfer_input.to_account_id,
                amount=transfer_input.amount,
                description=transfer_input.description,
            )
        except InvalidTransferRequestError as e:
            raise ValidationError(message=e.message, field="transfer", constraint=e.code)

        accounts = await self.accounts.list_accounts(transfer_input.user_id)
        rates = await load_rate_table(self.rates)

        outcome = self._resolve(request, accounts, rates)

        if (
            outcome.reason is RejectionReason.RATE_UNAVAILABLE
            and self.refetch_rates_on_unavailable
        ):
            logger.info(
                f"No rate for transfer {request.source_account_id} -> "
                f"{request.destination_account_id}, re-fetching rates"
            )
            rates = await load_rate_table(self.rates)
            outcome = self._resolve(request, accounts, rates)

        if outcome.is_rejected:
            logger.warning(
                f"Transfer {request.source_account_id} -> "
                f"{request.destination_account_id} rejected: {outcome.reason.value}"
            )
            raise TransferRejectedError(
                outcome.reason, messages.rejection_message(outcome.reason)
            )

        receipt = await self.submissions.submit(request)
        if not receipt.success:
            logger.warning(
                f"Ledger refused transfer {request.source_account_id} -> "
                f"{request.destination_account_id}: {receipt.message}"
            )
            raise ExternalServiceError(
                message=receipt.message or messages.LEDGER_TRANSFER_FAILED,
                service="ledger",
            )

        logger.info(
            f"Transfer {receipt.transaction_id} completed: {request.amount} "
            f"from account {request.source_account_id} to account "
            f"{request.destination_account_id}"
        )

        source = self._find(accounts, request.source_account_id)
        converted_amount = (
            receipt.converted_amount
            if receipt.converted_amount is not None
            else outcome.converted_amount
        )
        return TransferOutput(
            transaction_id=receipt.transaction_id,
            message=receipt.message or messages.TRANSFER_COMPLETED,
            amount=request.amount,
            currency=source.currency.code,
            converted_amount=converted_amount,
            converted_currency=outcome.destination_currency.code,
            rate=outcome.rate,
        )

    def _resolve(
        self, request: TransferRequest, accounts: list[Account], rates: RateTable
    ) -> TransferOutcome:
        """Resolve the request, mapping unknown accounts to NotFoundError."""
        try:
            return self.resolver.resolve_request(request, accounts, rates)
        except AccountNotFoundError as e:
            raise NotFoundError(
                message=messages.ACCOUNTS_NOT_SELECTED,
                resource_type="Account",
                resource_id=e.identifier,
            )

    @staticmethod
    def _find(accounts: list[Account], account_id: int) -> Account:
        return next(account for account in accounts if account.id == account_id)
