"""Transfer resolver domain service."""

from collections.abc import Iterable
from decimal import Decimal

from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.exceptions import AccountNotFoundError, InvalidMoneyError
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.money import Money, to_decimal
from transfer_engine.domain.value_objects.rate_table import RateTable
from transfer_engine.domain.value_objects.transfer_outcome import (
    RejectionReason,
    TransferOutcome,
)

SAME_CURRENCY_RATE = Decimal("1")


class TransferResolver:
    """
    Domain service that validates and prices a transfer.

    Resolution is a pure function of its inputs: it performs no I/O, keeps no
    state and never mutates the account or rate snapshots it is given, so the
    same inputs always yield the same outcome. Rule violations come back as
    rejected outcomes rather than exceptions. Moving the money is the
    ledger's job.

    Rules are checked in order and the first failure wins:

    1. amount must be positive
    2. source and destination must be different accounts
    3. source balance must cover the amount
    4. cross-currency transfers need a rate for the ordered pair
    """

    @staticmethod
    def resolve(
        source: Account,
        destination: Account,
        amount: Decimal,
        rates: RateTable | Iterable[ExchangeRate],
    ) -> TransferOutcome:
        """
        Resolve a transfer between two account snapshots.

        Args:
            source: Account to debit
            destination: Account to credit
            amount: Amount to move, in the source account's currency
            rates: Exchange rate snapshot

        Returns:
            Approval with the destination amount and rate, or a rejection

        Raises:
            DuplicateExchangeRateError: If ``rates`` is an iterable holding two
                entries for the same ordered pair
        """
        try:
            amount = to_decimal(amount)
        except InvalidMoneyError:
            return TransferOutcome.reject(RejectionReason.INVALID_AMOUNT)

        if amount <= 0:
            return TransferOutcome.reject(RejectionReason.INVALID_AMOUNT)

        if source.id == destination.id:
            return TransferOutcome.reject(RejectionReason.SAME_ACCOUNT)

        if not source.has_sufficient_balance(amount):
            return TransferOutcome.reject(RejectionReason.INSUFFICIENT_FUNDS)

        if source.currency == destination.currency:
            return TransferOutcome.approve(
                converted_amount=amount,
                rate=SAME_CURRENCY_RATE,
                destination_currency=destination.currency,
            )

        rate = RateTable.of(rates).find(source.currency, destination.currency)
        if rate is None:
            return TransferOutcome.reject(RejectionReason.RATE_UNAVAILABLE)

        converted = Money(amount=amount, currency=source.currency).convert(
            rate.rate, destination.currency
        )
        return TransferOutcome.approve(
            converted_amount=converted.amount,
            rate=rate.rate,
            destination_currency=destination.currency,
        )

    @staticmethod
    def resolve_request(
        request: TransferRequest,
        accounts: Iterable[Account],
        rates: RateTable | Iterable[ExchangeRate],
    ) -> TransferOutcome:
        """
        Resolve a transfer request against a set of account snapshots.

        Args:
            request: Transfer request
            accounts: Account snapshots to look the request's ids up in
            rates: Exchange rate snapshot

        Returns:
            Transfer outcome

        Raises:
            AccountNotFoundError: If either account id is not in ``accounts``
        """
        by_id = {account.id: account for account in accounts}

        source = by_id.get(request.source_account_id)
        if source is None:
            raise AccountNotFoundError(str(request.source_account_id))

        destination = by_id.get(request.destination_account_id)
        if destination is None:
            raise AccountNotFoundError(str(request.destination_account_id))

        return TransferResolver.resolve(source, destination, request.amount, rates)
