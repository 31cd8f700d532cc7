"""In-memory ledger implementing the account, rate and transfer ports."""

from collections.abc import Iterable, Mapping

from transfer_engine.application import messages
from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.exceptions import AccountNotFoundError
from transfer_engine.domain.services.transfer_resolver import TransferResolver
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.money import Money
from transfer_engine.domain.value_objects.rate_table import RateTable
from transfer_engine.domain.value_objects.transfer_receipt import TransferReceipt


class InMemoryLedger:
    """
    Ledger kept in process memory.

    Used as a deterministic stand-in for the real ledger in tests and local
    wiring. ``submit`` re-checks the transfer with the resolver, replaces the
    two account snapshots with debited/credited copies and assigns
    sequential transaction ids.
    """

    def __init__(
        self,
        accounts_by_user: Mapping[int, Iterable[Account]],
        rates: Iterable[ExchangeRate] = (),
        first_transaction_id: int = 1,
    ):
        """
        Initialize ledger.

        Args:
            accounts_by_user: Account snapshots per user id
            rates: Exchange rate snapshot
            first_transaction_id: Id assigned to the first submitted transfer

        Raises:
            DuplicateExchangeRateError: If two rates share an ordered pair
        """
        self._owners: dict[int, int] = {}
        self._accounts: dict[int, Account] = {}
        for user_id, accounts in accounts_by_user.items():
            for account in accounts:
                self._owners[account.id] = user_id
                self._accounts[account.id] = account
        self._rates = RateTable(rates)
        self._next_transaction_id = first_transaction_id
        self.submitted: list[TransferRequest] = []

    async def list_accounts(self, user_id: int) -> list[Account]:
        return [
            account
            for account_id, account in self._accounts.items()
            if self._owners[account_id] == user_id
        ]

    async def list_rates(self) -> list[ExchangeRate]:
        return list(self._rates)

    def set_rates(self, rates: Iterable[ExchangeRate]) -> None:
        """Replace the rate snapshot."""
        self._rates = RateTable(rates)

    def get_account(self, account_id: int) -> Account:
        """
        Get the current snapshot of an account.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        try:
            return self._accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(str(account_id))

    async def submit(self, request: TransferRequest) -> TransferReceipt:
        """
        Apply a transfer.

        Rejected transfers and unknown accounts produce an unsuccessful
        receipt, the way the real ledger answers.
        """
        self.submitted.append(request)

        try:
            outcome = TransferResolver.resolve_request(
                request, self._accounts.values(), self._rates
            )
        except AccountNotFoundError:
            return TransferReceipt(success=False, message=messages.ACCOUNTS_NOT_SELECTED)

        if outcome.is_rejected:
            return TransferReceipt(
                success=False, message=messages.rejection_message(outcome.reason)
            )

        source = self._accounts[request.source_account_id]
        destination = self._accounts[request.destination_account_id]

        self._accounts[source.id] = source.with_balance(
            source.balance.subtract(Money(amount=request.amount, currency=source.currency))
        )
        self._accounts[destination.id] = destination.with_balance(
            destination.balance.add(
                Money(amount=outcome.converted_amount, currency=destination.currency)
            )
        )

        transaction_id = self._next_transaction_id
        self._next_transaction_id += 1

        return TransferReceipt(
            success=True,
            message=messages.TRANSFER_COMPLETED,
            transaction_id=transaction_id,
            converted_amount=outcome.converted_amount,
        )
