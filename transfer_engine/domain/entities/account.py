"""Account domain entity."""

from dataclasses import dataclass, replace
from decimal import Decimal

from transfer_engine.domain.exceptions import InvalidAccountError
from transfer_engine.domain.value_objects.currency import Currency
from transfer_engine.domain.value_objects.money import Money


@dataclass(frozen=True, eq=False)
class Account:
    """
    Account snapshot as reported by the ledger.

    Snapshots are read-only: they are fetched per request and replaced
    wholesale on refresh, never mutated in place. The currency is the
    currency of the balance.
    """

    id: int
    account_number: str
    balance: Money

    def __post_init__(self) -> None:
        """Validate account after initialization."""
        if not self.account_number or not self.account_number.strip():
            raise InvalidAccountError("account number cannot be empty")

    @property
    def currency(self) -> Currency:
        return self.balance.currency

    @property
    def currency_symbol(self) -> str:
        return self.balance.currency.symbol

    def has_sufficient_balance(self, amount: Decimal) -> bool:
        """
        Check if the balance covers an amount in this account's currency.

        An amount exactly equal to the balance is covered. The balance is
        compared as reported, without rounding.
        """
        return self.balance.amount >= amount

    def with_balance(self, balance: Money) -> "Account":
        """Return a new snapshot carrying a different balance."""
        return replace(self, balance=balance)

    def display_label(self) -> str:
        """Picker label, e.g. 'TR-001 - 1,250.50 ₺'."""
        return f"{self.account_number} - {self.balance.format()}"

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, Account):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Account(id={self.id}, number={self.account_number!r}, balance={self.balance})"
