"""Transfer outcome value object."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from transfer_engine.domain.value_objects.currency import Currency


class RejectionReason(str, Enum):
    """Closed set of reasons a transfer can be rejected for."""

    INVALID_AMOUNT = "InvalidAmount"
    SAME_ACCOUNT = "SameAccount"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    RATE_UNAVAILABLE = "RateUnavailable"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TransferOutcome:
    """
    Result of resolving a transfer.

    Either a rejection carrying a reason, or an approval carrying the amount
    the destination account receives (in its own currency) and the rate used.
    Use ``approve`` and ``reject`` rather than the constructor.
    """

    reason: RejectionReason | None = None
    converted_amount: Decimal | None = None
    rate: Decimal | None = None
    destination_currency: Currency | None = None

    @classmethod
    def approve(
        cls, converted_amount: Decimal, rate: Decimal, destination_currency: Currency
    ) -> "TransferOutcome":
        """Build an approval."""
        return cls(
            converted_amount=converted_amount,
            rate=rate,
            destination_currency=destination_currency,
        )

    @classmethod
    def reject(cls, reason: RejectionReason) -> "TransferOutcome":
        """Build a rejection."""
        return cls(reason=reason)

    @property
    def is_approved(self) -> bool:
        return self.reason is None

    @property
    def is_rejected(self) -> bool:
        return self.reason is not None

    def __repr__(self) -> str:
        if self.is_rejected:
            return f"TransferOutcome(rejected={self.reason.value})"
        return (
            f"TransferOutcome(approved={self.converted_amount} "
            f"{self.destination_currency}, rate={self.rate})"
        )
