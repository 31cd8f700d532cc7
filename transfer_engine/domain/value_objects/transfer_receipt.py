"""Transfer receipt value object."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TransferReceipt:
    """What the ledger reports back after a transfer submission."""

    success: bool
    message: str
    transaction_id: int | None = None
    converted_amount: Decimal | None = None
