"""Transfer request entity."""

from dataclasses import dataclass
from decimal import Decimal

from transfer_engine.domain.exceptions import (
    InvalidMoneyError,
    InvalidTransferRequestError,
)
from transfer_engine.domain.value_objects.money import to_decimal

MAX_DESCRIPTION_LENGTH = 250


@dataclass(frozen=True)
class TransferRequest:
    """
    Request to move ``amount`` (in the source account's currency) from one
    account to another.

    Positivity of the amount is not checked here: that is a resolver rule
    and surfaces as a rejection, not an exception.
    """

    source_account_id: int
    destination_account_id: int
    amount: Decimal
    description: str | None = None

    def __post_init__(self) -> None:
        """Coerce amount and normalise description."""
        try:
            object.__setattr__(self, "amount", to_decimal(self.amount))
        except InvalidMoneyError as e:
            raise InvalidTransferRequestError(e.message) from e

        description = self.description.strip() if self.description else None
        if description and len(description) > MAX_DESCRIPTION_LENGTH:
            raise InvalidTransferRequestError(
                f"description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
            )
        object.__setattr__(self, "description", description or None)
