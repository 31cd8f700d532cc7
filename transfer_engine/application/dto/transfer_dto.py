"""Transfer DTOs."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from transfer_engine.domain.entities.transfer_request import MAX_DESCRIPTION_LENGTH


class TransferInput(BaseModel):
    """Input DTO for executing a transfer."""

    user_id: int = Field(..., description="Ledger user owning both accounts")
    from_account_id: int = Field(..., description="Account to debit")
    to_account_id: int = Field(..., description="Account to credit")
    amount: Decimal = Field(..., description="Amount in the source account's currency")
    description: Optional[str] = Field(
        None, max_length=MAX_DESCRIPTION_LENGTH, description="Free-text description"
    )

    model_config = {"frozen": True}


class TransferOutput(BaseModel):
    """Output DTO for a completed transfer."""

    transaction_id: Optional[int] = Field(None, description="Ledger transaction id")
    message: str = Field(..., description="Ledger confirmation message")
    amount: Decimal = Field(..., description="Amount debited")
    currency: str = Field(..., description="Source currency code")
    converted_amount: Decimal = Field(..., description="Amount credited")
    converted_currency: str = Field(..., description="Destination currency code")
    rate: Decimal = Field(..., description="Rate applied, 1 if same currency")

    model_config = {"frozen": True}
