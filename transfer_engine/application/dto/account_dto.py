"""Account DTOs (Data Transfer Objects)."""

from decimal import Decimal

from pydantic import BaseModel, Field


class AccountOutput(BaseModel):
    """Output DTO for account information."""

    id: int = Field(..., description="Account's unique identifier")
    account_number: str = Field(..., description="Display account number")
    currency: int = Field(..., description="Numeric currency code")
    currency_code: str = Field(..., description="Currency code (ISO 4217)")
    currency_symbol: str = Field(..., description="Currency display symbol")
    balance: Decimal = Field(..., description="Current account balance")
    display_label: str = Field(..., description="Label for account pickers")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, account: "Account") -> "AccountOutput":
        """
        Create DTO from Account entity.

        Args:
            account: Account domain entity

        Returns:
            AccountOutput DTO
        """
        return cls(
            id=account.id,
            account_number=account.account_number,
            currency=account.currency.numeric_code,
            currency_code=account.currency.code,
            currency_symbol=account.currency_symbol,
            balance=account.balance.amount,
            display_label=account.display_label(),
        )


class AccountListOutput(BaseModel):
    """Output DTO for a user's accounts."""

    accounts: list[AccountOutput] = Field(..., description="List of accounts")
    total: int = Field(..., description="Total number of accounts")

    model_config = {"frozen": True}


# Import for type hints
from transfer_engine.domain.entities.account import Account  # noqa: E402

AccountOutput.model_rebuild()
