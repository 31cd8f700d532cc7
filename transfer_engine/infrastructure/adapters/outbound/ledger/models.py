"""Ledger payload models.

The ledger wraps every answer in ``{"success", "data", "message"}``; the
records inside use PascalCase keys.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

T = TypeVar("T")

# "/Date(1700000000000)/" or "/Date(1700000000000+0300)/"
_DOTNET_DATE = re.compile(r"^/Date\((-?\d+)(?:[+-]\d{4})?\)/$")

WireAmount = Annotated[
    Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")
]


class LedgerEnvelope(BaseModel, Generic[T]):
    """Response envelope shared by all ledger endpoints."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AccountPayload(BaseModel):
    """Account record as returned by the account handler."""

    account_id: int = Field(..., alias="AccountId")
    account_number: str = Field(..., alias="AccountNumber")
    currency: int = Field(..., alias="Currency")
    balance: Decimal = Field(..., alias="Balance")
    currency_symbol: Optional[str] = Field(None, alias="CurrencySymbol")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ExchangeRatePayload(BaseModel):
    """Rate record as returned by the exchange rate handler."""

    from_currency: int = Field(..., alias="FromCurrency")
    to_currency: int = Field(..., alias="ToCurrency")
    rate: Decimal = Field(..., alias="Rate")
    last_updated: Optional[datetime] = Field(None, alias="LastUpdated")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("last_updated", mode="before")
    @classmethod
    def parse_dotnet_date(cls, v: Any) -> Any:
        """Accept the ASP.NET '/Date(ms)/' form besides ISO 8601."""
        if isinstance(v, str):
            if not v.strip():
                return None
            match = _DOTNET_DATE.match(v.strip())
            if match:
                return datetime.fromtimestamp(int(match.group(1)) / 1000, tz=timezone.utc)
        return v


class TransferRequestPayload(BaseModel):
    """Body posted to the transfer handler."""

    from_account_id: int = Field(..., alias="FromAccountId")
    to_account_id: int = Field(..., alias="ToAccountId")
    amount: WireAmount = Field(..., alias="Amount")
    description: Optional[str] = Field(None, alias="Description")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TransferResultPayload(BaseModel):
    """Result record returned by the transfer handler."""

    success: bool = Field(..., alias="Success")
    message: str = Field(..., alias="Message")
    transaction_id: Optional[int] = Field(None, alias="TransactionId")
    converted_amount: Optional[Decimal] = Field(None, alias="ConvertedAmount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
