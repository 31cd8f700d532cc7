"""Exchange rate DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ExchangeRateOutput(BaseModel):
    """Output DTO for one exchange rate."""

    from_currency: str = Field(..., description="Source currency code")
    to_currency: str = Field(..., description="Target currency code")
    rate: Decimal = Field(..., gt=0, description="Target units per source unit")
    last_updated: Optional[datetime] = Field(None, description="Rate timestamp")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, rate: "ExchangeRate") -> "ExchangeRateOutput":
        """Create DTO from an ExchangeRate value object."""
        return cls(
            from_currency=rate.from_currency.code,
            to_currency=rate.to_currency.code,
            rate=rate.rate,
            last_updated=rate.last_updated,
        )


class ExchangeRateListOutput(BaseModel):
    """Output DTO for a rate snapshot."""

    rates: list[ExchangeRateOutput] = Field(..., description="Exchange rates")
    total: int = Field(..., description="Number of rates")

    model_config = {"frozen": True}


class QuoteExchangeRateInput(BaseModel):
    """Input DTO for quoting the rate between two currencies."""

    from_currency: int = Field(..., description="Numeric code of the source currency")
    to_currency: int = Field(..., description="Numeric code of the target currency")

    model_config = {"frozen": True}


class ExchangeRateQuoteOutput(BaseModel):
    """Output DTO describing the rate a transfer would use."""

    from_currency: str = Field(..., description="Source currency code")
    to_currency: str = Field(..., description="Target currency code")
    same_currency: bool = Field(..., description="Whether no conversion is needed")
    available: bool = Field(..., description="Whether a rate applies")
    rate: Optional[Decimal] = Field(None, description="Rate applied, 1 if same currency")
    label: str = Field(..., description="Display text for the quote")

    model_config = {"frozen": True}


# Import for type hints
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate  # noqa: E402

ExchangeRateOutput.model_rebuild()
