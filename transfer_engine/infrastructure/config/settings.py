"""
Configuration module using Pydantic Settings.

Settings are loaded from environment variables prefixed with
``TRANSFER_ENGINE_`` or from a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transfer_engine.domain.value_objects.currency import Currency, CurrencyRegistry


class CurrencyDefinition(BaseModel):
    """Currency entry added to the registry through configuration."""

    numeric_code: int = Field(..., ge=1, description="Numeric wire code")
    code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    symbol: str = Field(..., min_length=1, description="Display symbol")
    name: str = Field(..., min_length=1, description="Display name")
    minor_units: int = Field(default=2, ge=0, le=8)

    model_config = {"frozen": True}

    def to_currency(self) -> Currency:
        return Currency(
            numeric_code=self.numeric_code,
            code=self.code,
            symbol=self.symbol,
            name=self.name,
            minor_units=self.minor_units,
        )


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    ``extra_currencies`` is read as a JSON list, e.g.
    ``TRANSFER_ENGINE_EXTRA_CURRENCIES='[{"numeric_code": 4, "code": "GBP",
    "symbol": "£", "name": "Sterlin"}]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSFER_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Transfer Engine")
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    # -------------------------------------------------------------------------
    # Transfer Settings
    # -------------------------------------------------------------------------
    refetch_rates_on_unavailable: bool = Field(
        default=True,
        description="Re-fetch the rate snapshot once when no rate matches",
    )
    extra_currencies: list[CurrencyDefinition] = Field(default_factory=list)

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/transfer_engine.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase log level names."""
        return v.upper() if isinstance(v, str) else v

    def currency_registry(self) -> CurrencyRegistry:
        """
        Build the currency registry: defaults plus configured extras.

        Raises:
            InvalidCurrencyError: If an extra currency clashes with a default
        """
        return CurrencyRegistry.default().extend(
            definition.to_currency() for definition in self.extra_currencies
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
