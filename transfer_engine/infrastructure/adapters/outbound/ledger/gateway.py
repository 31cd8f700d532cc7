"""Ledger gateway: account, rate and transfer ports over the ledger's handlers."""

import logging
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from transfer_engine.application import messages
from transfer_engine.application.exceptions import ExternalServiceError
from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.exceptions import (
    DomainException,
    DuplicateExchangeRateError,
)
from transfer_engine.domain.value_objects.currency import CurrencyRegistry
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.rate_table import RateTable
from transfer_engine.domain.value_objects.transfer_receipt import TransferReceipt
from transfer_engine.infrastructure.adapters.outbound.ledger.errors import (
    LedgerDecodingError,
    LedgerNoDataError,
    LedgerServerError,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.mappers import (
    AccountMapper,
    ExchangeRateMapper,
    TransferMapper,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.models import (
    AccountPayload,
    ExchangeRatePayload,
    LedgerEnvelope,
    TransferResultPayload,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.transport import (
    LedgerTransport,
)
logger = logging.getLogger(__name__)

ACCOUNTS_PATH = "/Handlers/AccountHandler.ashx"
TRANSFER_PATH = "/Handlers/TransferHandler.ashx"
EXCHANGE_RATES_PATH = "/Handlers/ExchangeRateHandler.ashx"


class LedgerGateway:
    """
    Outbound adapter for the ledger service.

    Implements ``AccountQueryPort``, ``ExchangeRateQueryPort`` and
    ``TransferSubmissionPort``. One instance is created per embedding
    application and passed to the use cases explicitly.
    """

    def __init__(self, transport: LedgerTransport, currencies: CurrencyRegistry):
        """
        Initialize gateway.

        Args:
            transport: Carrier for ledger requests
            currencies: Registry to resolve numeric currency codes
        """
        self.transport = transport
        self.currencies = currencies

    async def list_accounts(self, user_id: int) -> list[Account]:
        """
        Fetch a user's accounts.

        Raises:
            LedgerServerError: If the call fails or the ledger reports failure
            LedgerNoDataError: If the ledger returns an empty body
            LedgerDecodingError: If the answer cannot be decoded
        """
        payloads = await self._call(
            LedgerEnvelope[list[AccountPayload]],
            "GET",
            ACCOUNTS_PATH,
            default_error=messages.LEDGER_UNKNOWN_ERROR,
            params={"userId": user_id},
        )
        return self._map(AccountMapper.to_entity, payloads)

    async def list_rates(self) -> list[ExchangeRate]:
        """
        Fetch the current exchange rate snapshot.

        Raises:
            LedgerServerError: If the call fails or the ledger reports failure
            LedgerNoDataError: If the ledger returns an empty body
            LedgerDecodingError: If the answer cannot be decoded
        """
        payloads = await self._call(
            LedgerEnvelope[list[ExchangeRatePayload]],
            "GET",
            EXCHANGE_RATES_PATH,
            default_error=messages.LEDGER_RATES_UNAVAILABLE,
        )
        rates = self._map(ExchangeRateMapper.to_entity, payloads)
        try:
            RateTable(rates)
        except DuplicateExchangeRateError as e:
            logger.error(f"Ledger rate snapshot is inconsistent: {e}")
            raise LedgerDecodingError() from e
        return rates

    async def submit(self, request: TransferRequest) -> TransferReceipt:
        """
        Post a transfer to the ledger.

        Raises:
            LedgerServerError: If the call fails or the ledger reports failure
            LedgerNoDataError: If the ledger returns an empty body
            LedgerDecodingError: If the answer cannot be decoded
        """
        body = TransferMapper.to_payload(request).model_dump(
            mode="json", by_alias=True
        )
        result = await self._call(
            LedgerEnvelope[TransferResultPayload],
            "POST",
            TRANSFER_PATH,
            default_error=messages.LEDGER_TRANSFER_FAILED,
            json=body,
        )
        return TransferMapper.to_receipt(result)

    async def _call(
        self,
        envelope_type: type[LedgerEnvelope],
        method: str,
        path: str,
        default_error: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send a request and unwrap the envelope's data."""
        try:
            raw = await self.transport.request(method, path, params=params, json=json)
        except ExternalServiceError:
            raise
        except Exception as e:
            logger.error(f"Ledger call {method} {path} failed: {e}")
            raise LedgerServerError(str(e)) from e

        if not raw:
            logger.warning(f"Ledger call {method} {path} returned no data")
            raise LedgerNoDataError()

        try:
            envelope = envelope_type.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Cannot decode ledger answer for {method} {path}: {e}")
            raise LedgerDecodingError() from e

        if not envelope.success or envelope.data is None:
            logger.warning(
                f"Ledger call {method} {path} unsuccessful: {envelope.message}"
            )
            raise LedgerServerError(envelope.message or default_error)

        return envelope.data

    def _map(self, mapper, payloads: list[BaseModel]) -> list:
        """Map payloads to domain objects; invalid domain data is a decoding failure."""
        try:
            return [mapper(payload, self.currencies) for payload in payloads]
        except DomainException as e:
            logger.error(f"Ledger answer violates domain rules ({e.code}): {e.message}")
            raise LedgerDecodingError() from e
