"""Mappers between ledger payloads and domain objects."""

from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.entities.transfer_request import TransferRequest
from transfer_engine.domain.value_objects.currency import CurrencyRegistry
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.money import Money
from transfer_engine.domain.value_objects.transfer_receipt import TransferReceipt
from transfer_engine.infrastructure.adapters.outbound.ledger.models import (
    AccountPayload,
    ExchangeRatePayload,
    TransferRequestPayload,
    TransferResultPayload,
)


class AccountMapper:
    """Mapper for Account entity."""

    @staticmethod
    def to_entity(payload: AccountPayload, currencies: CurrencyRegistry) -> Account:
        """
        Convert an account payload to a domain entity.

        The currency symbol is taken from the registry, not from the payload.

        Raises:
            UnsupportedCurrencyError: If the currency code is not registered
        """
        currency = currencies.get(payload.currency)
        return Account(
            id=payload.account_id,
            account_number=payload.account_number,
            balance=Money(amount=payload.balance, currency=currency),
        )


class ExchangeRateMapper:
    """Mapper for ExchangeRate value object."""

    @staticmethod
    def to_entity(
        payload: ExchangeRatePayload, currencies: CurrencyRegistry
    ) -> ExchangeRate:
        """
        Convert a rate payload to a value object.

        Raises:
            UnsupportedCurrencyError: If a currency code is not registered
            InvalidExchangeRateError: If the rate is not positive
        """
        return ExchangeRate(
            from_currency=currencies.get(payload.from_currency),
            to_currency=currencies.get(payload.to_currency),
            rate=payload.rate,
            last_updated=payload.last_updated,
        )


class TransferMapper:
    """Mapper for transfer requests and results."""

    @staticmethod
    def to_payload(request: TransferRequest) -> TransferRequestPayload:
        return TransferRequestPayload(
            from_account_id=request.source_account_id,
            to_account_id=request.destination_account_id,
            amount=request.amount,
            description=request.description,
        )

    @staticmethod
    def to_receipt(payload: TransferResultPayload) -> TransferReceipt:
        return TransferReceipt(
            success=payload.success,
            message=payload.message,
            transaction_id=payload.transaction_id,
            converted_amount=payload.converted_amount,
        )
