"""
Dependency wiring for the transfer engine.

The container is built once by the embedding application and passed to
whatever needs the use cases. There is no process-wide client instance.

Usage:
    container = create_ledger_container(transport)
    accounts = await container.list_accounts().execute(user_id=7)
    result = await container.execute_transfer().execute(transfer_input)
"""

from dataclasses import dataclass, field

from transfer_engine.application.ports.outbound.account_query_port import (
    AccountQueryPort,
)
from transfer_engine.application.ports.outbound.exchange_rate_query_port import (
    ExchangeRateQueryPort,
)
from transfer_engine.application.ports.outbound.transfer_submission_port import (
    TransferSubmissionPort,
)
from transfer_engine.application.use_cases.accounts.list_accounts import (
    ListAccountsUseCase,
)
from transfer_engine.application.use_cases.exchange_rates.get_exchange_rates import (
    GetExchangeRatesUseCase,
)
from transfer_engine.application.use_cases.exchange_rates.quote_exchange_rate import (
    QuoteExchangeRateUseCase,
)
from transfer_engine.application.use_cases.transfers.execute_transfer import (
    ExecuteTransferUseCase,
)
from transfer_engine.domain.services.transfer_resolver import TransferResolver
from transfer_engine.domain.value_objects.currency import CurrencyRegistry
from transfer_engine.infrastructure.adapters.outbound.in_memory.ledger import (
    InMemoryLedger,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.gateway import (
    LedgerGateway,
)
from transfer_engine.infrastructure.adapters.outbound.ledger.transport import (
    LedgerTransport,
)
from transfer_engine.infrastructure.config.settings import Settings, get_settings


@dataclass
class Container:
    """Ports, resolver and settings, with factories for the use cases."""

    accounts: AccountQueryPort
    rates: ExchangeRateQueryPort
    submissions: TransferSubmissionPort
    settings: Settings
    currencies: CurrencyRegistry
    resolver: TransferResolver = field(default_factory=TransferResolver)

    def list_accounts(self) -> ListAccountsUseCase:
        return ListAccountsUseCase(self.accounts)

    def get_exchange_rates(self) -> GetExchangeRatesUseCase:
        return GetExchangeRatesUseCase(self.rates)

    def quote_exchange_rate(self) -> QuoteExchangeRateUseCase:
        return QuoteExchangeRateUseCase(self.rates, self.currencies)

    def execute_transfer(self) -> ExecuteTransferUseCase:
        return ExecuteTransferUseCase(
            accounts=self.accounts,
            rates=self.rates,
            submissions=self.submissions,
            resolver=self.resolver,
            refetch_rates_on_unavailable=self.settings.refetch_rates_on_unavailable,
        )


def create_ledger_container(
    transport: LedgerTransport, settings: Settings | None = None
) -> Container:
    """
    Wire the use cases against the ledger service.

    Args:
        transport: Carrier for ledger requests
        settings: Settings to use, defaults to the process-wide settings

    Returns:
        Container backed by a LedgerGateway
    """
    settings = settings or get_settings()
    currencies = settings.currency_registry()
    gateway = LedgerGateway(transport, currencies)
    return Container(
        accounts=gateway,
        rates=gateway,
        submissions=gateway,
        settings=settings,
        currencies=currencies,
    )


def create_in_memory_container(
    ledger: InMemoryLedger, settings: Settings | None = None
) -> Container:
    """
    Wire the use cases against an in-memory ledger.

    Args:
        ledger: In-memory ledger
        settings: Settings to use, defaults to the process-wide settings

    Returns:
        Container backed by the in-memory ledger
    """
    settings = settings or get_settings()
    return Container(
        accounts=ledger,
        rates=ledger,
        submissions=ledger,
        settings=settings,
        currencies=settings.currency_registry(),
    )
