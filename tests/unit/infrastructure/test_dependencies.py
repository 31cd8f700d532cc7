"""Unit tests for dependency wiring."""

from transfer_engine.application.use_cases.accounts import ListAccountsUseCase
from transfer_engine.application.use_cases.exchange_rates import (
    GetExchangeRatesUseCase,
    QuoteExchangeRateUseCase,
)
from transfer_engine.application.use_cases.transfers import ExecuteTransferUseCase
from transfer_engine.infrastructure.adapters.outbound.ledger import LedgerGateway
from transfer_engine.infrastructure.config.dependencies import (
    create_in_memory_container,
    create_ledger_container,
)
from transfer_engine.infrastructure.config.settings import (
    CurrencyDefinition,
    Settings,
)


class NullTransport:
    async def request(self, method, path, params=None, json=None):
        return b""


class TestLedgerContainer:
    """Test wiring against the ledger gateway."""

    def test_one_gateway_serves_all_ports(self, settings):
        """Test the same gateway backs every port."""
        container = create_ledger_container(NullTransport(), settings)

        assert isinstance(container.accounts, LedgerGateway)
        assert container.accounts is container.rates is container.submissions

    def test_gateway_uses_configured_currencies(self):
        """Test extra currencies reach the gateway's registry."""
        settings = Settings(
            _env_file=None,
            extra_currencies=[
                CurrencyDefinition(numeric_code=4, code="GBP", symbol="£", name="Sterlin")
            ],
        )
        container = create_ledger_container(NullTransport(), settings)

        assert "GBP" in [c.code for c in container.accounts.currencies]
        assert container.currencies is container.accounts.currencies


class TestInMemoryContainer:
    """Test wiring against the in-memory ledger."""

    def test_factories(self, ledger, settings):
        """Test each factory returns its use case."""
        container = create_in_memory_container(ledger, settings)

        assert isinstance(container.list_accounts(), ListAccountsUseCase)
        assert isinstance(container.get_exchange_rates(), GetExchangeRatesUseCase)
        assert isinstance(container.quote_exchange_rate(), QuoteExchangeRateUseCase)
        assert isinstance(container.execute_transfer(), ExecuteTransferUseCase)

    def test_refetch_flag_comes_from_settings(self, ledger):
        """Test the transfer use case honours the re-fetch setting."""
        settings = Settings(_env_file=None, refetch_rates_on_unavailable=False)
        use_case = create_in_memory_container(ledger, settings).execute_transfer()

        assert use_case.refetch_rates_on_unavailable is False
