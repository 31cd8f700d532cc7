"""
Pytest configuration and fixtures for transfer engine tests.

This module provides:
- Account snapshots in each default currency
- Exchange rate snapshots
- An in-memory ledger seeded with both
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from transfer_engine.domain.entities.account import Account
from transfer_engine.domain.value_objects.currency import EUR, TRY, USD
from transfer_engine.domain.value_objects.exchange_rate import ExchangeRate
from transfer_engine.domain.value_objects.money import Money
from transfer_engine.infrastructure.adapters.outbound.in_memory.ledger import (
    InMemoryLedger,
)
from transfer_engine.infrastructure.config.settings import Settings

USER_ID = 7
RATES_UPDATED_AT = datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc)


# ============================================================================
# Account Fixtures
# ============================================================================
@pytest.fixture
def try_account() -> Account:
    """Lira account with 500.00 balance."""
    return Account(
        id=1,
        account_number="TR-0001",
        balance=Money(amount=Decimal("500.00"), currency=TRY),
    )


@pytest.fixture
def try_savings_account() -> Account:
    """Second lira account with 50.00 balance."""
    return Account(
        id=2,
        account_number="TR-0002",
        balance=Money(amount=Decimal("50.00"), currency=TRY),
    )


@pytest.fixture
def usd_account() -> Account:
    """Dollar account with 1,000.00 balance."""
    return Account(
        id=3,
        account_number="US-0001",
        balance=Money(amount=Decimal("1000.00"), currency=USD),
    )


@pytest.fixture
def eur_account() -> Account:
    """Euro account with zero balance."""
    return Account(
        id=4,
        account_number="EU-0001",
        balance=Money(amount=Decimal("0.00"), currency=EUR),
    )


@pytest.fixture
def accounts(try_account, try_savings_account, usd_account, eur_account) -> list[Account]:
    return [try_account, try_savings_account, usd_account, eur_account]


# ============================================================================
# Rate Fixtures
# ============================================================================
@pytest.fixture
def try_usd_rate() -> ExchangeRate:
    return ExchangeRate(
        from_currency=TRY,
        to_currency=USD,
        rate=Decimal("0.031"),
        last_updated=RATES_UPDATED_AT,
    )


@pytest.fixture
def usd_try_rate() -> ExchangeRate:
    return ExchangeRate(
        from_currency=USD,
        to_currency=TRY,
        rate=Decimal("32.1546"),
        last_updated=RATES_UPDATED_AT,
    )


@pytest.fixture
def rates(try_usd_rate, usd_try_rate) -> list[ExchangeRate]:
    """Rate snapshot without any EUR pair."""
    return [try_usd_rate, usd_try_rate]


# ============================================================================
# Ledger Fixtures
# ============================================================================
@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment running the tests."""
    return Settings(_env_file=None)


@pytest.fixture
def ledger(accounts, rates) -> InMemoryLedger:
    """In-memory ledger where user 7 owns every fixture account."""
    return InMemoryLedger({USER_ID: accounts}, rates, first_transaction_id=1001)
