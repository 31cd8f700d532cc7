"""Unit tests for ListAccountsUseCase."""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from transfer_engine.application.exceptions import ExternalServiceError
from transfer_engine.application.use_cases.accounts.list_accounts import (
    ListAccountsUseCase,
)


@pytest.fixture
def mock_accounts():
    """Create a mock account query port."""
    port = Mock()
    port.list_accounts = AsyncMock()
    return port


class TestListAccountsUseCase:
    """Test ListAccountsUseCase."""

    @pytest.mark.asyncio
    async def test_list_accounts_success(self, mock_accounts, try_account, usd_account):
        """Test accounts are returned with display data."""
        # Arrange
        mock_accounts.list_accounts.return_value = [try_account, usd_account]
        use_case = ListAccountsUseCase(mock_accounts)

        # Act
        result = await use_case.execute(user_id=7)

        # Assert
        assert result.total == 2
        first = result.accounts[0]
        assert first.id == 1
        assert first.account_number == "TR-0001"
        assert first.currency == 1
        assert first.currency_code == "TRY"
        assert first.currency_symbol == "₺"
        assert first.balance == Decimal("500.00")
        assert first.display_label == "TR-0001 - 500.00 ₺"
        assert result.accounts[1].display_label == "US-0001 - 1,000.00 $"

        mock_accounts.list_accounts.assert_called_once_with(7)

    @pytest.mark.asyncio
    async def test_list_accounts_empty(self, mock_accounts):
        """Test user without accounts."""
        mock_accounts.list_accounts.return_value = []
        result = await ListAccountsUseCase(mock_accounts).execute(user_id=7)
        assert result.total == 0
        assert result.accounts == []

    @pytest.mark.asyncio
    async def test_list_accounts_propagates_ledger_error(self, mock_accounts):
        """Test ledger failures reach the caller."""
        mock_accounts.list_accounts.side_effect = ExternalServiceError("Bilinmeyen hata")
        with pytest.raises(ExternalServiceError):
            await ListAccountsUseCase(mock_accounts).execute(user_id=7)
