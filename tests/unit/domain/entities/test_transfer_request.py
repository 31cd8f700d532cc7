"""Unit tests for TransferRequest entity."""

from decimal import Decimal

import pytest

from transfer_engine.domain.entities.transfer_request import (
    MAX_DESCRIPTION_LENGTH,
    TransferRequest,
)
from transfer_engine.domain.exceptions import InvalidTransferRequestError


class TestTransferRequest:
    """Test TransferRequest construction."""

    def test_create_request(self):
        """Test creating a request."""
        request = TransferRequest(
            source_account_id=1,
            destination_account_id=3,
            amount=Decimal("100.00"),
            description="Kira",
        )
        assert request.amount == Decimal("100.00")
        assert request.description == "Kira"

    def test_amount_coerced_to_decimal(self):
        """Test numeric amounts become Decimal."""
        request = TransferRequest(source_account_id=1, destination_account_id=3, amount=12.3)
        assert request.amount == Decimal("12.3")

    def test_non_positive_amount_is_allowed(self):
        """Test positivity is left to the resolver."""
        request = TransferRequest(source_account_id=1, destination_account_id=3, amount=0)
        assert request.amount == 0

    def test_non_numeric_amount_raises_error(self):
        """Test non-numeric amount raises error."""
        with pytest.raises(InvalidTransferRequestError):
            TransferRequest(source_account_id=1, destination_account_id=3, amount="abc")

    def test_blank_description_becomes_none(self):
        """Test blank description is treated as absent."""
        request = TransferRequest(
            source_account_id=1, destination_account_id=3, amount=1, description="   "
        )
        assert request.description is None

    def test_description_is_stripped(self):
        """Test surrounding whitespace is removed."""
        request = TransferRequest(
            source_account_id=1, destination_account_id=3, amount=1, description=" Kira "
        )
        assert request.description == "Kira"

    def test_description_at_limit(self):
        """Test description of maximum length is accepted."""
        text = "x" * MAX_DESCRIPTION_LENGTH
        request = TransferRequest(
            source_account_id=1, destination_account_id=3, amount=1, description=text
        )
        assert request.description == text

    def test_description_too_long_raises_error(self):
        """Test description over the limit raises error."""
        with pytest.raises(InvalidTransferRequestError):
            TransferRequest(
                source_account_id=1,
                destination_account_id=3,
                amount=1,
                description="x" * (MAX_DESCRIPTION_LENGTH + 1),
            )
