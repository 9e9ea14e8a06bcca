"""Tests for domain entities."""

import uuid
import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

from myfinance.domain.entities import Transfer, TransferKind
from myfinance.domain.errors import DomainError, ValidationError


class TestTransferKind:
    """Tests for TransferKind parsing."""

    @pytest.mark.parametrize("text", ["income", "Income", "INCOME", "  iNcOmE "])
    def test_parse_income_case_insensitive(self, text):
        """Test that any casing of 'income' maps to INCOME."""
        assert TransferKind.parse(text) is TransferKind.INCOME

    @pytest.mark.parametrize("text", ["expense", "Expense", "EXPENSE"])
    def test_parse_expense_case_insensitive(self, text):
        """Test that any casing of 'expense' maps to EXPENSE."""
        assert TransferKind.parse(text) is TransferKind.EXPENSE

    @pytest.mark.parametrize("text", ["", "transfer", "expenses", "0", "1", None])
    def test_parse_rejects_unknown(self, text):
        """Test that anything else is an invalid argument."""
        with pytest.raises(ValidationError) as exc_info:
            TransferKind.parse(text)
        assert "Valid types are 'Income' and 'Expense'" in str(exc_info.value)

    def test_values_are_names(self):
        """Test that the persisted value is the textual name."""
        assert TransferKind.EXPENSE.value == "Expense"
        assert TransferKind.INCOME.value == "Income"


class TestTransfer:
    """Tests for Transfer entity."""

    def test_create_generates_unique_ids(self):
        """Test that create assigns a fresh UUID each time."""
        first = Transfer.create(Decimal("1.00"), datetime(2024, 1, 1), "a", TransferKind.EXPENSE)
        second = Transfer.create(Decimal("1.00"), datetime(2024, 1, 1), "a", TransferKind.EXPENSE)

        assert isinstance(first.id, uuid.UUID)
        assert first.id != second.id

    def test_transfer_immutability(self):
        """Test that Transfer entities are immutable."""
        transfer = Transfer.create(Decimal("1.00"), datetime(2024, 1, 1), "a", TransferKind.EXPENSE)
        with pytest.raises(FrozenInstanceError):
            transfer.amount = Decimal("2.00")


def test_domain_errors_are_value_errors():
    """Test that domain errors keep ValueError compatibility."""
    assert issubclass(DomainError, ValueError)
    assert issubclass(ValidationError, DomainError)
