"""Domain model entities for myfinance.

These are pure data classes representing the ledger, independent of the
database schema. A transfer is never mutated in place: updates build a new
value carrying the same id.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from myfinance.domain.errors import ValidationError, invalid_transfer_kind


class TransferKind(str, Enum):
    """Direction of a transfer, persisted by name."""

    EXPENSE = "Expense"
    INCOME = "Income"

    @classmethod
    def parse(cls, text: str) -> "TransferKind":
        """Parse a kind name case-insensitively.

        Raises:
            ValidationError: If text is not 'Expense' or 'Income'
        """
        if isinstance(text, cls):
            return text
        if isinstance(text, str):
            wanted = text.strip().lower()
            for kind in cls:
                if kind.value.lower() == wanted:
                    return kind
        raise ValidationError(invalid_transfer_kind(text))


@dataclass(frozen=True)
class Transfer:
    """Transfer domain entity (an income or an expense)."""

    id: uuid.UUID
    amount: Decimal
    occurred_at: datetime
    note: str
    kind: TransferKind

    @classmethod
    def create(
        cls, amount: Decimal, occurred_at: datetime, note: str, kind: TransferKind
    ) -> "Transfer":
        """Build a new transfer with a freshly generated id."""
        return cls(id=uuid.uuid4(), amount=amount, occurred_at=occurred_at, note=note, kind=kind)
