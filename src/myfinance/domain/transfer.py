"""Transfer domain service."""

import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from myfinance.database.base import Database
from myfinance.domain.entities import Transfer, TransferKind
from myfinance.domain.errors import (
    ValidationError,
    amount_too_large,
    invalid_range,
    negative_amount,
    sub_cent_amount,
)
from myfinance.logging_setup import get_logger

logger = get_logger("myfinance.domain.transfer")

CENT = Decimal("0.01")
# NUMERIC(18,2) holds 16 integer digits
MAX_AMOUNT = Decimal(10) ** 16


def normalize_amount(amount) -> Decimal:
    """Validate an amount and return it with exactly two fractional digits.

    Raises:
        ValidationError: If the amount is not a finite, non-negative number
            below MAX_AMOUNT with at most two decimal places
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid amount: {amount!r}")
    try:
        # str() keeps floats at their shortest repr instead of the binary expansion
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(f"Invalid amount: {amount!r}")
    if not value.is_finite():
        raise ValidationError(f"Invalid amount: {amount!r}")
    if value < 0:
        raise ValidationError(negative_amount(value))
    if value >= MAX_AMOUNT:
        raise ValidationError(amount_too_large(value, MAX_AMOUNT))
    try:
        quantized = value.quantize(CENT)
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {amount!r}")
    if quantized != value:
        raise ValidationError(sub_cent_amount(value))
    return quantized


def normalize_datetime(value) -> datetime:
    """Return a naive local date-time.

    A bare date means midnight. A timezone-aware value keeps its wall-clock
    time and drops its tzinfo; no conversion happens.

    Raises:
        ValidationError: If value is not a date or datetime
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise ValidationError(f"Invalid date: {value!r}")


class TransferService:
    """Service for managing transfers."""

    def __init__(self, db: Database):
        """Initialize transfer service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, amount, occurred_at, note, kind_text):
        kind = TransferKind.parse(kind_text)
        if note is None or not isinstance(note, str):
            raise ValidationError("Description is required (use an empty string for none).")
        return normalize_amount(amount), normalize_datetime(occurred_at), note, kind

    def add_transfer(
        self, amount: Decimal, occurred_at: datetime, note: str, kind_text: str
    ) -> Transfer:
        """Add a new transfer.

        Args:
            amount: Transfer amount as an absolute value
            occurred_at: Local date and time of the transfer
            note: Short note about the transfer (may be empty)
            kind_text: 'Income' or 'Expense', case-insensitive

        Returns:
            The created transfer

        Raises:
            ValidationError: If kind, amount, date or note is invalid
        """
        amount, occurred_at, note, kind = self._validate(amount, occurred_at, note, kind_text)
        transfer = self.db.insert_transfer(Transfer.create(amount, occurred_at, note, kind))
        logger.debug("Created transfer %s", transfer.id)
        return transfer

    def get_transfer(self, transfer_id: uuid.UUID) -> Optional[Transfer]:
        """Get transfer by ID.

        Returns:
            Transfer entity or None if not found
        """
        return self.db.get_transfer(transfer_id)

    def update_transfer(
        self,
        transfer_id: uuid.UUID,
        amount: Decimal,
        occurred_at: datetime,
        note: str,
        kind_text: str,
    ) -> Transfer:
        """Replace all value fields of an existing transfer.

        Args:
            transfer_id: Transfer ID to update
            amount: Updated amount as an absolute value
            occurred_at: Updated local date and time
            note: Updated note
            kind_text: 'Income' or 'Expense', case-insensitive

        Returns:
            The updated transfer, with the same id

        Raises:
            ValidationError: If kind, amount, date or note is invalid
            NotFoundError: If the transfer doesn't exist
        """
        amount, occurred_at, note, kind = self._validate(amount, occurred_at, note, kind_text)
        replacement = Transfer(
            id=transfer_id, amount=amount, occurred_at=occurred_at, note=note, kind=kind
        )
        transfer = self.db.replace_transfer(replacement)
        logger.debug("Updated transfer %s", transfer.id)
        return transfer

    def delete_transfer(self, transfer_id: uuid.UUID) -> None:
        """Delete a transfer.

        Raises:
            NotFoundError: If the transfer doesn't exist
        """
        self.db.delete_transfer(transfer_id)

    def get_transfers_in_range(self, start: datetime, end: datetime) -> list[Transfer]:
        """List transfers that occurred within an inclusive range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive)

        Raises:
            ValidationError: If start is after end
        """
        start = normalize_datetime(start)
        end = normalize_datetime(end)
        if start > end:
            raise ValidationError(invalid_range(start, end))
        return self.db.list_transfers(start, end)
