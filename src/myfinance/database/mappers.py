"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic (UUID text, kind names), making it
easy to change when the database schema changes.
"""

import uuid

from myfinance.domain import entities as domain
from myfinance.database.models import Transfer as ORMTransfer


def transfer_to_domain(orm_transfer: ORMTransfer) -> domain.Transfer:
    """Convert SQLAlchemy Transfer model to domain Transfer entity."""
    return domain.Transfer(
        id=uuid.UUID(orm_transfer.id),
        amount=orm_transfer.amount,
        occurred_at=orm_transfer.occurred_at,
        note=orm_transfer.note,
        kind=domain.TransferKind(orm_transfer.kind),
    )


def transfer_to_orm(transfer: domain.Transfer) -> ORMTransfer:
    """Build a new SQLAlchemy Transfer row from a domain Transfer entity."""
    return ORMTransfer(
        id=str(transfer.id),
        amount=transfer.amount,
        occurred_at=transfer.occurred_at,
        note=transfer.note,
        kind=transfer.kind.value,
    )


def apply_transfer_values(orm_transfer: ORMTransfer, transfer: domain.Transfer) -> None:
    """Copy all value fields of a domain Transfer onto an existing row."""
    orm_transfer.amount = transfer.amount
    orm_transfer.occurred_at = transfer.occurred_at
    orm_transfer.note = transfer.note
    orm_transfer.kind = transfer.kind.value
