"""Domain layer for myfinance application."""

from myfinance.domain.entities import Transfer, TransferKind
from myfinance.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    StorageUnavailableError,
)

__all__ = [
    "Transfer",
    "TransferKind",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StorageUnavailableError",
]
