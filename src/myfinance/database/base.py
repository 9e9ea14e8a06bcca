"""Abstract database interface."""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from myfinance.domain.entities import Transfer


class Database(ABC):
    """Abstract ledger store for myfinance.

    Implementations own the durable copy of every transfer. They apply no
    validation policy beyond keeping ids unique.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Bring the schema up to date by applying pending migrations."""
        pass

    @abstractmethod
    def insert_transfer(self, transfer: Transfer) -> Transfer:
        """Persist a new transfer. Returns the stored transfer.

        Raises:
            ConflictError: If a transfer with the same id already exists
        """
        pass

    @abstractmethod
    def get_transfer(self, transfer_id: uuid.UUID) -> Optional[Transfer]:
        """Get transfer by ID."""
        pass

    @abstractmethod
    def replace_transfer(self, transfer: Transfer) -> Transfer:
        """Overwrite every value field of the transfer with the same id.

        Raises:
            NotFoundError: If no transfer with that id exists
        """
        pass

    @abstractmethod
    def delete_transfer(self, transfer_id: uuid.UUID) -> None:
        """Delete a transfer.

        Raises:
            NotFoundError: If no transfer with that id exists
        """
        pass

    @abstractmethod
    def list_transfers(self, start: datetime, end: datetime) -> list[Transfer]:
        """List transfers with start <= occurred_at <= end.

        Args:
            start: Inclusive lower bound
            end: Inclusive upper bound
        """
        pass
