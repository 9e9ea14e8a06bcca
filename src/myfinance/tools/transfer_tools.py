"""Transfer operations exposed to tool-invoking callers.

Each method takes the loosely typed arguments an agent sends, hands them to
the TransferService and returns a JSON string. Domain errors are reported as
a ``ToolError`` whose message is a JSON object::

    {"error": {"type": "NotFound", "message": "Transfer with id ... not found."}}
"""

import json
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from myfinance.domain.entities import Transfer
from myfinance.domain.errors import DomainError, ValidationError
from myfinance.domain.transfer import TransferService
from myfinance.logging_setup import get_logger
from myfinance.utils.amount_parser import parse_amount
from myfinance.utils.date_parser import parse_datetime

logger = get_logger("myfinance.tools.transfer_tools")

AmountArg = Annotated[Decimal | str, Field(description="Amount (absolute, positive)")]
DateArg = Annotated[str, Field(description="Transfer date and time (local), e.g. '2024-01-10T09:30'")]
DescriptionArg = Annotated[str, Field(description="Short note (e.g., 'Rent'); may be empty")]
TypeArg = Annotated[str, Field(description="Type: 'Income' or 'Expense' (case-insensitive)")]
IdArg = Annotated[str, Field(description="Transfer id")]


def transfer_to_dict(transfer: Transfer) -> dict[str, Any]:
    """Convert a transfer to its wire representation."""
    return {
        "id": str(transfer.id),
        # Decimal text keeps cents exact; a JSON number would go through float
        "value": f"{transfer.amount:.2f}",
        "date": transfer.occurred_at.isoformat(),
        "description": transfer.note,
        "type": transfer.kind.value,
    }


def serialize_transfer(transfer: Transfer) -> str:
    return json.dumps(transfer_to_dict(transfer))


def serialize_transfers(transfers: list[Transfer]) -> str:
    return json.dumps([transfer_to_dict(t) for t in transfers])


def error_payload(error: DomainError) -> str:
    """Render a domain error as the structured error text sent to the caller."""
    return json.dumps({"error": {"type": error.kind, "message": str(error)}})


def _parse_id(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid transfer id: {value!r}")


def _parse_amount(value) -> Decimal:
    try:
        return parse_amount(value)
    except ValueError as e:
        raise ValidationError(str(e))


def _parse_date(value) -> datetime:
    try:
        return parse_datetime(value)
    except ValueError as e:
        raise ValidationError(str(e))


class TransferTools:
    """The AddTransfer, UpdateTransfer, DeleteTransfer and GetTransfersInRange tools."""

    def __init__(self, service: TransferService):
        self.service = service

    def _fail(self, operation: str, error: DomainError) -> ToolError:
        if isinstance(error, ValidationError):
            logger.warning("%s - invalid input: %s", operation, error)
        else:
            logger.error("%s failed: %s", operation, error)
        return ToolError(error_payload(error))

    def add_transfer(
        self,
        value: AmountArg,
        date: DateArg,
        description: DescriptionArg,
        type: TypeArg,
    ) -> str:
        """Add a new transfer and return it as JSON."""
        logger.info(
            "AddTransfer called with Value=%s, Date=%s, Description=%s, Type=%s",
            value, date, description, type,
        )
        try:
            transfer = self.service.add_transfer(
                _parse_amount(value), _parse_date(date), description, type
            )
        except DomainError as e:
            raise self._fail("AddTransfer", e) from e
        logger.info("AddTransfer - transfer created with Id=%s", transfer.id)
        return serialize_transfer(transfer)

    def update_transfer(
        self,
        id: IdArg,
        value: AmountArg,
        date: DateArg,
        description: DescriptionArg,
        type: TypeArg,
    ) -> str:
        """Replace every field of an existing transfer and return it as JSON."""
        logger.info(
            "UpdateTransfer called for Id=%s with Value=%s, Date=%s, Description=%s, Type=%s",
            id, value, date, description, type,
        )
        try:
            transfer = self.service.update_transfer(
                _parse_id(id), _parse_amount(value), _parse_date(date), description, type
            )
        except DomainError as e:
            raise self._fail("UpdateTransfer", e) from e
        logger.info("UpdateTransfer - transfer updated Id=%s", transfer.id)
        return serialize_transfer(transfer)

    def delete_transfer(self, id: IdArg) -> None:
        """Delete a transfer."""
        logger.info("DeleteTransfer called for Id=%s", id)
        try:
            self.service.delete_transfer(_parse_id(id))
        except DomainError as e:
            raise self._fail("DeleteTransfer", e) from e
        logger.info("DeleteTransfer completed for Id=%s", id)

    def get_transfers_in_range(
        self,
        from_date: Annotated[str, Field(description="Start date (inclusive)")],
        to_date: Annotated[str, Field(description="End date (inclusive)")],
    ) -> str:
        """Return the transfers dated within [from_date, to_date] as a JSON array."""
        logger.info("GetTransfersInRange called with From=%s, To=%s", from_date, to_date)
        try:
            transfers = self.service.get_transfers_in_range(
                _parse_date(from_date), _parse_date(to_date)
            )
        except DomainError as e:
            raise self._fail("GetTransfersInRange", e) from e
        logger.info("GetTransfersInRange - retrieved %d transfers", len(transfers))
        return serialize_transfers(transfers)
