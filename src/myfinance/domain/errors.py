"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """

    #: Error kind reported to external callers.
    kind = "DomainError"


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    kind = "InvalidArgument"


class NotFoundError(DomainError):
    """Requested transfer does not exist."""

    kind = "NotFound"


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate transfer id."""

    kind = "Conflict"


class StorageUnavailableError(DomainError):
    """The backing store could not be reached or written."""

    kind = "StorageUnavailable"


def transfer_not_found(transfer_id) -> str:
    """Return message for missing transfer."""
    return f"Transfer with id {transfer_id} not found."


def duplicate_transfer_id(transfer_id) -> str:
    """Return message for an id that is already stored."""
    return f"Transfer with id {transfer_id} already exists."


def invalid_transfer_kind(kind_text) -> str:
    """Return message for an unrecognized transfer type."""
    return f"Invalid transfer type: {kind_text}. Valid types are 'Income' and 'Expense'."


def negative_amount(amount) -> str:
    """Return message for an amount below zero."""
    return (
        f"Amount must be an absolute value, got {amount}. "
        "Use the transfer type to record an expense."
    )


def invalid_range(start, end) -> str:
    """Return message for a range whose start is after its end."""
    return f"Invalid range: start {start} is after end {end}."


def storage_unavailable(detail: str) -> str:
    """Return message for a failed storage call."""
    return f"Storage unavailable: {detail}"


def amount_too_large(amount, limit) -> str:
    """Return message for an amount the ledger cannot store."""
    return f"Amount {amount} is too large. Amounts must be below {limit:,}."


def sub_cent_amount(amount) -> str:
    """Return message for an amount with fractions of a cent."""
    return f"Amount {amount} has more than two decimal places."
