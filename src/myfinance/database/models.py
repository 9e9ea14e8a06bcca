"""SQLAlchemy models for myfinance database."""

from datetime import datetime, UTC
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

CENT = Decimal("0.01")


class Money(TypeDecorator):
    """Fixed-point amount with two fractional digits.

    SQLite has no decimal storage class and would keep NUMERIC values as
    binary floats, so on SQLite the amount is stored as exact decimal text.
    Other dialects get NUMERIC(18, 2).
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(32))
        return dialect.type_descriptor(Numeric(18, 2, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        amount = Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
        if dialect.name == "sqlite":
            return str(amount)
        return amount

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class Transfer(Base):
    """Transfer model."""

    __tablename__ = "transfers"

    id = Column(String(36), primary_key=True)
    amount = Column(Money(), nullable=False)
    occurred_at = Column(DateTime, nullable=False, index=True)
    note = Column(String, nullable=False)
    # Stored by name so the data survives reordering of the enum
    kind = Column(String(16), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("kind IN ('Expense', 'Income')", name="ck_transfers_kind"),)


class SchemaVersion(Base):
    """Highest schema migration applied to this database."""

    __tablename__ = "schema_version"

    version = Column(Integer, primary_key=True)
