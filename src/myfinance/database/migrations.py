"""Schema migrations for the myfinance database.

Each migration is a function taking an open connection. The highest applied
version is recorded in the ``schema_version`` table; on startup every
registered migration above it runs, in order, each in its own transaction.
"""

from typing import Callable

from sqlalchemy import func, inspect, select, text
from sqlalchemy.engine import Connection, Engine

from myfinance.database.models import SchemaVersion, Transfer
from myfinance.logging_setup import get_logger

logger = get_logger("myfinance.database.migrations")


def column_exists(conn: Connection, table_name: str, column_name: str) -> bool:
    """Check if a column exists in a table.

    Args:
        conn: SQLAlchemy connection
        table_name: Name of the table
        column_name: Name of the column

    Returns:
        True if column exists, False otherwise
    """
    inspector = inspect(conn)
    columns = [col["name"] for col in inspector.get_columns(table_name)]
    return column_name in columns


def _create_transfers_table(conn: Connection) -> None:
    Transfer.__table__.create(conn, checkfirst=True)


def _add_transfer_created_at(conn: Connection) -> None:
    # Ledgers created before insertion order was tracked lack this column.
    # SQLite only accepts a constant default on ADD COLUMN.
    if column_exists(conn, "transfers", "created_at"):
        return
    conn.execute(
        text(
            "ALTER TABLE transfers ADD COLUMN created_at DATETIME NOT NULL "
            "DEFAULT '1970-01-01 00:00:00.000000'"
        )
    )


MIGRATIONS: list[tuple[int, str, Callable[[Connection], None]]] = [
    (1, "create transfers table", _create_transfers_table),
    (2, "add transfers.created_at", _add_transfer_created_at),
]


def current_version(conn: Connection) -> int:
    """Return the highest applied migration, or 0 for a fresh database."""
    SchemaVersion.__table__.create(conn, checkfirst=True)
    version = conn.execute(select(func.max(SchemaVersion.version))).scalar()
    return version or 0


def apply_pending_migrations(engine: Engine) -> list[int]:
    """Apply every migration newer than the recorded schema version.

    Args:
        engine: SQLAlchemy engine bound to the ledger database

    Returns:
        Versions applied by this call, in order (empty when up to date)
    """
    with engine.begin() as conn:
        version = current_version(conn)

    applied = []
    for number, description, migrate in MIGRATIONS:
        if number <= version:
            continue
        logger.info("Applying schema migration %d: %s", number, description)
        with engine.begin() as conn:
            migrate(conn)
            conn.execute(SchemaVersion.__table__.delete())
            conn.execute(SchemaVersion.__table__.insert().values(version=number))
        applied.append(number)

    if not applied:
        logger.debug("Schema is up to date at version %d", version)
    return applied
