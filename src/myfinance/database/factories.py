"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from myfinance.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_DATA_DIR = ".myfinance"
DEFAULT_DB_FILENAME = "myfinance.db"


def default_database_path() -> Path:
    """Return the per-application database file, creating its directory."""
    db_dir = Path.home() / DEFAULT_DATA_DIR
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DEFAULT_DB_FILENAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks MYFINANCE_DB_PATH
            environment variable, then defaults to ~/.myfinance/myfinance.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("MYFINANCE_DB_PATH")

    if database_path is None:
        database_path = str(default_database_path())

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
