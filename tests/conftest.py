"""Shared pytest fixtures for myfinance tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal
import pytest

from myfinance.database.factories import create_sqlite_database
from myfinance.domain.transfer import TransferService
from myfinance.tools.transfer_tools import TransferTools


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup, including the WAL side files
    db.disconnect()
    for path in (db_path, f"{db_path}-wal", f"{db_path}-shm"):
        if os.path.exists(path):
            os.unlink(path)


@pytest.fixture
def transfer_service(temp_db):
    """Create a TransferService with a temporary database."""
    return TransferService(temp_db)


@pytest.fixture
def transfer_tools(transfer_service):
    """Create the tool adapter over a temporary database."""
    return TransferTools(transfer_service)


@pytest.fixture
def sample_transfer(transfer_service):
    """Create a sample expense for testing."""
    return transfer_service.add_transfer(
        amount=Decimal("50.00"),
        occurred_at=datetime(2024, 1, 10),
        note="Rent",
        kind_text="Expense",
    )


@pytest.fixture
def january_transfers(transfer_service):
    """Create transfers on 2024-01-01, 2024-01-15 and 2024-02-01."""
    return [
        transfer_service.add_transfer(Decimal("10.00"), datetime(2024, 1, 1), "New year", "Expense"),
        transfer_service.add_transfer(Decimal("2500.00"), datetime(2024, 1, 15), "Salary", "Income"),
        transfer_service.add_transfer(Decimal("30.00"), datetime(2024, 2, 1), "Groceries", "Expense"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
