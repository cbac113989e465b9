"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date, datetime, UTC
from decimal import Decimal
import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.catalog import CatalogService
from ledgerbook.domain.client import ClientService
from ledgerbook.domain.entities import PaymentStatus, Transaction, TransactionType
from ledgerbook.domain.reports import ReportService
from ledgerbook.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def make_transaction():
    """Factory for in-memory Transaction entities."""
    counter = {"next_id": 1}

    def _make(
        amount="100000",
        type=TransactionType.INCOME,
        payment_status=PaymentStatus.PAID,
        txn_date=date(2025, 3, 10),
        description="AC cleaning",
        id=None,
    ):
        if id is None:
            id = counter["next_id"]
            counter["next_id"] += 1
        return Transaction(
            id=id,
            date=txn_date,
            description=description,
            amount=Decimal(amount) if isinstance(amount, str) else amount,
            type=type,
            payment_status=payment_status,
            created_at=datetime.now(UTC),
        )

    return _make


@pytest.fixture
def sample_transactions(transaction_service):
    """Create a small mixed set of stored transactions and return their IDs."""
    ids = {}
    ids["paid_income"] = transaction_service.create_transaction(
        date=date(2025, 1, 15),
        description="AC Cleaning Split 1 PK",
        amount=Decimal("100000"),
        type="income",
        payment_status="paid",
        client="Budi",
    )
    ids["unpaid_income"] = transaction_service.create_transaction(
        date=date(2025, 2, 3),
        description="Refrigerant Refill R32",
        amount=Decimal("350000"),
        type="income",
        payment_status="unpaid",
        client="Sari",
    )
    ids["paid_expense"] = transaction_service.create_transaction(
        date=date(2025, 2, 10),
        description="Operational Fuel",
        amount=Decimal("50000"),
        type="expense",
        payment_status="paid",
    )
    ids["unpaid_expense"] = transaction_service.create_transaction(
        date=date(2025, 3, 1),
        description="Copper Pipe 3m",
        amount=Decimal("250000"),
        type="expense",
        payment_status="unpaid",
    )
    return ids


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
