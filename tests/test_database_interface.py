"""Tests for Database interface returning domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ledgerbook.database.factories import DB_PATH_ENVVAR, create_sqlite_database, sqlite_url
from ledgerbook.domain import entities
from ledgerbook.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_service_round_trip(self, temp_db):
        service_id = temp_db.create_service(name="Leak Welding", price=Decimal("250000"))

        service = temp_db.get_service(service_id)
        assert isinstance(service, entities.Service)
        assert service.price == Decimal("250000")
        assert isinstance(service.created_at, datetime)
        assert temp_db.get_service_by_name("Leak Welding") == service
        assert temp_db.get_service_by_name("leak welding") is None

    def test_get_transaction_returns_domain_model(self, temp_db):
        txn_id = temp_db.create_transaction(
            date=date(2025, 1, 15),
            description="AC Cleaning",
            amount=Decimal("75000.50"),
            type=entities.TransactionType.INCOME,
            payment_status=entities.PaymentStatus.PAID,
        )

        txn = temp_db.get_transaction(txn_id)
        assert isinstance(txn, entities.Transaction)
        assert isinstance(txn.amount, Decimal)
        assert txn.amount == Decimal("75000.50")
        assert txn.type is entities.TransactionType.INCOME

    def test_ids_are_unique(self, temp_db):
        ids = {
            temp_db.create_transaction(
                date=date(2025, 1, day),
                description="Fuel",
                amount=Decimal("50000"),
                type="expense",
                payment_status="paid",
            )
            for day in range(1, 6)
        }
        assert len(ids) == 5

    def test_update_payment_status(self, temp_db):
        txn_id = temp_db.create_transaction(
            date=date(2025, 1, 15),
            description="AC Cleaning",
            amount=Decimal("75000"),
            type="income",
            payment_status="unpaid",
        )
        temp_db.update_payment_status(txn_id, entities.PaymentStatus.PAID)
        assert temp_db.get_transaction(txn_id).is_paid

    def test_missing_rows_raise_not_found(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_payment_status(999, entities.PaymentStatus.PAID)
        with pytest.raises(NotFoundError):
            temp_db.delete_transaction(999)
        with pytest.raises(NotFoundError):
            temp_db.delete_service(999)
        with pytest.raises(NotFoundError):
            temp_db.delete_client(999)

    def test_reads_see_changes_from_other_connections(self, temp_db):
        txn_id = temp_db.create_transaction(
            date=date(2025, 1, 15),
            description="AC Cleaning",
            amount=Decimal("75000"),
            type="income",
            payment_status="unpaid",
        )
        assert not temp_db.get_transaction(txn_id).is_paid

        other = create_sqlite_database(database_path=temp_db.database_path)
        other.update_payment_status(txn_id, entities.PaymentStatus.PAID)
        other.disconnect()

        assert temp_db.get_transaction(txn_id).is_paid


def test_factory_reads_path_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv(DB_PATH_ENVVAR, str(db_path))

    db = create_sqlite_database()
    db.create_client(name="Budi")
    db.disconnect()

    assert db_path.exists()


def test_factory_memory_book_is_not_written_to_disk(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    db = create_sqlite_database(database_path=":memory:")

    client_id = db.create_client(name="Sari")
    assert db.get_client(client_id).name == "Sari"
    db.disconnect()

    assert list(tmp_path.iterdir()) == []


def test_sqlite_url_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert sqlite_url("~/books.db") == f"sqlite:///{tmp_path}/books.db"
    assert sqlite_url(":memory:") == "sqlite://"
