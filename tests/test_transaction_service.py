"""Tests for the transaction domain service."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.entities import PaymentStatus, TransactionType
from ledgerbook.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_and_get_transaction(transaction_service):
    txn_id = transaction_service.create_transaction(
        date=date(2025, 1, 15),
        description="AC Cleaning",
        amount=Decimal("75000"),
        type="income",
        payment_status="unpaid",
        client="Budi",
    )

    txn = transaction_service.get_transaction(txn_id)
    assert txn is not None
    assert txn.id == txn_id
    assert txn.date == date(2025, 1, 15)
    assert txn.description == "AC Cleaning"
    assert txn.amount == Decimal("75000")
    assert txn.type == TransactionType.INCOME
    assert txn.payment_status == PaymentStatus.UNPAID
    assert txn.client == "Budi"
    assert txn.created_at is not None


def test_payment_status_defaults_to_paid(transaction_service):
    txn_id = transaction_service.create_transaction(
        date=date(2025, 1, 15), description="Fuel", amount=Decimal("50000"), type="expense"
    )
    assert transaction_service.get_transaction(txn_id).is_paid


def test_description_is_stripped(transaction_service):
    txn_id = transaction_service.create_transaction(
        date=date(2025, 1, 15), description="  Fuel  ", amount=Decimal("1"), type="expense"
    )
    assert transaction_service.get_transaction(txn_id).description == "Fuel"


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"amount": Decimal("-1")}, "amount"),
        ({"amount": "abc"}, "amount"),
        ({"type": "transfer"}, "type"),
        ({"payment_status": "partial"}, "payment_status"),
        ({"date": "15/01/2025"}, "date"),
        ({"description": "   "}, "description"),
    ],
)
def test_create_rejects_invalid_fields(transaction_service, overrides, field):
    kwargs = {
        "date": date(2025, 1, 15),
        "description": "Valid",
        "amount": Decimal("100"),
        "type": "income",
        "payment_status": "paid",
    }
    kwargs.update(overrides)

    with pytest.raises(ValidationError) as exc_info:
        transaction_service.create_transaction(**kwargs)
    assert exc_info.value.field == field
    assert transaction_service.list_transactions() == []


def test_get_missing_transaction_returns_none(transaction_service):
    assert transaction_service.get_transaction(999) is None


def test_require_missing_transaction(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.require_transaction(999)


def test_mark_as_paid(transaction_service, sample_transactions):
    txn_id = sample_transactions["unpaid_income"]
    transaction_service.mark_as_paid(txn_id)
    assert transaction_service.get_transaction(txn_id).payment_status == PaymentStatus.PAID


def test_mark_as_paid_twice_conflicts(transaction_service, sample_transactions):
    with pytest.raises(ConflictError, match="already paid"):
        transaction_service.mark_as_paid(sample_transactions["paid_income"])


def test_mark_missing_as_paid(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.mark_as_paid(999)


def test_delete_transaction(transaction_service, sample_transactions):
    txn_id = sample_transactions["paid_expense"]
    transaction_service.delete_transaction(txn_id)
    assert transaction_service.get_transaction(txn_id) is None
    assert len(transaction_service.list_transactions()) == 3


def test_delete_missing_transaction(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.delete_transaction(999)


def test_list_is_in_date_order(transaction_service, sample_transactions):
    dates = [txn.date for txn in transaction_service.list_transactions()]
    assert dates == sorted(dates)


def test_list_filters(transaction_service, sample_transactions):
    assert len(transaction_service.list_transactions(type="income")) == 2
    assert len(transaction_service.list_transactions(payment_status="unpaid")) == 2
    assert len(transaction_service.list_transactions(type="expense", payment_status="paid")) == 1
    assert len(transaction_service.list_transactions(month=2)) == 2
    assert len(transaction_service.list_transactions(client="Budi")) == 1
    assert (
        len(
            transaction_service.list_transactions(
                start_date=date(2025, 2, 1), end_date=date(2025, 2, 28)
            )
        )
        == 2
    )


def test_list_rejects_bad_month(transaction_service):
    with pytest.raises(ValidationError) as exc_info:
        transaction_service.list_transactions(month=13)
    assert exc_info.value.field == "month"


def test_create_from_service(transaction_service, catalog_service):
    service_id = catalog_service.create_service("Leak Welding", Decimal("250000"))
    txn_id = transaction_service.create_from_service(
        service_id, date=date(2025, 4, 1), payment_status="unpaid", client="Sari"
    )

    txn = transaction_service.get_transaction(txn_id)
    assert txn.description == "Leak Welding"
    assert txn.amount == Decimal("250000")
    assert txn.type == TransactionType.INCOME
    assert txn.payment_status == PaymentStatus.UNPAID
    assert txn.client == "Sari"


def test_create_from_missing_service(transaction_service):
    with pytest.raises(NotFoundError):
        transaction_service.create_from_service(999, date=date(2025, 4, 1))


def test_create_rejects_sub_cent_amount(transaction_service):
    with pytest.raises(ValidationError) as exc_info:
        transaction_service.create_transaction(
            date=date(2025, 1, 15), description="Fuel", amount=Decimal("100.005"), type="expense"
        )
    assert exc_info.value.field == "amount"
    assert transaction_service.list_transactions() == []


def test_stored_amount_matches_input(transaction_service):
    txn_id = transaction_service.create_transaction(
        date=date(2025, 1, 15),
        description="Split unit install",
        amount=Decimal("9999999999999.99"),
        type="income",
    )
    assert transaction_service.get_transaction(txn_id).amount == Decimal("9999999999999.99")


def test_list_search_matches_description_case_insensitively(transaction_service, sample_transactions):
    found = transaction_service.list_transactions(search="REFILL")
    assert [txn.id for txn in found] == [sample_transactions["unpaid_income"]]
    assert len(transaction_service.list_transactions(search="  pipe ")) == 1
    assert len(transaction_service.list_transactions(search="r", type="expense")) == 2


def test_list_search_treats_wildcards_literally(transaction_service, sample_transactions):
    assert transaction_service.list_transactions(search="%") == []
    assert transaction_service.list_transactions(search="_") == []
