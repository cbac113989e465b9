"""Tests for field validation."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ledgerbook.domain.entities import PaymentStatus, TransactionType
from ledgerbook.domain.errors import DomainError, ValidationError
from ledgerbook.domain.validation import (
    parse_payment_status,
    parse_transaction_type,
    validate_amount,
    validate_date,
    validate_text,
    validate_transaction,
)


class TestValidateAmount:
    def test_accepts_decimal_int_and_string(self):
        assert validate_amount(Decimal("75000")) == Decimal("75000")
        assert validate_amount(75000) == Decimal("75000")
        assert validate_amount("75000.50") == Decimal("75000.50")

    def test_zero_is_allowed(self):
        assert validate_amount(Decimal("0")) == 0

    @pytest.mark.parametrize("value", [Decimal("-0.01"), -1, "-100"])
    def test_negative_rejected(self, value):
        with pytest.raises(ValidationError, match="cannot be negative") as exc_info:
            validate_amount(value)
        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("value", [1.5, True, "abc", None, Decimal("NaN"), Decimal("Infinity")])
    def test_non_money_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_amount(value)
        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("value", ["100.005", Decimal("0.001"), "12345678901234567.89", Decimal("10000000000000")])
    def test_rejects_values_storage_cannot_hold(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_amount(value)
        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("value", ["100.50", "100.500", Decimal("9999999999999.99"), Decimal("1E+3")])
    def test_accepts_two_places_and_thirteen_digits(self, value):
        assert validate_amount(value) == Decimal(value)

    def test_custom_field_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_amount(-5, field="price")
        assert exc_info.value.field == "price"
        assert "Price cannot be negative" in str(exc_info.value)


class TestValidateDate:
    def test_accepts_date(self):
        assert validate_date(date(2025, 1, 15)) == date(2025, 1, 15)

    def test_accepts_iso_string(self):
        assert validate_date("2025-01-15") == date(2025, 1, 15)

    def test_rejects_datetime(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_date(datetime(2025, 1, 15, 10, 30))
        assert exc_info.value.field == "date"

    @pytest.mark.parametrize("value", ["15/01/2025", "2025-02-30", None, 20250115])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_date(value)
        assert exc_info.value.field == "date"


def test_parse_transaction_type():
    assert parse_transaction_type("income") == TransactionType.INCOME
    assert parse_transaction_type(TransactionType.EXPENSE) == TransactionType.EXPENSE
    with pytest.raises(ValidationError, match="expected one of: income, expense") as exc_info:
        parse_transaction_type("Income")
    assert exc_info.value.field == "type"


def test_parse_payment_status():
    assert parse_payment_status("unpaid") == PaymentStatus.UNPAID
    with pytest.raises(ValidationError) as exc_info:
        parse_payment_status("partial")
    assert exc_info.value.field == "payment_status"


def test_validate_text():
    assert validate_text("  AC Cleaning ", "name") == "AC Cleaning"
    with pytest.raises(ValidationError) as exc_info:
        validate_text("", "description")
    assert exc_info.value.field == "description"
    with pytest.raises(ValidationError):
        validate_text(None, "name")


def test_validation_error_is_domain_and_value_error():
    error = ValidationError("bad", field="amount")
    assert isinstance(error, DomainError)
    assert isinstance(error, ValueError)


def test_validate_transaction_reports_first_bad_field(make_transaction):
    txn = make_transaction(amount=Decimal("-1"), type="transfer")
    with pytest.raises(ValidationError) as exc_info:
        validate_transaction(txn)
    assert exc_info.value.field == "amount"


def test_validate_transaction_accepts_valid(make_transaction):
    validate_transaction(make_transaction())


def test_validate_transaction_rejects_string_date(make_transaction):
    with pytest.raises(ValidationError) as exc_info:
        validate_transaction(make_transaction(txn_date="2025-03-05"))
    assert exc_info.value.field == "date"
