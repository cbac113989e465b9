"""Tests for date parser with relative dates."""

import pytest
from datetime import date

from ledgerbook.utils.date_parser import parse_date, get_date_range

TODAY = date(2025, 3, 15)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_iso_date_is_not_dayfirst():
    assert parse_date("2025-03-04") == date(2025, 3, 4)


def test_parse_written_date():
    assert parse_date("15 March 2025") == date(2025, 3, 15)


def test_parse_relative_days():
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date("yesterday", today=TODAY) == date(2025, 3, 14)
    assert parse_date("tomorrow", today=TODAY) == date(2025, 3, 16)
    assert parse_date("  Today ", today=TODAY) == TODAY


def test_parse_days_ago():
    assert parse_date("3 days ago", today=TODAY) == date(2025, 3, 12)
    assert parse_date("20 days ago", today=TODAY) == date(2025, 2, 23)


def test_parse_period_starts():
    assert parse_date("this month", today=TODAY) == date(2025, 3, 1)
    assert parse_date("last month", today=TODAY) == date(2025, 2, 1)
    assert parse_date("this year", today=TODAY) == date(2025, 1, 1)
    assert parse_date("last year", today=TODAY) == date(2024, 1, 1)


def test_parse_last_month_in_january():
    assert parse_date("last month", today=date(2025, 1, 20)) == date(2024, 12, 1)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "period, expected",
    [
        ("this-month", (date(2025, 3, 1), date(2025, 3, 15))),
        ("last-month", (date(2025, 2, 1), date(2025, 2, 28))),
        ("this-year", (date(2025, 1, 1), date(2025, 3, 15))),
        ("last-year", (date(2024, 1, 1), date(2024, 12, 31))),
    ],
)
def test_get_date_range(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_last_month_in_january():
    assert get_date_range("last-month", today=date(2025, 1, 10)) == (
        date(2024, 12, 1),
        date(2024, 12, 31),
    )


def test_get_date_range_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade", today=TODAY)
