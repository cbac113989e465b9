"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "last-month", "this-year", "last-year")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO and other absolute dates: "2025-03-15", "15 March 2025"
    - Relative days: "today", "yesterday", "tomorrow", "3 days ago"
    - Period starts: "this month", "last month", "this year", "last year"

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_days = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if date_str in relative_days:
        return today + timedelta(days=relative_days[date_str])

    if date_str.endswith(" days ago"):
        count = date_str[: -len(" days ago")].strip()
        if count.isdigit():
            return today - timedelta(days=int(count))

    period_starts = {
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in period_starts:
        return period_starts[date_str]

    # Try parsing as absolute date; dayfirst stays off so 2025-03-04 is March 4
    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Current periods end today; past periods end on their last day.

    Args:
        period: One of this-month, last-month, this-year, last-year
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "last-month":
        end_date = today.replace(day=1) - timedelta(days=1)
        return end_date.replace(day=1), end_date
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "last-year":
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
