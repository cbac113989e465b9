"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation
import re

CURRENCY_PREFIX = "Rp"


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "150000"
    - "150000.50"
    - "Rp150000" / "Rp 150,000"
    - "IDR 150000"
    - "$123.45"
    - "1,234.56"

    Sign is kept as written; rejecting negative amounts is left to domain
    validation so the error names the field.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols and codes
    amount_str = re.sub(r"^(-?)\s*(rp\.?|idr)", r"\1", amount_str, flags=re.IGNORECASE)
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove thousands separators and inner whitespace
    amount_str = amount_str.replace(",", "").replace(" ", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount


def format_amount(amount: Decimal) -> str:
    """Format an amount for display, e.g. "Rp 1,250,000.00" or "-Rp 50,000.00"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_PREFIX} {abs(amount):,.2f}"
