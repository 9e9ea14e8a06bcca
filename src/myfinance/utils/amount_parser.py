"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount) -> Decimal:
    """Parse an amount into a Decimal.

    Numbers are taken as they are (floats through their shortest repr, so
    50.1 becomes Decimal('50.1')). Strings may look like:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "-123.45" or "(123.45)" (negative; rejected later by the service)

    Args:
        amount: Amount as a string, int, float or Decimal

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount '{amount}'")
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, (int, float)):
        return Decimal(str(amount))
    if not amount or not str(amount).strip():
        raise ValueError("Empty amount string")

    amount_str = str(amount).strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols, thousands separators and whitespace
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        value = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount}'")
    if not value.is_finite():
        raise ValueError(f"Could not parse amount '{amount}'")
    return -value if is_negative else value
