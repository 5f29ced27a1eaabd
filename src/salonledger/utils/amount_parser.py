"""Amount parsing utilities."""

import math
import re


def parse_amount(amount_str) -> float:
    """Parse an amount typed by an operator into a float.

    Handles various formats:
    - "123.45"
    - "S/. 123.45"
    - "S/123.45"
    - "$123.45"
    - "1,234.56"

    Args:
        amount_str: Amount string (numbers are passed through)

    Returns:
        Float amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if isinstance(amount_str, (int, float)) and not isinstance(amount_str, bool):
        amount = float(amount_str)
    else:
        if amount_str is None or not str(amount_str).strip():
            raise ValueError("Empty amount string")

        amount_str = str(amount_str).strip()

        # Remove currency symbols
        amount_str = re.sub(r"S/\.?|[$€£]", "", amount_str, flags=re.IGNORECASE)

        # Remove thousands separators
        amount_str = amount_str.replace(",", "").strip()

        try:
            amount = float(amount_str)
        except ValueError as e:
            raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not math.isfinite(amount):
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return amount


def parse_positive_amount(amount_str, field_name: str = "Amount") -> float:
    """Parse an amount and require it to be greater than zero.

    Raises:
        ValueError: If the amount cannot be parsed or is not positive
    """
    amount = parse_amount(amount_str)
    if amount <= 0:
        raise ValueError(f"{field_name} must be greater than zero")
    return amount
