"""Commission value coercion."""

import math

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _parse_number_text(text: str) -> float:
    """Read numeric text the way the admin screen's number input does.

    Decimal and exponent forms are accepted, as are unsigned 0x/0o/0b
    integers. Digit-group underscores are not.

    Raises:
        ValueError: If the text is not a number
    """
    if "_" in text:
        raise ValueError(f"'{text}' is not a number")
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        digits = text[2:]
        if not digits.isalnum():
            raise ValueError(f"'{text}' is not a number")
        return float(int(digits, radix))
    return float(text)


def coerce_commission(value) -> float:
    """Coerce a stored commission value into a percentage.

    Commission is kept exactly as typed in the admin screen, so it may be a
    number, a numeric string, an empty string or garbage. Anything that is not
    a finite number counts as 0.

    >>> coerce_commission("40")
    40.0
    >>> coerce_commission("")
    0.0
    >>> coerce_commission("abc")
    0.0
    >>> coerce_commission("0x10")
    16.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = _parse_number_text(text)
        except ValueError:
            return 0.0
    if not math.isfinite(number):
        return 0.0
    return number
