"""Currency formatting and parsing helpers for display values"""

import re
from decimal import Decimal, InvalidOperation

from loan_calculator.domain import decimal_math

_CURRENCY_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]{1,2})?")
_STRIP_CHARS = re.compile(r"[$,\s]")

# Longest text parse_currency_value will look at
MAX_CURRENCY_TEXT_LENGTH = 64

DEFAULT_CURRENCY_SYMBOL = "$"


def format_as_currency(
    value: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL, scale: int = decimal_math.CURRENCY_SCALE
) -> str:
    """Format with symbol, thousands separators and ``scale`` decimals: 12022.8 -> $12,022.80"""
    rounded = decimal_math.round_for_currency(value, scale)
    if rounded < 0:
        return f"-{symbol}{-rounded:,.{scale}f}"
    return f"{symbol}{abs(rounded):,.{scale}f}"


def format_plain(value: Decimal, scale: int = decimal_math.CURRENCY_SCALE) -> str:
    """Format with ``scale`` decimals and no symbol or separators: 12022.8 -> 12022.80"""
    return f"{decimal_math.round_for_currency(value, scale):.{scale}f}"


def parse_currency_value(text: str) -> Decimal:
    """
    Parse user-facing currency text into a Decimal rounded to cents.

    Accepts an optional currency symbol, thousands separators and surrounding
    whitespace ("$1,234.50"). Raises ValueError with a fixed message otherwise.
    """
    if text is None or (isinstance(text, str) and not text.strip()):
        raise ValueError("Currency value is required")
    if not isinstance(text, str):
        raise ValueError("Invalid currency format")
    if len(text) > MAX_CURRENCY_TEXT_LENGTH:
        raise ValueError("Invalid currency format")

    cleaned = _STRIP_CHARS.sub("", text)
    if not _CURRENCY_PATTERN.fullmatch(cleaned):
        raise ValueError("Invalid currency format")

    try:
        return decimal_math.round_for_currency(Decimal(cleaned))
    except InvalidOperation:
        raise ValueError("Invalid currency format") from None


def is_valid_currency(text: str) -> bool:
    """True when ``text`` parses to a positive amount"""
    try:
        return decimal_math.is_positive(parse_currency_value(text))
    except ValueError:
        return False
