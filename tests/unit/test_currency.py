"""Unit tests for currency formatting and parsing"""

import pytest
from decimal import Decimal

from loan_calculator.utils.currency import (
    format_as_currency,
    format_plain,
    is_valid_currency,
    parse_currency_value,
)


def test_format_as_currency():
    assert format_as_currency(Decimal("12022.8")) == "$12,022.80"
    assert format_as_currency(Decimal("200.375")) == "$200.38"
    assert format_as_currency(Decimal("0")) == "$0.00"
    assert format_as_currency(Decimal("1000000")) == "$1,000,000.00"
    assert format_as_currency(Decimal("-5")) == "-$5.00"
    assert format_as_currency(Decimal("99.5"), symbol="€") == "€99.50"


def test_format_plain():
    assert format_plain(Decimal("12022.8")) == "12022.80"
    assert format_plain(Decimal("1234567.891")) == "1234567.89"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1000", Decimal("1000.00")),
        ("$1,234.50", Decimal("1234.50")),
        ("  2500.5 ", Decimal("2500.50")),
        ("$ 1 000", Decimal("1000.00")),
    ],
)
def test_parse_currency_value(text, expected):
    assert parse_currency_value(text) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "abc", "-100", "12.345", "1" * 100, 1000])
def test_parse_currency_value_rejects(text):
    with pytest.raises(ValueError):
        parse_currency_value(text)


def test_parse_error_messages_do_not_echo_input():
    with pytest.raises(ValueError) as exc_info:
        parse_currency_value("<b>bad</b>")
    assert "<b>" not in str(exc_info.value)


def test_is_valid_currency():
    assert is_valid_currency("$1,000.00")
    assert not is_valid_currency("0.00")
    assert not is_valid_currency("abc")


def test_format_respects_scale():
    assert format_as_currency(Decimal("1234.5"), scale=0) == "$1,235"
    assert format_as_currency(Decimal("1234.5"), symbol="¥", scale=0) == "¥1,235"
    assert format_plain(Decimal("12022.8"), scale=3) == "12022.800"
