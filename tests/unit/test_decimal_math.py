"""Unit tests for fixed-precision decimal arithmetic"""

import pytest
from decimal import Decimal

from loan_calculator.domain import decimal_math as dm
from loan_calculator.domain.exceptions import ContractViolationError


def test_round_to_scale_half_up():
    """Halves round away from zero"""
    assert dm.round_to_scale(Decimal("2.345"), 2) == Decimal("2.35")
    assert dm.round_to_scale(Decimal("2.344"), 2) == Decimal("2.34")
    assert dm.round_to_scale(Decimal("-2.345"), 2) == Decimal("-2.35")
    assert dm.round_to_scale(Decimal("7.5"), 0) == Decimal("8")


def test_round_to_scale_rejects_negative_scale():
    with pytest.raises(ContractViolationError):
        dm.round_to_scale(Decimal("1.5"), -1)


def test_round_for_currency():
    assert str(dm.round_for_currency(Decimal("200.375"))) == "200.38"
    assert str(dm.round_for_currency(Decimal("12022.8"))) == "12022.80"
    assert str(dm.round_for_currency(Decimal("1000000"))) == "1000000.00"


def test_round_for_calculation_keeps_ten_significant_digits():
    assert dm.round_for_calculation(Decimal("1.23456789050")) == Decimal("1.234567891")
    assert dm.round_for_calculation(Decimal("1.23456789049")) == Decimal("1.234567890")
    assert dm.round_for_calculation(Decimal("123456789012345")) == Decimal("123456789000000")


def test_round_for_calculation_custom_precision():
    assert dm.round_for_calculation(Decimal("3.14159"), precision=3) == Decimal("3.14")


def test_add_subtract_are_exact():
    """No rounding even past the default 28-digit context"""
    big = Decimal("1234567890123456789012345678901234567890.1")
    assert dm.add(big, Decimal("0.1")) == Decimal("1234567890123456789012345678901234567890.2")
    assert dm.subtract(big, Decimal("0.1")) == Decimal("1234567890123456789012345678901234567890.0")
    assert dm.add(Decimal("0.1"), Decimal("0.2")) == Decimal("0.3")


def test_multiply_is_exact():
    assert dm.multiply(Decimal("1.00625"), Decimal("1.00625")) == Decimal("1.0125390625")
    assert dm.multiply_by_int(Decimal("200.38"), 60) == Decimal("12022.80")


def test_divide_rounds_to_calculation_precision():
    assert dm.divide(Decimal("1"), Decimal("3")) == Decimal("0.3333333333")
    assert dm.divide(Decimal("2"), Decimal("3")) == Decimal("0.6666666667")
    assert dm.divide_by_int(Decimal("10000"), 60) == Decimal("166.6666667")
    assert dm.divide(Decimal("1"), Decimal("3"), precision=4) == Decimal("0.3333")


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        dm.divide(Decimal("1"), Decimal("0.00"))
    with pytest.raises(ZeroDivisionError):
        dm.divide_by_int(Decimal("1"), 0)


@pytest.mark.parametrize("base", [Decimal("0"), Decimal("-5"), Decimal("2.5"), Decimal("1.00625")])
def test_power_zero_exponent_is_one(base):
    assert dm.power(base, 0) == Decimal("1")


def test_power_one_returns_base_unchanged():
    base = Decimal("1.006250000001")
    assert dm.power(base, 1) is base


def test_power_positive():
    assert dm.power(Decimal("2"), 10) == Decimal("1024")
    assert dm.power(Decimal("1.5"), 3) == Decimal("3.375")
    # 1.0125390625 rounded to 10 significant digits
    assert dm.power(Decimal("1.00625"), 2) == Decimal("1.012539063")


def test_power_matches_repeated_multiplication():
    base = Decimal("1.006041666667")
    expected = Decimal("1")
    for _ in range(37):
        expected = dm.multiply(expected, base)

    assert dm.power(base, 37) == dm.round_for_calculation(expected)


def test_power_negative_exponent_is_reciprocal():
    assert dm.power(Decimal("2"), -2) == Decimal("0.25")
    base = Decimal("1.00625")
    assert dm.power(base, -12) == dm.divide(Decimal("1"), dm.power(base, 12))


def test_power_negative_exponent_of_zero():
    with pytest.raises(ZeroDivisionError):
        dm.power(Decimal("0"), -1)


def test_power_rejects_non_integer_exponent():
    with pytest.raises(ContractViolationError):
        dm.power(Decimal("2"), 1.5)


def test_percentage_conversions():
    assert dm.percentage_to_decimal(Decimal("7.5")) == Decimal("0.075")
    assert dm.percentage_to_decimal(Decimal("0")) == Decimal("0")
    assert dm.decimal_to_percentage(Decimal("0.075")) == Decimal("7.5")


def test_predicates_compare_magnitude_not_scale():
    assert dm.is_equal(Decimal("10"), Decimal("10.00"))
    assert dm.is_zero(Decimal("0.00"))
    assert dm.is_positive(Decimal("0.01"))
    assert dm.is_negative(Decimal("-0.01"))
    assert not dm.is_positive(Decimal("0"))
    assert dm.is_greater_than(Decimal("10.01"), Decimal("10"))
    assert dm.is_less_than(Decimal("9.99"), Decimal("10.0"))
    assert not dm.is_less_than(Decimal("10"), Decimal("10.000"))


@pytest.mark.parametrize(
    "operation",
    [
        lambda: dm.add(None, Decimal("1")),
        lambda: dm.subtract(Decimal("1"), None),
        lambda: dm.multiply(None, None),
        lambda: dm.divide(None, Decimal("1")),
        lambda: dm.power(None, 2),
        lambda: dm.percentage_to_decimal(None),
        lambda: dm.round_for_currency(None),
        lambda: dm.is_equal(Decimal("1"), None),
        lambda: dm.is_zero(None),
    ],
)
def test_absent_operands_are_contract_violations(operation):
    with pytest.raises(ContractViolationError):
        operation()


def test_to_decimal_coercion():
    assert dm.to_decimal(0.1) == Decimal("0.1")
    assert dm.to_decimal(5) == Decimal("5")
    assert dm.to_decimal("12.50") == Decimal("12.50")
    with pytest.raises(ContractViolationError):
        dm.to_decimal("abc")
    with pytest.raises(ContractViolationError):
        dm.to_decimal(True)
    with pytest.raises(ContractViolationError):
        dm.to_decimal(float("inf"))


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), Decimal("-Infinity")])
def test_to_decimal_rejects_non_finite_decimals(value):
    with pytest.raises(ContractViolationError):
        dm.to_decimal(value)


def test_round_for_currency_custom_scale():
    assert str(dm.round_for_currency(Decimal("200.375"), 0)) == "200"
    assert str(dm.round_for_currency(Decimal("200.375"), 3)) == "200.375"
