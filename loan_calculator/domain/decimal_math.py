"""Fixed-precision decimal arithmetic for financial calculations

Every numeric step of the calculator goes through this module so rounding is
applied once per operation and always with ROUND_HALF_UP.

Two contexts are used:
- exact: add, subtract and multiply never round (decimal products and sums
  always terminate, so unlimited precision is safe)
- calculation: division, power and renormalisation round to a fixed number
  of significant digits (10 by default)

Rounding contexts are passed explicitly and the thread-local current context
is never modified, so callers on different threads cannot interfere.
"""

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
)
from functools import lru_cache
from typing import Union

from loan_calculator.domain.exceptions import ContractViolationError

Number = Union[Decimal, int, str]

CALCULATION_PRECISION = 10
CURRENCY_SCALE = 2

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

_TRAPS = [InvalidOperation, DivisionByZero, Overflow]

EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=_TRAPS,
)


@lru_cache(maxsize=None)
def calculation_context(precision: int = CALCULATION_PRECISION) -> Context:
    """Context rounding to ``precision`` significant digits, half-up"""
    if precision < 1:
        raise ContractViolationError("Calculation precision must be at least 1")
    return Context(
        prec=precision,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=_TRAPS,
    )


def to_decimal(value: Number, name: str = "Value") -> Decimal:
    """Coerce an operand to Decimal; None is a contract violation.

    ints and floats go through ``str`` so 0.1 stays 0.1.
    """
    if value is None:
        raise ContractViolationError(f"{name} cannot be None")
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise ContractViolationError(f"{name} must be numeric")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ContractViolationError(f"{name} is not a valid number") from None
    if not result.is_finite():
        raise ContractViolationError(f"{name} must be finite")
    return result


# Rounding


def round_to_scale(value: Number, scale: int) -> Decimal:
    """Round to ``scale`` fractional digits using ROUND_HALF_UP"""
    value = to_decimal(value)
    if scale is None or scale < 0:
        raise ContractViolationError("Scale cannot be negative")
    return value.quantize(ONE.scaleb(-scale, context=EXACT_CONTEXT), context=EXACT_CONTEXT)


def round_for_currency(value: Number, scale: int = CURRENCY_SCALE) -> Decimal:
    """Round to currency scale (2 by default) for display, e.g. 200.375 -> 200.38"""
    return round_to_scale(value, scale)


def round_for_calculation(value: Number, precision: int = CALCULATION_PRECISION) -> Decimal:
    """Renormalise an intermediate result to ``precision`` significant digits"""
    return calculation_context(precision).plus(to_decimal(value))


# Exact arithmetic


def add(augend: Number, addend: Number) -> Decimal:
    return EXACT_CONTEXT.add(to_decimal(augend, "Augend"), to_decimal(addend, "Addend"))


def subtract(minuend: Number, subtrahend: Number) -> Decimal:
    return EXACT_CONTEXT.subtract(to_decimal(minuend, "Minuend"), to_decimal(subtrahend, "Subtrahend"))


def multiply(multiplicand: Number, multiplier: Number) -> Decimal:
    return EXACT_CONTEXT.multiply(
        to_decimal(multiplicand, "Multiplicand"), to_decimal(multiplier, "Multiplier")
    )


def multiply_by_int(multiplicand: Number, multiplier: int) -> Decimal:
    if not isinstance(multiplier, int) or isinstance(multiplier, bool):
        raise ContractViolationError("Multiplier must be an integer")
    return EXACT_CONTEXT.multiply(to_decimal(multiplicand, "Multiplicand"), Decimal(multiplier))


# Rounded arithmetic


def divide(dividend: Number, divisor: Number, precision: int = CALCULATION_PRECISION) -> Decimal:
    """Divide, rounding the quotient to calculation precision.

    Raises ZeroDivisionError for a zero divisor.
    """
    dividend = to_decimal(dividend, "Dividend")
    divisor = to_decimal(divisor, "Divisor")
    if divisor.is_zero():
        raise ZeroDivisionError("Division by zero")
    return calculation_context(precision).divide(dividend, divisor)


def divide_by_int(dividend: Number, divisor: int, precision: int = CALCULATION_PRECISION) -> Decimal:
    if not isinstance(divisor, int) or isinstance(divisor, bool):
        raise ContractViolationError("Divisor must be an integer")
    return divide(dividend, Decimal(divisor), precision)


def power(base: Number, exponent: int, precision: int = CALCULATION_PRECISION) -> Decimal:
    """
    Raise ``base`` to an integer power.

    - exponent 0: ONE, whatever the base (0 ** 0 included)
    - exponent 1: base, unchanged
    - exponent > 1: exact square-and-multiply, rounded once at the end
    - exponent < 0: 1 / base ** -exponent

    Squaring gives the same digits as repeated multiplication because every
    intermediate product is exact.
    """
    base = to_decimal(base, "Base")
    if not isinstance(exponent, int) or isinstance(exponent, bool):
        raise ContractViolationError("Exponent must be an integer")

    if exponent == 0:
        return ONE
    if exponent == 1:
        return base
    if exponent < 0:
        return divide(ONE, power(base, -exponent, precision), precision)

    result = ONE
    square = base
    remaining = exponent
    while remaining:
        if remaining & 1:
            result = multiply(result, square)
        remaining >>= 1
        if remaining:
            square = multiply(square, square)

    return round_for_calculation(result, precision)


# Percentages


def percentage_to_decimal(percentage: Number, precision: int = CALCULATION_PRECISION) -> Decimal:
    """7.5 -> 0.075"""
    result = divide(to_decimal(percentage, "Percentage"), HUNDRED, precision)
    return round_for_calculation(result, precision)


def decimal_to_percentage(value: Number) -> Decimal:
    """0.075 -> 7.500"""
    return multiply(to_decimal(value, "Decimal"), HUNDRED)


# Predicates (compare magnitude, so 10 == 10.00)


def is_zero(value: Number) -> bool:
    return to_decimal(value).compare(ZERO) == 0


def is_positive(value: Number) -> bool:
    return to_decimal(value).compare(ZERO) > 0


def is_negative(value: Number) -> bool:
    return to_decimal(value).compare(ZERO) < 0


def is_greater_than(first: Number, second: Number) -> bool:
    return to_decimal(first, "First value").compare(to_decimal(second, "Second value")) > 0


def is_less_than(first: Number, second: Number) -> bool:
    return to_decimal(first, "First value").compare(to_decimal(second, "Second value")) < 0


def is_equal(first: Number, second: Number) -> bool:
    return to_decimal(first, "First value").compare(to_decimal(second, "Second value")) == 0
