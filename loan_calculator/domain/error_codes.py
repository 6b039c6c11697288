"""Closed taxonomy of user-facing error codes and their message templates"""

from enum import Enum


class ErrorCode(str, Enum):
    """Reason a raw input was rejected"""

    INVALID_INPUT = "INVALID_INPUT"

    PRINCIPAL_REQUIRED = "PRINCIPAL_REQUIRED"
    PRINCIPAL_FORMAT = "PRINCIPAL_FORMAT"
    PRINCIPAL_POSITIVE = "PRINCIPAL_POSITIVE"
    PRINCIPAL_MIN_REQUIRED = "PRINCIPAL_MIN_REQUIRED"
    PRINCIPAL_MAX_EXCEEDED = "PRINCIPAL_MAX_EXCEEDED"

    DURATION_REQUIRED = "DURATION_REQUIRED"
    DURATION_FORMAT = "DURATION_FORMAT"
    DURATION_POSITIVE = "DURATION_POSITIVE"
    DURATION_MIN_REQUIRED = "DURATION_MIN_REQUIRED"
    DURATION_MAX_EXCEEDED = "DURATION_MAX_EXCEEDED"


# Placeholders are filled from CalculatorSettings by the validator
MESSAGE_TEMPLATES = {
    ErrorCode.INVALID_INPUT: "Invalid input. Please check your entries and try again.",
    ErrorCode.PRINCIPAL_REQUIRED: "Principal amount is required.",
    ErrorCode.PRINCIPAL_FORMAT: "Principal amount must be a number with up to 2 decimal places.",
    ErrorCode.PRINCIPAL_POSITIVE: "Principal amount must be a positive number.",
    ErrorCode.PRINCIPAL_MIN_REQUIRED: "Principal amount must be at least {min_principal}.",
    ErrorCode.PRINCIPAL_MAX_EXCEEDED: "Principal amount cannot exceed {max_principal}.",
    ErrorCode.DURATION_REQUIRED: "Loan duration is required.",
    ErrorCode.DURATION_FORMAT: "Loan duration must be a whole number.",
    ErrorCode.DURATION_POSITIVE: "Loan duration must be a positive whole number.",
    ErrorCode.DURATION_MIN_REQUIRED: "Loan duration must be at least {min_duration} {min_unit}.",
    ErrorCode.DURATION_MAX_EXCEEDED: "Loan duration cannot exceed {max_duration} {max_unit}.",
}

# Fault messages surfaced by CalculationError
CALCULATION_ERROR = "An error occurred during calculation. Please try again."
DIVISION_BY_ZERO = "Cannot divide by zero during calculation."
NUMERIC_OVERFLOW = "Numeric overflow occurred during calculation. Try smaller values."
SYSTEM_ERROR = "System error. Please try again later."
