"""Domain-specific exceptions

Rejected user input is reported through ``ValidationResult`` values, not
through this module. These exceptions cover programming-contract violations
and arithmetic faults only.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loan_calculator.domain.models import ValidationResult


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ContractViolationError(DomainException):
    """A required argument was absent or malformed at a core boundary"""

    pass


class InvalidCalculationInputError(ContractViolationError):
    """Calculator was handed inputs that should have been validated first"""

    pass


class CalculationError(DomainException):
    """Arithmetic fault during a calculation.

    ``message`` is always one of the fixed strings in ``error_codes``; the
    underlying exception is kept as ``__cause__`` for logs only.
    """

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.message = message
        self.operation = operation


class InputValidationError(DomainException):
    """Raised by the controller when raw input fails validation"""

    def __init__(self, result: "ValidationResult"):
        super().__init__(result.error_message)
        self.result = result

    @property
    def error_code(self):
        return self.result.error_code
