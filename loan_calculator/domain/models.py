"""Domain models - immutable value objects passed between validator, calculator and callers"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from loan_calculator.domain import decimal_math
from loan_calculator.domain.error_codes import ErrorCode
from loan_calculator.domain.exceptions import ContractViolationError, InvalidCalculationInputError
from loan_calculator.utils.currency import DEFAULT_CURRENCY_SYMBOL, format_as_currency

# Annual rate in percent. CalculatorSettings.default_interest_rate defaults to
# this value; it also applies when an input is built without settings.
DEFAULT_INTEREST_RATE = Decimal("7.5")


@dataclass(frozen=True)
class CalculationInput:
    """Typed loan parameters, built only after raw input has been validated"""

    principal: Decimal
    duration_years: int
    interest_rate: Decimal = DEFAULT_INTEREST_RATE  # annual, percent

    def __post_init__(self):
        if self.principal is None:
            raise InvalidCalculationInputError("Principal amount cannot be None")
        if self.interest_rate is None:
            raise InvalidCalculationInputError("Interest rate cannot be None")
        if not isinstance(self.duration_years, int) or isinstance(self.duration_years, bool):
            raise InvalidCalculationInputError("Loan duration must be a whole number of years")
        if self.duration_years < 1:
            raise InvalidCalculationInputError("Loan duration must be greater than zero")

        try:
            principal = decimal_math.to_decimal(self.principal, "Principal amount")
            rate = decimal_math.to_decimal(self.interest_rate, "Interest rate")
        except ContractViolationError as e:
            raise InvalidCalculationInputError(str(e)) from None

        # Frozen dataclass: normalise coerced values in place
        object.__setattr__(self, "principal", principal)
        object.__setattr__(self, "interest_rate", rate)

    @classmethod
    def create(
        cls,
        principal,
        duration_years: int,
        interest_rate=None,
        default_interest_rate: Decimal = DEFAULT_INTEREST_RATE,
    ) -> "CalculationInput":
        """Build an input, falling back to ``default_interest_rate`` when no rate is given"""
        rate = default_interest_rate if interest_rate is None else interest_rate
        return cls(principal=principal, duration_years=duration_years, interest_rate=rate)


@dataclass(frozen=True)
class CalculationResult:
    """EMI summary for one loan.

    total_amount == emi_amount * number_of_installments and
    interest_amount == total_amount - principal, both exact.
    """

    emi_amount: Decimal
    total_amount: Decimal
    interest_amount: Decimal
    interest_rate: Decimal
    number_of_installments: int

    @property
    def principal_amount(self) -> Decimal:
        return decimal_math.subtract(self.total_amount, self.interest_amount)

    def formatted(
        self, symbol: str = DEFAULT_CURRENCY_SYMBOL, scale: int = decimal_math.CURRENCY_SCALE
    ) -> Dict[str, str]:
        """Display strings for the EMI, total and interest amounts"""
        return {
            "formatted_emi_amount": format_as_currency(self.emi_amount, symbol, scale),
            "formatted_total_amount": format_as_currency(self.total_amount, symbol, scale),
            "formatted_interest_amount": format_as_currency(self.interest_amount, symbol, scale),
        }

    # Default-currency shortcuts; use formatted() for the configured symbol and scale

    @property
    def formatted_emi_amount(self) -> str:
        return self.formatted()["formatted_emi_amount"]

    @property
    def formatted_total_amount(self) -> str:
        return self.formatted()["formatted_total_amount"]

    @property
    def formatted_interest_amount(self) -> str:
        return self.formatted()["formatted_interest_amount"]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating user input; error fields are set iff invalid"""

    is_valid: bool
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = field(default=None)

    def __post_init__(self):
        if self.is_valid and (self.error_code is not None or self.error_message is not None):
            raise ContractViolationError("A valid result cannot carry an error")
        if not self.is_valid and (self.error_code is None or not self.error_message):
            raise ContractViolationError("An invalid result needs an error code and message")

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error_code: ErrorCode, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, error_code=error_code, error_message=error_message)
