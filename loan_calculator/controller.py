"""Validate-then-calculate flow shared by the API endpoints"""

import logging
from decimal import Decimal
from typing import Dict, Optional

from loan_calculator.config import CalculatorSettings
from loan_calculator.domain import decimal_math
from loan_calculator.domain.calculator import FinancialCalculator
from loan_calculator.domain.exceptions import InputValidationError
from loan_calculator.domain.models import CalculationInput, CalculationResult, ValidationResult
from loan_calculator.domain.validation import InputValidator
from loan_calculator.utils.currency import format_as_currency

logger = logging.getLogger(__name__)


class CalculatorController:
    """Coordinates the validator and the calculator for raw text input"""

    def __init__(self, validator: InputValidator, calculator: FinancialCalculator):
        self.validator = validator
        self.calculator = calculator

    @property
    def settings(self) -> CalculatorSettings:
        return self.calculator.settings

    def validate_inputs(self, principal_text: Optional[str], duration_text: Optional[str]) -> ValidationResult:
        result = self.validator.validate_all(principal_text, duration_text)
        if result.is_valid:
            logger.info("Input validation successful", extra={"step": "validation"})
        else:
            # Log the code only; raw input never reaches the logs
            logger.warning(
                "Input validation failed",
                extra={"step": "validation", "error_code": result.error_code.value},
            )
        return result

    def build_input(
        self,
        principal_text: Optional[str],
        duration_text: Optional[str],
        interest_rate: Optional[Decimal] = None,
    ) -> CalculationInput:
        """Validate raw text and turn it into a CalculationInput.

        Raises InputValidationError when the text is rejected.
        """
        result = self.validate_inputs(principal_text, duration_text)
        if not result.is_valid:
            raise InputValidationError(result)

        return CalculationInput.create(
            principal=decimal_math.round_for_currency(principal_text, self.settings.currency_scale),
            duration_years=self.duration_years(duration_text),
            interest_rate=self.effective_rate(interest_rate),
        )

    def duration_years(self, duration_text: str) -> int:
        """Whole years from already-validated duration text"""
        return int(duration_text.lstrip("0"))

    def effective_rate(self, interest_rate: Optional[Decimal]) -> Decimal:
        """The requested rate, or the configured default when none was given"""
        return self.settings.default_interest_rate if interest_rate is None else interest_rate

    def calculate_emi(
        self,
        principal_text: Optional[str],
        duration_text: Optional[str],
        interest_rate: Optional[Decimal] = None,
    ) -> CalculationResult:
        calculation_input = self.build_input(principal_text, duration_text, interest_rate)
        result = self.calculator.calculate_emi(calculation_input)
        logger.info("EMI calculation successful", extra={"step": "emi_complete"})
        return result

    def calculate_compound_interest(
        self,
        principal_text: Optional[str],
        duration_text: Optional[str],
        interest_rate: Optional[Decimal] = None,
    ) -> Decimal:
        calculation_input = self.build_input(principal_text, duration_text, interest_rate)
        return self.calculator.calculate_compound_interest(calculation_input)

    def format_amount(self, value: Decimal) -> str:
        """Display string in the configured currency symbol and scale"""
        return format_as_currency(value, self.settings.currency_symbol, self.settings.currency_scale)

    def format_result(self, result: CalculationResult) -> str:
        return self.format_amount(result.emi_amount)

    def formatted_result(self, result: CalculationResult) -> Dict[str, str]:
        return result.formatted(self.settings.currency_symbol, self.settings.currency_scale)
