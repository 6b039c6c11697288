"""Input validation for raw principal and duration text"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from loan_calculator.config import CalculatorSettings
from loan_calculator.domain.error_codes import MESSAGE_TEMPLATES, ErrorCode
from loan_calculator.domain.models import CalculationInput, ValidationResult
from loan_calculator.utils.currency import format_as_currency

logger = logging.getLogger(__name__)

# ASCII digits only; no sign, no separators, at most two fractional digits.
# Neither pattern nests quantifiers, so matching is linear in the input length.
PRINCIPAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]{0,2})?|\.[0-9]{1,2}")
DURATION_PATTERN = re.compile(r"[0-9]+")
_NUMERIC_CHARS = re.compile(r"[0-9.]+")


def _year_unit(years: int) -> str:
    return "year" if years == 1 else "years"


class InputValidator:
    """
    Validate raw user input before any arithmetic happens.

    Every check short-circuits at the first failing rule and returns a
    ValidationResult; nothing here raises for bad input.
    """

    def __init__(self, settings: CalculatorSettings):
        self.settings = settings
        self._max_principal_digits = len(str(int(settings.max_principal)))

    def _invalid(self, code: ErrorCode) -> ValidationResult:
        s = self.settings
        message = MESSAGE_TEMPLATES[code].format(
            min_principal=format_as_currency(s.min_principal, s.currency_symbol, s.currency_scale),
            max_principal=format_as_currency(s.max_principal, s.currency_symbol, s.currency_scale),
            min_duration=s.min_duration_years,
            min_unit=_year_unit(s.min_duration_years),
            max_duration=s.max_duration_years,
            max_unit=_year_unit(s.max_duration_years),
        )
        logger.debug("Input rejected", extra={"step": "validation", "error_code": code.value})
        return ValidationResult.invalid(code, message)

    def _is_blank(self, text: Optional[str]) -> bool:
        return text is None or (isinstance(text, str) and not text.strip())

    def _matches(self, pattern: re.Pattern, text) -> bool:
        """Shape check. Long text is only scanned when it is all digits and points."""
        if not isinstance(text, str):
            return False
        if len(text) > self.settings.max_input_length and not _NUMERIC_CHARS.fullmatch(text):
            return False
        return pattern.fullmatch(text) is not None

    def _check_principal_range(self, principal: Decimal) -> Optional[ValidationResult]:
        if principal < self.settings.min_principal:
            return self._invalid(ErrorCode.PRINCIPAL_MIN_REQUIRED)
        if principal > self.settings.max_principal:
            return self._invalid(ErrorCode.PRINCIPAL_MAX_EXCEEDED)
        return None

    def _check_duration_range(self, duration: int) -> Optional[ValidationResult]:
        if duration < self.settings.min_duration_years:
            return self._invalid(ErrorCode.DURATION_MIN_REQUIRED)
        if duration > self.settings.max_duration_years:
            return self._invalid(ErrorCode.DURATION_MAX_EXCEEDED)
        return None

    def validate_principal(self, text: Optional[str]) -> ValidationResult:
        """
        Rules, in order:
        1. blank -> PRINCIPAL_REQUIRED
        2. not digits with up to 2 decimals -> PRINCIPAL_FORMAT
           (a leading minus sign lands here too)
        3. zero -> PRINCIPAL_POSITIVE
        4. below minimum -> PRINCIPAL_MIN_REQUIRED
        5. above maximum -> PRINCIPAL_MAX_EXCEEDED
        """
        if self._is_blank(text):
            return self._invalid(ErrorCode.PRINCIPAL_REQUIRED)

        if not self._matches(PRINCIPAL_PATTERN, text):
            return self._invalid(ErrorCode.PRINCIPAL_FORMAT)

        # A whole part with more digits than the maximum is over it without parsing
        whole = text.partition(".")[0].lstrip("0")
        if len(whole) > self._max_principal_digits:
            return self._invalid(ErrorCode.PRINCIPAL_MAX_EXCEEDED)

        try:
            principal = Decimal(text)
        except InvalidOperation:
            return self._invalid(ErrorCode.PRINCIPAL_FORMAT)

        if principal.is_zero():
            return self._invalid(ErrorCode.PRINCIPAL_POSITIVE)

        return self._check_principal_range(principal) or ValidationResult.valid()

    def validate_duration(self, text: Optional[str]) -> ValidationResult:
        """
        Rules, in order:
        1. blank -> DURATION_REQUIRED
        2. not plain digits -> DURATION_FORMAT
        3. zero -> DURATION_POSITIVE
        4. below minimum -> DURATION_MIN_REQUIRED
        5. above maximum -> DURATION_MAX_EXCEEDED
        """
        if self._is_blank(text):
            return self._invalid(ErrorCode.DURATION_REQUIRED)

        if not self._matches(DURATION_PATTERN, text):
            return self._invalid(ErrorCode.DURATION_FORMAT)

        digits = text.lstrip("0")
        if not digits:
            return self._invalid(ErrorCode.DURATION_POSITIVE)
        if len(digits) > len(str(self.settings.max_duration_years)):
            return self._invalid(ErrorCode.DURATION_MAX_EXCEEDED)

        return self._check_duration_range(int(digits)) or ValidationResult.valid()

    def validate_all(self, principal_text: Optional[str], duration_text: Optional[str]) -> ValidationResult:
        """Principal first; a principal error is returned without looking at duration"""
        principal_result = self.validate_principal(principal_text)
        if not principal_result.is_valid:
            return principal_result
        return self.validate_duration(duration_text)

    def validate_structured_input(self, calculation_input: Optional[CalculationInput]) -> ValidationResult:
        """Range checks only; a CalculationInput is already numeric"""
        if calculation_input is None:
            return self._invalid(ErrorCode.INVALID_INPUT)

        return (
            self._check_principal_range(calculation_input.principal)
            or self._check_duration_range(calculation_input.duration_years)
            or ValidationResult.valid()
        )
