"""Compound interest and EMI formulas - core business logic for the loan calculator"""

import logging
from decimal import Decimal, Overflow
from typing import Optional, Tuple, Union

from loan_calculator.config import CalculatorSettings
from loan_calculator.domain import decimal_math as dm
from loan_calculator.domain import error_codes
from loan_calculator.domain.exceptions import (
    CalculationError,
    ContractViolationError,
    InvalidCalculationInputError,
)
from loan_calculator.domain.models import CalculationInput, CalculationResult

logger = logging.getLogger(__name__)

MONTHS_IN_YEAR = 12

PrincipalArg = Union[CalculationInput, Decimal, int, str, None]


def _fault_message(exc: ArithmeticError) -> str:
    """Map an arithmetic fault to a fixed, user-safe message"""
    if isinstance(exc, ZeroDivisionError):
        return error_codes.DIVISION_BY_ZERO
    if isinstance(exc, Overflow):
        return error_codes.NUMERIC_OVERFLOW
    return error_codes.CALCULATION_ERROR


class FinancialCalculator:
    """
    Stateless calculator for loan figures.

    Holds only the (frozen) settings; every call works on local values, so one
    instance can be shared across threads.
    """

    def __init__(self, settings: CalculatorSettings):
        self.settings = settings

    @property
    def _precision(self) -> int:
        return self.settings.calculation_precision

    def _unpack(
        self,
        principal: PrincipalArg,
        duration_years: Optional[int],
        interest_rate,
    ) -> Tuple[Decimal, int, Decimal]:
        """Accept either (principal, duration, rate) or a single CalculationInput"""
        if isinstance(principal, CalculationInput):
            if duration_years is not None or interest_rate is not None:
                raise InvalidCalculationInputError(
                    "Pass either a CalculationInput or separate values, not both"
                )
            return principal.principal, principal.duration_years, principal.interest_rate

        if principal is None:
            raise InvalidCalculationInputError("Principal amount cannot be None")
        if interest_rate is None:
            raise InvalidCalculationInputError("Interest rate cannot be None")
        if not isinstance(duration_years, int) or isinstance(duration_years, bool):
            raise InvalidCalculationInputError("Loan duration must be a whole number of years")
        if duration_years <= 0:
            raise InvalidCalculationInputError("Loan duration must be greater than zero")

        try:
            return (
                dm.to_decimal(principal, "Principal amount"),
                duration_years,
                dm.to_decimal(interest_rate, "Interest rate"),
            )
        except ContractViolationError as e:
            raise InvalidCalculationInputError(str(e)) from None

    def calculate_compound_interest(
        self,
        principal: PrincipalArg,
        duration_years: Optional[int] = None,
        interest_rate=None,
    ) -> Decimal:
        """
        Accumulated amount (principal + interest) with monthly compounding.

        A = P * (1 + r/n) ^ (n*t), n = 12

        Args:
            principal: Loan amount, or a CalculationInput carrying all three values
            duration_years: Whole years (t)
            interest_rate: Annual rate in percent, e.g. 7.5

        Raises:
            InvalidCalculationInputError: missing principal/rate or duration <= 0
            CalculationError: arithmetic fault during the calculation
        """
        principal, duration_years, interest_rate = self._unpack(principal, duration_years, interest_rate)
        periods_per_year = self.settings.monthly_compounding

        logger.info(
            "Calculating compound interest",
            extra={"step": "compound_interest_start", "duration_years": duration_years},
        )

        try:
            rate_decimal = dm.percentage_to_decimal(interest_rate, self._precision)
            rate_per_period = dm.divide_by_int(rate_decimal, periods_per_year, self._precision)
            total_periods = periods_per_year * duration_years

            factor = dm.power(dm.add(dm.ONE, rate_per_period), total_periods, self._precision)
            amount = dm.round_for_calculation(dm.multiply(principal, factor), self._precision)
        except ArithmeticError as e:
            logger.error(
                "Compound interest calculation failed",
                extra={"step": "compound_interest_error", "error_type": type(e).__name__},
            )
            raise CalculationError(_fault_message(e), operation="compound_interest") from e

        logger.info("Compound interest calculated", extra={"step": "compound_interest_complete"})
        return amount

    def calculate_emi(
        self,
        principal: PrincipalArg,
        duration_years: Optional[int] = None,
        interest_rate=None,
    ) -> CalculationResult:
        """
        Equal monthly installment for a fixed-rate loan.

        EMI = P * r * (1+r)^n / ((1+r)^n - 1), r = monthly rate, n = months

        A zero rate makes the denominator zero, so it is handled up front as
        a plain P / n split.

        Raises:
            InvalidCalculationInputError: missing principal/rate or duration <= 0
            CalculationError: arithmetic fault during the calculation
        """
        principal, duration_years, interest_rate = self._unpack(principal, duration_years, interest_rate)

        logger.info(
            "Calculating EMI",
            extra={"step": "emi_start", "duration_years": duration_years},
        )

        try:
            annual_rate = dm.percentage_to_decimal(interest_rate, self._precision)
            monthly_rate = dm.divide_by_int(annual_rate, MONTHS_IN_YEAR, self._precision)
            total_months = duration_years * MONTHS_IN_YEAR

            if dm.is_zero(monthly_rate):
                emi = dm.divide_by_int(principal, total_months, self._precision)
            else:
                factor = dm.power(dm.add(dm.ONE, monthly_rate), total_months, self._precision)
                numerator = dm.multiply(dm.multiply(principal, monthly_rate), factor)
                denominator = dm.subtract(factor, dm.ONE)
                emi = dm.divide(numerator, denominator, self._precision)

            emi = dm.round_for_calculation(emi, self._precision)
            total_amount = dm.multiply_by_int(emi, total_months)
            interest_amount = dm.subtract(total_amount, principal)
        except ArithmeticError as e:
            logger.error(
                "EMI calculation failed",
                extra={"step": "emi_error", "error_type": type(e).__name__},
            )
            raise CalculationError(_fault_message(e), operation="emi") from e

        logger.info(
            "EMI calculated",
            extra={"step": "emi_complete", "number_of_installments": total_months},
        )

        return CalculationResult(
            emi_amount=emi,
            total_amount=total_amount,
            interest_amount=interest_amount,
            interest_rate=interest_rate,
            number_of_installments=total_months,
        )
