"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_calculator.domain import decimal_math
from loan_calculator.domain.models import DEFAULT_INTEREST_RATE
from loan_calculator.utils.currency import DEFAULT_CURRENCY_SYMBOL


class CalculatorSettings(BaseSettings):
    """Calculator bounds and precision, loaded from environment variables.

    Instances are frozen so a validator or calculator built from one never
    observes a change mid-call. Tests build their own instances with keyword
    overrides instead of touching the module-level ``settings``.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOAN_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Principal bounds (currency units)
    min_principal: Decimal = Decimal("1000.00")
    max_principal: Decimal = Decimal("1000000.00")

    # Duration bounds (whole years)
    min_duration_years: int = Field(default=1, ge=1)
    max_duration_years: int = 30

    # Precision
    calculation_precision: int = Field(default=decimal_math.CALCULATION_PRECISION, ge=1)  # significant digits
    currency_scale: int = Field(default=decimal_math.CURRENCY_SCALE, ge=0)  # fractional digits shown

    # Rates
    default_interest_rate: Decimal = DEFAULT_INTEREST_RATE  # percent

    # Display
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    # Longer raw text is rejected unless it is made only of digits and points
    max_input_length: int = Field(default=32, ge=1)

    # Service
    service_name: str = "loan-calculator"
    log_level: str = "INFO"

    @property
    def monthly_compounding(self) -> int:
        """Compounding periods per year; fixed, never read from the environment."""
        return 12

    @model_validator(mode="after")
    def check_bounds(self) -> "CalculatorSettings":
        if self.min_principal <= 0:
            raise ValueError("min_principal must be positive")
        if self.min_principal > self.max_principal:
            raise ValueError("min_principal cannot exceed max_principal")
        if self.min_duration_years > self.max_duration_years:
            raise ValueError("min_duration_years cannot exceed max_duration_years")
        return self


settings = CalculatorSettings()
