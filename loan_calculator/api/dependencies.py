"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request

from loan_calculator.config import CalculatorSettings, settings
from loan_calculator.controller import CalculatorController
from loan_calculator.domain.calculator import FinancialCalculator
from loan_calculator.domain.validation import InputValidator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> CalculatorSettings:
    """Provide the process-wide settings; tests override this dependency"""
    return settings


def get_validator(app_settings: CalculatorSettings = Depends(get_settings)) -> InputValidator:
    return InputValidator(app_settings)


def get_calculator(app_settings: CalculatorSettings = Depends(get_settings)) -> FinancialCalculator:
    return FinancialCalculator(app_settings)


def get_controller(
    validator: InputValidator = Depends(get_validator),
    calculator: FinancialCalculator = Depends(get_calculator),
) -> CalculatorController:
    """Provide a controller wired to the current settings"""
    return CalculatorController(validator, calculator)
