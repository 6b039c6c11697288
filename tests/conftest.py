"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from loan_calculator.api.dependencies import get_settings
from loan_calculator.api.main import create_app
from loan_calculator.config import CalculatorSettings
from loan_calculator.controller import CalculatorController
from loan_calculator.domain.calculator import FinancialCalculator
from loan_calculator.domain.validation import InputValidator


@pytest.fixture
def settings() -> CalculatorSettings:
    """Default bounds: $1,000.00 - $1,000,000.00, 1 - 30 years, 10 significant digits"""
    return CalculatorSettings(
        min_principal=Decimal("1000.00"),
        max_principal=Decimal("1000000.00"),
        min_duration_years=1,
        max_duration_years=30,
        calculation_precision=10,
        default_interest_rate=Decimal("7.5"),
    )


@pytest.fixture
def validator(settings: CalculatorSettings) -> InputValidator:
    return InputValidator(settings)


@pytest.fixture
def calculator(settings: CalculatorSettings) -> FinancialCalculator:
    return FinancialCalculator(settings)


@pytest.fixture
def controller(validator: InputValidator, calculator: FinancialCalculator) -> CalculatorController:
    return CalculatorController(validator, calculator)


@pytest.fixture
def client(settings: CalculatorSettings) -> TestClient:
    """Create FastAPI test client bound to the test settings"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)
