"""Unit tests for domain value objects"""

import dataclasses

import pytest
from decimal import Decimal

from loan_calculator.domain.error_codes import ErrorCode
from loan_calculator.domain.exceptions import ContractViolationError, InvalidCalculationInputError
from loan_calculator.domain.models import CalculationInput, CalculationResult, ValidationResult


def test_calculation_input_defaults_rate():
    calculation_input = CalculationInput(Decimal("10000.00"), 5)
    assert calculation_input.interest_rate == Decimal("7.5")


def test_calculation_input_create_uses_configured_default():
    calculation_input = CalculationInput.create("10000.00", 5, default_interest_rate=Decimal("6.25"))
    assert calculation_input.principal == Decimal("10000.00")
    assert calculation_input.interest_rate == Decimal("6.25")

    explicit = CalculationInput.create("10000.00", 5, interest_rate=Decimal("0"))
    assert explicit.interest_rate == Decimal("0")


def test_calculation_input_coerces_numbers():
    calculation_input = CalculationInput(10000, 5, 7.5)
    assert calculation_input.principal == Decimal("10000")
    assert calculation_input.interest_rate == Decimal("7.5")


def test_calculation_input_is_immutable():
    calculation_input = CalculationInput(Decimal("10000.00"), 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        calculation_input.interest_rate = Decimal("9")


@pytest.mark.parametrize(
    "principal, years, rate",
    [
        (None, 5, Decimal("7.5")),
        (Decimal("10000"), 5, None),
        (Decimal("10000"), 0, Decimal("7.5")),
        (Decimal("10000"), 2.5, Decimal("7.5")),
        ("not a number", 5, Decimal("7.5")),
    ],
)
def test_calculation_input_rejects_partial_state(principal, years, rate):
    with pytest.raises(InvalidCalculationInputError):
        CalculationInput(principal, years, rate)


def test_calculation_result_formatting():
    result = CalculationResult(
        emi_amount=Decimal("200.3794900"),
        total_amount=Decimal("12022.769400"),
        interest_amount=Decimal("2022.769400"),
        interest_rate=Decimal("7.5"),
        number_of_installments=60,
    )

    assert result.formatted_emi_amount == "$200.38"
    assert result.formatted_total_amount == "$12,022.77"
    assert result.formatted_interest_amount == "$2,022.77"
    assert result.principal_amount == Decimal("10000")


def test_validation_result_valid():
    result = ValidationResult.valid()
    assert result.is_valid
    assert result.error_code is None
    assert result.error_message is None


def test_validation_result_invalid():
    result = ValidationResult.invalid(ErrorCode.DURATION_FORMAT, "Loan duration must be a whole number.")
    assert not result.is_valid
    assert result.error_code == ErrorCode.DURATION_FORMAT


def test_validation_result_enforces_error_iff_invalid():
    with pytest.raises(ContractViolationError):
        ValidationResult(is_valid=True, error_code=ErrorCode.PRINCIPAL_FORMAT, error_message="x")
    with pytest.raises(ContractViolationError):
        ValidationResult(is_valid=False)
    with pytest.raises(ContractViolationError):
        ValidationResult(is_valid=False, error_code=ErrorCode.PRINCIPAL_FORMAT, error_message="")


@pytest.mark.parametrize(
    "principal, rate",
    [
        (Decimal("NaN"), Decimal("7.5")),
        (Decimal("Infinity"), Decimal("7.5")),
        (Decimal("10000"), Decimal("NaN")),
        (Decimal("10000"), Decimal("-Infinity")),
    ],
)
def test_calculation_input_rejects_non_finite_values(principal, rate):
    with pytest.raises(InvalidCalculationInputError):
        CalculationInput(principal, 5, rate)


def test_calculation_result_formatted_with_symbol_and_scale():
    result = CalculationResult(
        emi_amount=Decimal("200.3794900"),
        total_amount=Decimal("12022.769400"),
        interest_amount=Decimal("2022.769400"),
        interest_rate=Decimal("7.5"),
        number_of_installments=60,
    )

    assert result.formatted("€", 0) == {
        "formatted_emi_amount": "€200",
        "formatted_total_amount": "€12,023",
        "formatted_interest_amount": "€2,023",
    }
