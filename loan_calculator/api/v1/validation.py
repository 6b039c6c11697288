"""POST /v1/validate - check raw input without calculating"""

from fastapi import APIRouter, Depends

from loan_calculator.api.dependencies import get_controller
from loan_calculator.api.v1.schemas import ValidationRequest, ValidationResponse
from loan_calculator.controller import CalculatorController
from loan_calculator.infrastructure.observability.metrics import record_validation_failure

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
def validate_inputs(
    request_body: ValidationRequest,
    controller: CalculatorController = Depends(get_controller),
):
    """
    Validate principal and duration.

    Always 200: a rejected input is a normal answer, reported in the body
    with the first failing rule's error code.
    """
    result = controller.validate_inputs(request_body.principal, request_body.duration)

    if not result.is_valid:
        record_validation_failure(result.error_code.value)
        return ValidationResponse(
            valid=False,
            error_code=result.error_code.value,
            error_message=result.error_message,
        )

    return ValidationResponse(valid=True)
