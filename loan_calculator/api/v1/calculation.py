"""POST /v1/emi and POST /v1/compound-interest - loan calculation endpoints"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from loan_calculator.api.dependencies import get_controller, get_request_id
from loan_calculator.api.v1.schemas import (
    CompoundInterestResponse,
    EMIResponse,
    ErrorDetail,
    LoanRequest,
)
from loan_calculator.controller import CalculatorController
from loan_calculator.domain.error_codes import SYSTEM_ERROR
from loan_calculator.domain.exceptions import CalculationError, InputValidationError
from loan_calculator.infrastructure.observability.logging import log_calculation
from loan_calculator.infrastructure.observability.metrics import (
    record_calculation,
    record_validation_failure,
)

router = APIRouter()


def _rejected(operation: str, request_id: str, error: InputValidationError) -> HTTPException:
    record_calculation(operation, "rejected")
    record_validation_failure(error.error_code.value)
    logging.warning(
        "Input rejected",
        extra={"request_id": request_id, "operation": operation, "error_code": error.error_code.value},
    )
    detail = ErrorDetail(error_code=error.error_code.value, message=error.result.error_message)
    return HTTPException(status_code=422, detail=detail.model_dump())


def _failed(operation: str, request_id: str, error: CalculationError) -> HTTPException:
    record_calculation(operation, "error")
    logging.error(
        "Calculation error",
        extra={"request_id": request_id, "operation": operation, "error_type": type(error.__cause__).__name__},
    )
    return HTTPException(status_code=500, detail=error.message)


@router.post("/emi", response_model=EMIResponse)
def calculate_emi(
    request_body: LoanRequest,
    request: Request,
    controller: CalculatorController = Depends(get_controller),
):
    """
    Equal monthly installment for a fixed-rate loan.

    Flow:
    1. Validate principal then duration (first error wins, 422)
    2. Build a CalculationInput, defaulting the rate when omitted
    3. Calculate EMI, total payable and total interest
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = controller.calculate_emi(
            request_body.principal, request_body.duration, request_body.interest_rate
        )
    except InputValidationError as e:
        raise _rejected("emi", request_id, e)
    except CalculationError as e:
        raise _failed("emi", request_id, e)
    except Exception:
        record_calculation("emi", "error")
        logging.exception("Unexpected error", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail=SYSTEM_ERROR)

    record_calculation("emi", "success")
    log_calculation(
        request_id, "emi", "success", (time.time() - start_time) * 1000, result.number_of_installments
    )

    return EMIResponse(
        emi_amount=result.emi_amount,
        total_amount=result.total_amount,
        interest_amount=result.interest_amount,
        interest_rate=result.interest_rate,
        number_of_installments=result.number_of_installments,
        **controller.formatted_result(result),
    )


@router.post("/compound-interest", response_model=CompoundInterestResponse)
def calculate_compound_interest(
    request_body: LoanRequest,
    request: Request,
    controller: CalculatorController = Depends(get_controller),
):
    """Accumulated amount (principal + interest) with monthly compounding"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        amount = controller.calculate_compound_interest(
            request_body.principal, request_body.duration, request_body.interest_rate
        )
    except InputValidationError as e:
        raise _rejected("compound_interest", request_id, e)
    except CalculationError as e:
        raise _failed("compound_interest", request_id, e)
    except Exception:
        record_calculation("compound_interest", "error")
        logging.exception("Unexpected error", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail=SYSTEM_ERROR)

    record_calculation("compound_interest", "success")
    log_calculation(request_id, "compound_interest", "success", (time.time() - start_time) * 1000)

    return CompoundInterestResponse(
        amount=amount,
        formatted_amount=controller.format_amount(amount),
        interest_rate=controller.effective_rate(request_body.interest_rate),
        duration_years=controller.duration_years(request_body.duration),
    )
