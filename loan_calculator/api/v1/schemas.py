"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class LoanRequest(BaseModel):
    """Request body for POST /v1/emi and POST /v1/compound-interest.

    Principal and duration stay raw text; the domain validator decides
    whether they are acceptable.
    """

    principal: Optional[str] = Field(None, description="Principal amount, e.g. '10000.00'")
    duration: Optional[str] = Field(None, description="Loan duration in whole years, e.g. '5'")
    interest_rate: Optional[Decimal] = Field(
        None, ge=0, le=100, description="Annual rate in percent; server default when omitted"
    )


class ValidationRequest(BaseModel):
    """Request body for POST /v1/validate"""

    principal: Optional[str] = None
    duration: Optional[str] = None


class ValidationResponse(BaseModel):
    """Response for POST /v1/validate"""

    valid: bool
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class EMIResponse(BaseModel):
    """Response for POST /v1/emi"""

    emi_amount: Decimal
    total_amount: Decimal
    interest_amount: Decimal
    interest_rate: Decimal
    number_of_installments: int
    formatted_emi_amount: str
    formatted_total_amount: str
    formatted_interest_amount: str


class CompoundInterestResponse(BaseModel):
    """Response for POST /v1/compound-interest"""

    amount: Decimal
    formatted_amount: str
    interest_rate: Decimal
    duration_years: int


class ErrorDetail(BaseModel):
    """Body of a 422 raised for rejected input"""

    error_code: str
    message: str
