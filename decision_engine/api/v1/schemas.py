"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    personal_code: str = Field(..., description="Personal identification code")
    loan_amount: int = Field(..., description="Requested loan amount in whole currency units")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: int
    loan_period: int
