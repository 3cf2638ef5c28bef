"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from loan_gateway.domain.models import Country


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    personal_code: str = Field(..., alias="personalCode", description="National personal identity code")
    loan_amount: int = Field(..., alias="loanAmount", description="Requested loan amount in EUR")
    loan_period: int = Field(..., alias="loanPeriod", description="Requested loan period in months")
    country_code: Country = Field(Country.EE, alias="countryCode", description="Country of residence")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: Optional[int] = Field(None, alias="loanAmount")
    loan_period: Optional[int] = Field(None, alias="loanPeriod")
    error_message: Optional[str] = Field(None, alias="errorMessage")
