"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.domain.decision_engine import LoanDecisionEngine
from loan_gateway.domain.exceptions import (
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from loan_gateway.infrastructure.observability.metrics import record_decision
from loan_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = DecisionResponse(error_message=message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/loan/decision", response_model=DecisionResponse)
def request_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: LoanDecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the loan an applicant qualifies for.

    Flow:
    1. Validate personal code, amount and period (400 on failure)
    2. Check age eligibility (200 with errorMessage on rejection)
    3. Find the approvable amount and period (404 when none exists)
    """
    start_time = time.time()
    request_id = get_request_id(request)
    country = request_body.country_code.value

    try:
        decision = engine.calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
            request_body.country_code,
        )

    except (InvalidIdentityCodeError, InvalidLoanAmountError, InvalidLoanPeriodError) as e:
        record_decision(country, "invalid_request")
        logging.warning(f"Invalid decision request: {e}", extra={"request_id": request_id})
        return _error_response(400, str(e))

    except NoValidLoanError as e:
        record_decision(country, "no_valid_loan")
        logging.info(f"No valid loan: {e}", extra={"request_id": request_id})
        return _error_response(404, str(e))

    except Exception as e:
        record_decision(country, "error")
        logging.error(f"Unexpected error: {e}", exc_info=True, extra={"request_id": request_id})
        log_decision(request_id, country, "error", None, None, (time.time() - start_time) * 1000)
        return _error_response(500, "An unexpected error occurred")

    outcome = "approved" if decision.is_approved else "age_rejected"
    duration_ms = (time.time() - start_time) * 1000
    record_decision(country, outcome, decision.loan_amount)
    log_decision(request_id, country, outcome, decision.loan_amount, decision.loan_period, duration_ms)

    return DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )
