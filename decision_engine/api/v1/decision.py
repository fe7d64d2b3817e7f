"""POST /v1/loan/decision - loan eligibility decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from decision_engine.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_engine.api.dependencies import get_decision_engine, get_request_id
from decision_engine.domain.engine import DecisionEngine
from decision_engine.domain.exceptions import DomainException, NoValidLoanError
from decision_engine.domain.identity import mask_personal_code
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.infrastructure.observability.logging import log_decision

router = APIRouter()


def _failure_kind(error: DomainException) -> str:
    return type(error).__name__.removesuffix("Error")


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide the largest loan available for a personal code.

    Flow:
    1. Validate personal code, age window and debtor status
    2. Validate requested amount and period bounds
    3. Search for the maximum amount, extending the period if needed
    4. Record metrics and logs
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)
    masked_code = mask_personal_code(request_body.personal_code)

    try:
        decision = engine.evaluate(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )

    except DomainException as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        kind = _failure_kind(e)
        record_decision(kind)
        log_decision(request_id, masked_code, kind, None, None, duration_ms)
        status_code = 404 if isinstance(e, NoValidLoanError) else 400
        raise HTTPException(status_code=status_code, detail=e.message)

    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        record_decision("error")
        logging.error(
            f"Unexpected error: {e}",
            extra={"request_id": request_id, "personal_code": masked_code, "duration_ms": duration_ms},
        )
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_decision(
        "approved",
        loan_amount=decision.loan_amount,
        period_extended=decision.loan_period > request_body.loan_period,
    )
    log_decision(request_id, masked_code, "approved", decision.loan_amount, decision.loan_period, duration_ms)

    return DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
    )
