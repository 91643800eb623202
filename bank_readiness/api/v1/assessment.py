"""POST /v1/assessment - bank readiness assessment endpoint"""

import time
import logging
from typing import Sequence
from fastapi import APIRouter, Depends, HTTPException, Request

from bank_readiness.api.v1.schemas import AssessmentRequest, AssessmentResponse
from bank_readiness.api.dependencies import get_catalog, get_request_id
from bank_readiness.domain.assessment import assess_case
from bank_readiness.domain.models import BankProfile
from bank_readiness.infrastructure.observability.metrics import record_assessment
from bank_readiness.infrastructure.observability.logging import log_assessment

router = APIRouter()


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(
    request_body: AssessmentRequest,
    request: Request,
    catalog: Sequence[BankProfile] = Depends(get_catalog),
):
    """
    Assess an applicant's bank readiness.

    Flow:
    1. Score the applicant's risk profile
    2. Rank catalog banks and list banks to avoid
    3. Build document checklists and interview guidance
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        assessment = assess_case(request_body.to_case(), catalog)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(assessment)
    log_assessment(
        request_id,
        assessment.risk.score,
        assessment.risk.category,
        len(assessment.recommended_banks),
        len(assessment.banks_to_avoid),
        duration_ms,
    )

    return AssessmentResponse.from_assessment(assessment)
