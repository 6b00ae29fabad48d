"""
Scoring API Router
psyscore/routers/scoring.py

Endpoints:
  POST /api/v1/score                — Score one assessment (SCL-90 or generic scale)
  POST /api/v1/scoring/statistics   — Summarize completed assessment scores

Register in main.py:
    from psyscore.routers.scoring import router as scoring_router
    app.include_router(scoring_router)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging
import time

from psyscore.config import settings
from psyscore.core.dependencies import get_scoring_router, get_statistics_calculator
from psyscore.models.scoring import (
    ScoreStatisticsResponse,
    ScoringEnvelope,
    ScoringRequest,
    StatisticsRequest,
)
from psyscore.scoring.scoring_router import ScoringRouter
from psyscore.scoring.statistics import ScoreStatisticsCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Scoring"])


def _envelope_response(envelope: ScoringEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json", exclude_none=True))


# =====================================================================
# POST /api/v1/score — Score one assessment
# =====================================================================

@router.post(
    "/score",
    response_model=ScoringEnvelope,
    response_model_exclude_none=True,
    summary="Score one assessment",
    description="""
    Routes `SCL-90` / `SCL90` to the fixed nine-factor scorer and every other scale code
    to the configurable scorer. Missing `scale_code` or `answers` returns 400; a scoring
    failure returns 500 with `{success: false, error}`.
    """,
    responses={
        400: {"model": ScoringEnvelope, "description": "Missing required field"},
        500: {"model": ScoringEnvelope, "description": "Scoring failed"},
    },
)
async def score_assessment(
    request: ScoringRequest,
    scoring_router: ScoringRouter = Depends(get_scoring_router),
):
    """Score one assessment."""
    missing = scoring_router.check_request(request)
    if missing:
        return _envelope_response(ScoringEnvelope(success=False, error=missing), status.HTTP_400_BAD_REQUEST)

    start = time.time()
    envelope = scoring_router.route(request)
    duration = round(time.time() - start, 4)

    if not envelope.success:
        logger.error(f"Scoring failed for {request.scale_code}: {envelope.error}")
        return _envelope_response(envelope, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"Scored {request.scale_code} ({len(request.answers)} answers) in {duration}s")
    return envelope


# =====================================================================
# POST /api/v1/scoring/statistics — Dashboard aggregates
# =====================================================================

@router.post(
    "/scoring/statistics",
    response_model=ScoreStatisticsResponse,
    summary="Summarize completed assessment scores",
)
async def score_statistics(
    request: StatisticsRequest,
    calculator: ScoreStatisticsCalculator = Depends(get_statistics_calculator),
):
    """Average, range and recent trend of total_mean values (newest first)."""
    stats = calculator.calculate(request.total_means)
    return ScoreStatisticsResponse(**stats.to_dict())
