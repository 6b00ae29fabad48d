"""
Health Check Router - Psychological Assessment Scoring Engine
psyscore/routers/health.py

The scoring engine has no external dependencies; health reflects the process only.
"""
from fastapi import APIRouter
from pydantic import BaseModel
from datetime import datetime, timezone

from psyscore.config import settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service="scoring-engine",
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
    )
