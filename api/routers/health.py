# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.HealthService import HealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", message="Verse search API running")


@router.get("/deep", response_model=DeepHealthResponse)
async def deep_health_check(
    svc: HealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called")
    result = await svc.deep_health()
    logger.info("GET /health/deep completed (status=%s)", result.status)
    return result
