# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: stats router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends

from api.dependencies import get_stats_service
from api.schemas.stats import CorpusStatsResponse
from services.CorpusStatsService import CorpusStatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=CorpusStatsResponse)
def get_stats(
    svc: CorpusStatsService = Depends(get_stats_service),
) -> CorpusStatsResponse:
    return CorpusStatsResponse(**svc.get_stats())
