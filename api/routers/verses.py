# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: verses router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_search_service
from api.schemas.verses import VerseListResponse, VerseModel
from services.VerseSearchService import VerseSearchService

router = APIRouter(prefix="/verses", tags=["verses"])


@router.get("", response_model=VerseListResponse)
def list_verses(
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=500),
    svc: VerseSearchService = Depends(get_search_service),
) -> VerseListResponse:
    records = svc.records
    page = records[offset:offset + limit]
    return VerseListResponse(
        total=len(records),
        offset=offset,
        limit=limit,
        verses=[VerseModel.from_verse(v) for v in page],
    )


@router.get("/{verse_id}", response_model=VerseModel)
def get_verse(
    verse_id: str,
    svc: VerseSearchService = Depends(get_search_service),
) -> VerseModel:
    verse = svc.index.get(verse_id)
    if verse is None:
        raise HTTPException(status_code=404, detail=f"Verse '{verse_id}' not found")
    return VerseModel.from_verse(verse)
