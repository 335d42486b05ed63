# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: search router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_search_service
from api.schemas.search import (
    ContextRequest,
    ContextResponse,
    SearchHit,
    SearchRequest,
    SearchResponse,
)
from api.schemas.verses import VerseModel
from services.VerseSearchService import VerseSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
async def post_search(
    req: SearchRequest,
    svc: VerseSearchService = Depends(get_search_service),
) -> SearchResponse:
    # Blank queries are a no-op in the engine; return an empty result set
    results = await svc.semantic_search(req.query, req.top_k)

    return SearchResponse(
        query=req.query.strip(),
        top_k=req.top_k,
        results=[SearchHit.from_verse(r.verse, score=r.score) for r in results],
    )


@router.post("/context", response_model=ContextResponse)
async def post_context(
    req: ContextRequest,
    svc: VerseSearchService = Depends(get_search_service),
) -> ContextResponse:
    verses = await svc.get_context_for_query(req.query, req.max_verses)
    logger.debug("POST /search/context: %d verses", len(verses))

    return ContextResponse(
        query=req.query.strip(),
        verses=[VerseModel.from_verse(v) for v in verses],
        context=svc.format_context(verses),
    )
