# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: search.py
# -----------------------------------------------------------------------------
from typing import List

from pydantic import Field, BaseModel

from api.schemas.verses import VerseModel
from settings import DEFAULT_CONTEXT_VERSES, DEFAULT_TOP_K

class SearchRequest(BaseModel):
    query: str = ""
    top_k: int = Field(DEFAULT_TOP_K, ge=1, le=100)

class SearchHit(VerseModel):
    score: float

class SearchResponse(BaseModel):
    query: str
    top_k: int
    results: List[SearchHit]

class ContextRequest(BaseModel):
    query: str = ""
    max_verses: int = Field(DEFAULT_CONTEXT_VERSES, ge=1, le=50)

class ContextResponse(BaseModel):
    query: str
    verses: List[VerseModel]
    context: str
