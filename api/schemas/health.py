# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, Literal

from pydantic import BaseModel, Field

CheckName = Literal["corpus_health", "embedding_health"]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    service: str = "verse-search"
    message: str


class SmokeTestSummary(BaseModel):
    total: int = Field(..., ge=0)
    passed: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)


class DeepHealthResponse(BaseModel):
    """Result of /health/deep: corpus index checks plus a live Ollama embedding."""
    status: Literal["ok", "error"]
    results: Dict[CheckName, bool]
    summary: SmokeTestSummary
    total_verses: int = Field(..., ge=0, description="Verses in the loaded corpus index")
    embed_model: str = Field(..., description="Ollama model used by the embedding check")
    embed_endpoint: str = Field(..., description="Ollama /api/embed URL the check called")
