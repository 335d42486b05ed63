# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: stats.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel

class CorpusStatsResponse(BaseModel):
    total_groups: int
    total_verses: int
    pool_size: int
    max_pool_size: int
    cached_embeddings: int
    cache_key_chars: int
    embed_model: str
