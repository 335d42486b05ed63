# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: CorpusStatsService.py
# -----------------------------------------------------------------------------

import logging
from typing import Any, Dict

from services.VerseSearchService import VerseSearchService
from utility.logging_utils import get_class_logger


class CorpusStatsService:
    """
    Stats service for the /stats endpoint: corpus size, search pool size
    and embedding cache fill.
    """

    def __init__(
        self,
        *,
        search_service: VerseSearchService,
        logger: logging.Logger | None = None,
    ) -> None:
        self.search_service = search_service
        self.logger = logger or get_class_logger(self.__class__)

    def get_stats(self) -> Dict[str, Any]:
        index = self.search_service.index
        cache = self.search_service.embedder.cache_info()

        stats = {
            "total_groups": index.group_count,
            "total_verses": len(index),
            "pool_size": len(self.search_service.search_pool()),
            "max_pool_size": self.search_service.max_pool_size,
            "cached_embeddings": cache["entries"],
            "cache_key_chars": cache["key_chars"],
            "embed_model": self.search_service.embedder.model,
        }
        self.logger.info("Stats: %s", stats)
        return stats
