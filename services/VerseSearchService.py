# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: VerseSearchService.py
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import List, Sequence

from corpus.CorpusIndex import CorpusIndex
from corpus.Verse import Verse
from embedding.EmbeddingErrors import EmbeddingError
from embedding.OllamaEmbedder import OllamaEmbedder
from search.CosineSimilarity import cosine_similarity
from search.KeywordMatcher import keyword_search
from search.ScoredVerse import ScoredVerse
from settings import (
    DEFAULT_CONTEXT_VERSES,
    DEFAULT_TOP_K,
    EMBED_CONCURRENCY,
    FALLBACK_SCORE,
    MAX_POOL_SIZE,
)
from utility.logging_utils import get_class_logger


class VerseSearchService:
    """
    Verse search:
        - embeds the query and the first max_pool_size verses (Ollama)
        - ranks the pool by cosine similarity
        - falls back to substring search over the whole corpus if any
          embedding call fails

    Callers never see an embedding error: a provider outage only degrades
    ranking to keyword matches with a flat score.
    """

    def __init__(
            self,
            index: CorpusIndex,
            embedder: OllamaEmbedder,
            *,
            max_pool_size: int = MAX_POOL_SIZE,
            fallback_score: float = FALLBACK_SCORE,
            embed_concurrency: int = EMBED_CONCURRENCY,
            logger: logging.Logger | None = None,
    ) -> None:
        if max_pool_size < 0:
            raise ValueError(f"max_pool_size must be >= 0, got {max_pool_size}")
        if embed_concurrency < 1:
            raise ValueError(f"embed_concurrency must be >= 1, got {embed_concurrency}")

        self.index = index
        self.embedder = embedder
        self.max_pool_size = max_pool_size
        self.fallback_score = fallback_score
        self.embed_concurrency = embed_concurrency
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info(
            "VerseSearchService initialised (verses=%d, pool=%d, concurrency=%d)",
            len(self.index),
            len(self.search_pool()),
            self.embed_concurrency,
        )

    @property
    def records(self) -> Sequence[Verse]:
        return self.index.records

    def search_pool(self) -> Sequence[Verse]:
        return self.index.prefix(self.max_pool_size)

    async def semantic_search(self, query: str, top_k: int = DEFAULT_TOP_K) -> List[ScoredVerse]:
        q = (query or "").strip()
        if not q or top_k <= 0:
            return []

        try:
            results = await self._rank_pool(q, top_k)
        except EmbeddingError as e:
            self.logger.warning("semantic_search: embeddings unavailable, using keyword fallback: %s", e)
            return self._fallback(q, top_k)
        except Exception:
            self.logger.exception("semantic_search: unexpected error on the semantic path, using keyword fallback")
            return self._fallback(q, top_k)

        self.logger.info("semantic_search: query='%s' semantic hits=%d", q[:120], len(results))
        return results

    async def get_context_for_query(
            self,
            query: str,
            max_verses: int = DEFAULT_CONTEXT_VERSES,
    ) -> List[Verse]:
        results = await self.semantic_search(query, max_verses)
        return [r.verse for r in results]

    @staticmethod
    def format_context(verses: Sequence[Verse]) -> str:
        """Turn verses into a prompt-friendly context block."""
        if not verses:
            return "(no retrieved context)"
        return "\n---\n".join(f"[{v.verse_id}] {v.group_name}\n{v.text}" for v in verses)

    def _fallback(self, q: str, top_k: int) -> List[ScoredVerse]:
        results = keyword_search(self.index.records, q, top_k, score=self.fallback_score)
        self.logger.info("semantic_search: query='%s' keyword hits=%d", q[:120], len(results))
        return results

    async def _rank_pool(self, q: str, top_k: int) -> List[ScoredVerse]:
        query_vec = await self.embedder.embed(q)
        semaphore = asyncio.Semaphore(self.embed_concurrency)

        async def score(verse: Verse) -> ScoredVerse:
            async with semaphore:
                vec = await self.embedder.embed(verse.text)
            return ScoredVerse(verse=verse, score=cosine_similarity(query_vec, vec))

        # gather keeps input order, so each score stays with its verse
        tasks = [asyncio.ensure_future(score(v)) for v in self.search_pool()]
        try:
            scored = await asyncio.gather(*tasks)
        except Exception:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        self.logger.debug("_rank_pool: scored %d verses", len(scored))

        # sorted() is stable: equal scores keep corpus order
        ranked = sorted(scored, key=lambda s: s.score, reverse=True)
        return ranked[:top_k]


if __name__ == "__main__":
    import sys

    from config.Config import Config

    cfg = Config.from_env()
    index = CorpusIndex.from_path(cfg.corpus_path)

    async def _main(query: str) -> None:
        async with OllamaEmbedder(cfg) as embedder:
            svc = VerseSearchService(index, embedder)
            for r in await svc.semantic_search(query, top_k=5):
                print(f"{r.score:.4f}  {r.verse.short_preview()}")

    asyncio.run(_main(" ".join(sys.argv[1:]) or "guidance"))
