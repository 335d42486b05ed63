# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: SmokeTestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from corpus.CorpusIndex import CorpusIndex
from embedding.OllamaEmbedder import OllamaEmbedder
from health.CorpusHealth import CorpusHealth
from health.EmbeddingHealth import EmbeddingHealth
from utility.logging_utils import get_class_logger


class SmokeTestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - CorpusHealth    (index loaded, ids unique)
      - EmbeddingHealth (Ollama embeddings)
    """

    def __init__(
        self,
        index: CorpusIndex,
        embedder: OllamaEmbedder,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("Initialising SmokeTestRunner")

        self.index = index
        self.embedder = embedder
        self.corpus_health = CorpusHealth(index)
        self.embedding_health = EmbeddingHealth(embedder, expected_dim=expected_dim)

    # -------------------------------------------------------------------------
    async def run_all(self) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite")

        results: Dict[str, bool] = {}

        try:
            ok_corpus = self.corpus_health.run()
            results["corpus_health"] = ok_corpus
            self._log_result("CorpusHealth", ok_corpus)
        except Exception as e:
            self.logger.exception("CorpusHealth.run() raised an exception: %s", e)
            results["corpus_health"] = False

        try:
            ok_embed = await self.embedding_health.run()
            results["embedding_health"] = ok_embed
            self._log_result("EmbeddingHealth", ok_embed)
        except Exception as e:
            self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
            results["embedding_health"] = False

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            self.logger.info("  %s: %s", name, "PASS" if ok else "FAIL")
