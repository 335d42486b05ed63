# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import logging
import time
from typing import Optional

from embedding.EmbeddingErrors import EmbeddingError
from embedding.OllamaEmbedder import OllamaEmbedder
from utility.logging_utils import get_class_logger


class EmbeddingHealth:
    """
    Smoke test for the Ollama embedding endpoint.

    Verifies:
      - The embedding call completes successfully
      - The response contains a valid vector
      - The vector dimension matches the expected dimension (if provided)
    """

    probe_text = "Ollama embedding healthcheck"

    def __init__(
        self,
        embedder: OllamaEmbedder,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_class_logger(self.__class__)

    async def run(self) -> bool:
        """
        Run the embedding smoke test. Never raises.

        Returns:
            True if the embedding call succeeds and (optionally) the dimension matches.
        """
        self.logger.info("Running embedding healthcheck using model: %s", self.embedder.model)

        try:
            start = time.time()
            embedding = await self.embedder.fetch_embedding(self.probe_text)
            elapsed_ms = (time.time() - start) * 1000.0
        except EmbeddingError as e:
            self.logger.error("Embedding healthcheck FAILED: %s", e)
            return False

        dim = len(embedding)
        self.logger.info(
            "Embedding call succeeded in %.1f ms. Returned dimension: %d",
            elapsed_ms,
            dim,
        )

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning(
                "Dimension mismatch: expected %d, got %d.",
                self.expected_dim,
                dim,
            )
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True


if __name__ == "__main__":
    import asyncio

    from config.Config import Config

    async def _main() -> bool:
        # nomic-embed-text -> 768
        async with OllamaEmbedder(Config.from_env()) as embedder:
            return await EmbeddingHealth(embedder, expected_dim=768).run()

    ok = asyncio.run(_main())
    print("EmbeddingHealth result:", "PASS" if ok else "FAIL")
