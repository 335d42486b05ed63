# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: OllamaEmbedder
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from config.Config import Config
from embedding.EmbeddingCache import Embedding, EmbeddingCache
from embedding.EmbeddingErrors import (
    EmbeddingMissingError,
    EmbeddingProviderError,
    EmbeddingTransportError,
)
from utility.logging_utils import get_class_logger


class OllamaEmbedder:
    """
    Async client for the Ollama /api/embed endpoint with a per-instance
    embedding cache.

    embed() returns the cached vector when the text's cache key has been seen
    before and otherwise issues exactly one POST. Concurrent calls for the same
    key are not collapsed: each one that misses the cache sends its own request.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            cache: Optional[EmbeddingCache] = None,
            transport: Optional[httpx.AsyncBaseTransport] = None,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self.cfg = cfg
        self.model = cfg.embed_model
        self.endpoint = cfg.embed_endpoint
        self.cache = cache if cache is not None else EmbeddingCache()
        self.timeout = httpx.Timeout(cfg.embed_timeout or None)
        self.logger = logger or get_class_logger(self.__class__)

        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None
        self.request_count = 0

        self.logger.info(
            "OllamaEmbedder initialised (endpoint=%s, model=%s, timeout=%s)",
            self.endpoint,
            self.model,
            cfg.embed_timeout or "none",
        )

    # ------------------------------------------------------------------ client
    def _get_client(self) -> httpx.AsyncClient:
        # A client's connection pool is bound to the loop that opened it
        loop = asyncio.get_running_loop()
        if self._client is None or self._client.is_closed or self._client_loop is not loop:
            self._client_loop = loop
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def aclose(self) -> None:
        current = self._client is not None and self._client_loop is asyncio.get_running_loop()
        if current and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
        self._client_loop = None

    async def __aenter__(self) -> "OllamaEmbedder":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ public
    async def embed(self, text: str) -> Embedding:
        """Return the embedding for text, consulting the cache first."""
        cached = self.cache.get(text)
        if cached is not None:
            return cached

        vector = await self.fetch_embedding(text)
        return self.cache.put(text, vector)

    async def fetch_embedding(self, text: str) -> Embedding:
        """Call the provider directly, bypassing the cache."""
        payload = {"model": self.model, "input": text}
        self.request_count += 1

        try:
            resp = await self._get_client().post(self.endpoint, json=payload)
        except httpx.HTTPError as e:
            raise EmbeddingTransportError(
                f"Ollama embed request to {self.endpoint} failed: {e!r}",
                url=self.endpoint,
            ) from e

        if not resp.is_success:
            raise EmbeddingProviderError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise EmbeddingMissingError(f"Ollama embed returned a non-JSON body: {e}") from e

        return self._first_vector(data)

    def cache_info(self) -> Dict[str, int]:
        return {"entries": len(self.cache), "key_chars": self.cache.key_chars}

    # ---------------------------------------------------------------- internals
    @staticmethod
    def _first_vector(data: Any) -> List[float]:
        embeddings = data.get("embeddings") if isinstance(data, dict) else None
        if not isinstance(embeddings, list) or not embeddings:
            raise EmbeddingMissingError()

        vec = embeddings[0]
        if not isinstance(vec, list) or not vec:
            raise EmbeddingMissingError()

        try:
            return [float(x) for x in vec]
        except (TypeError, ValueError) as e:
            raise EmbeddingMissingError(f"Embedding contains non-numeric values: {e}") from e
