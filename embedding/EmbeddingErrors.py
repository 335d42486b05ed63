# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: EmbeddingErrors
# -----------------------------------------------------------------------------
from typing import Optional


class EmbeddingError(RuntimeError):
    """Base class for anything that stops the embedding provider from returning a vector."""


class EmbeddingProviderError(EmbeddingError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Ollama embed failed: {status_code} {body}")


class EmbeddingMissingError(EmbeddingError):
    """Provider answered 2xx but the payload held no usable vector."""

    def __init__(self, message: str = "No embedding returned") -> None:
        super().__init__(message)


class EmbeddingTransportError(EmbeddingError):
    """Request never got an HTTP answer (connection failure, timeout)."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.url = url
        super().__init__(message)
