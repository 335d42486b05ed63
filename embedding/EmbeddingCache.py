# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: EmbeddingCache
# -----------------------------------------------------------------------------
from typing import Dict, List, Optional

from settings import CACHE_KEY_CHARS

Embedding = List[float]


class EmbeddingCache:
    """
    In-memory memo of text -> embedding, keyed by the first `key_chars`
    characters of the text.

    A key is written at most once and never evicted. Growth is bounded only
    by the size of the corpus being searched.
    """

    def __init__(self, key_chars: int = CACHE_KEY_CHARS) -> None:
        if key_chars <= 0:
            raise ValueError(f"key_chars must be > 0, got {key_chars}")
        self.key_chars = key_chars
        self._entries: Dict[str, Embedding] = {}

    def key_for(self, text: str) -> str:
        return text[:self.key_chars]

    def get(self, text: str) -> Optional[Embedding]:
        return self._entries.get(self.key_for(text))

    def put(self, text: str, vector: Embedding) -> Embedding:
        """Store vector unless the key is already present; return the stored value."""
        return self._entries.setdefault(self.key_for(text), vector)

    def __contains__(self, text: str) -> bool:
        return self.key_for(text) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
