# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-12
# Description: test_embedding_cache.py
# -----------------------------------------------------------------------------
import pytest

from embedding.EmbeddingCache import EmbeddingCache


def test_key_is_truncated_prefix():
    cache = EmbeddingCache(key_chars=5)

    assert cache.key_for("abcdefgh") == "abcde"
    assert cache.key_for("ab") == "ab"


def test_first_write_wins():
    cache = EmbeddingCache(key_chars=3)

    stored = cache.put("abc-1", [1.0])
    again = cache.put("abc-2", [2.0])

    assert stored == [1.0]
    assert again == [1.0]
    assert cache.get("abc-anything") == [1.0]
    assert len(cache) == 1


def test_contains_and_miss():
    cache = EmbeddingCache()
    cache.put("hello", [0.5])

    assert "hello" in cache
    assert "hell" not in cache
    assert cache.get("other") is None


def test_key_chars_must_be_positive():
    with pytest.raises(ValueError):
        EmbeddingCache(key_chars=0)
