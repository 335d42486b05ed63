# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


# -----------------------------------------------------------------------------
# Semantic search
# -----------------------------------------------------------------------------
# Only the first MAX_POOL_SIZE verses are embedded and scored per query
MAX_POOL_SIZE = _env_int("VERSE_MAX_POOL_SIZE", 80)

DEFAULT_TOP_K = _env_int("VERSE_DEFAULT_TOP_K", 10)
DEFAULT_CONTEXT_VERSES = _env_int("VERSE_DEFAULT_CONTEXT_VERSES", 5)

# Upper bound on in-flight embedding requests during one search
EMBED_CONCURRENCY = _env_int("VERSE_EMBED_CONCURRENCY", 16)


# -----------------------------------------------------------------------------
# Embedding cache
# -----------------------------------------------------------------------------
# Cache key is the text truncated to this many characters
CACHE_KEY_CHARS = _env_int("VERSE_CACHE_KEY_CHARS", 200)


# -----------------------------------------------------------------------------
# Keyword fallback
# -----------------------------------------------------------------------------
# Flat score given to every keyword match (non-ranked but relevant). Not configurable.
FALLBACK_SCORE = 0.9


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if MAX_POOL_SIZE < 0:
    raise RuntimeError(f"VERSE_MAX_POOL_SIZE must be >= 0, got {MAX_POOL_SIZE}")

if CACHE_KEY_CHARS <= 0:
    raise RuntimeError(f"VERSE_CACHE_KEY_CHARS must be > 0, got {CACHE_KEY_CHARS}")

if EMBED_CONCURRENCY < 1:
    raise RuntimeError(f"VERSE_EMBED_CONCURRENCY must be >= 1, got {EMBED_CONCURRENCY}")
