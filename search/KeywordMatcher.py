# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: KeywordMatcher
# -----------------------------------------------------------------------------
from typing import Iterable, List

from corpus.Verse import Verse
from search.ScoredVerse import ScoredVerse
from settings import FALLBACK_SCORE


def matches(text: str, query: str) -> bool:
    # literal match first, then case-insensitive
    return query in text or query.lower() in text.lower()


def keyword_search(
        verses: Iterable[Verse],
        query: str,
        top_k: int,
        score: float = FALLBACK_SCORE,
) -> List[ScoredVerse]:
    """
    Substring search used when embeddings are unavailable.

    Returns matching verses in corpus order, at most top_k, each with the
    same flat score.
    """
    if top_k <= 0:
        return []

    results: List[ScoredVerse] = []
    for verse in verses:
        if matches(verse.text, query):
            results.append(ScoredVerse(verse=verse, score=score))
            if len(results) >= top_k:
                break
    return results
