# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: ScoredVerse
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from corpus.Verse import Verse


@dataclass(frozen=True)
class ScoredVerse:
    """Verse + score. Cosine similarity on the semantic path, a flat score on the keyword path."""
    verse: Verse
    score: float
