# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: CosineSimilarity
# -----------------------------------------------------------------------------
from typing import Sequence

import numpy as np


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors in [-1, 1].

    Vectors of different length, or a zero vector on either side, score 0.0.
    """
    if len(a) != len(b):
        return 0.0

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    denom = np.linalg.norm(va) * np.linalg.norm(vb)
    if denom == 0:
        return 0.0

    return float(np.dot(va, vb) / denom)
