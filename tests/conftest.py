# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-11
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


@pytest.fixture
def sun_moon_groups():
    return [{"number": 1, "name": "A", "content": ["the sun rises", "the moon sets"]}]


@pytest.fixture
def sample_corpus_path() -> Path:
    return ROOT / "data" / "quranic_sample.json"
