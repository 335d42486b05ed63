# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: verses.py
# -----------------------------------------------------------------------------
from typing import List

from pydantic import BaseModel

from corpus.Verse import Verse

class VerseModel(BaseModel):
    verse_id: str
    group_number: int
    group_name: str
    verse_number: int
    text: str

    @classmethod
    def from_verse(cls, verse: Verse, **extra) -> "VerseModel":
        return cls(**verse.to_metadata(), text=verse.text, **extra)

class VerseListResponse(BaseModel):
    total: int
    offset: int
    limit: int
    verses: List[VerseModel]
