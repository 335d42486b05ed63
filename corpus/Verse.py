# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: Verse
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Verse:
    """
    A single indexed verse. Identity is verse_id ("<group_number>:<index_in_group + 1>").
    """

    verse_id: str
    group_number: int
    group_name: str
    index_in_group: int  # 0-based position within the group
    text: str

    @property
    def verse_number(self) -> int:
        return self.index_in_group + 1

    def to_metadata(self) -> Dict[str, Any]:
        return {
            "verse_id": self.verse_id,
            "group_number": self.group_number,
            "group_name": self.group_name,
            "verse_number": self.verse_number,
        }

    def short_preview(self, n: int = 80) -> str:
        """Return a compact text preview for logging/debugging."""
        clean = " ".join(self.text.split())
        preview = (clean[:n] + "...") if len(clean) > n else clean
        return f"[{self.verse_id}] {preview}"


@dataclass
class VerseGroup:
    """A group (surah) as read from the corpus source."""

    number: int
    name: str
    content: List[str] = field(default_factory=list)
