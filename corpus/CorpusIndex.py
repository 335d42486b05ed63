# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: CorpusIndex
# -----------------------------------------------------------------------------
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from corpus.CorpusLoader import CorpusLoader
from corpus.Verse import Verse


def _group_field(group: Any, name: str, default: Any = None) -> Any:
    # Groups may arrive as VerseGroup objects or as raw JSON mappings
    if isinstance(group, Mapping):
        return group.get(name, default)
    return getattr(group, name, default)


def build_index(groups: Iterable[Any]) -> List[Verse]:
    """
    Flatten groups into an ordered list of verses.

    Order is group order, then line order within each group. A group with
    missing or null content contributes nothing.
    """
    verses: List[Verse] = []
    for group in groups:
        number = _group_field(group, "number")
        name = _group_field(group, "name", "")
        content = _group_field(group, "content") or []

        for idx, text in enumerate(content):
            verses.append(Verse(
                verse_id=f"{number}:{idx + 1}",
                group_number=number,
                group_name=name,
                index_in_group=idx,
                text=text,
            ))
    return verses


class CorpusIndex:
    """
    Read-only, ordered collection of verses built once at startup.
    """

    def __init__(self, groups: Iterable[Any]) -> None:
        groups = list(groups)
        self._records: Tuple[Verse, ...] = tuple(build_index(groups))
        self._by_id: Dict[str, Verse] = {}
        for verse in self._records:
            self._by_id.setdefault(verse.verse_id, verse)
        self._group_count = len(groups)

    @classmethod
    def from_path(cls, path: str | Path) -> "CorpusIndex":
        return cls(CorpusLoader(path).load_groups())

    @property
    def records(self) -> Sequence[Verse]:
        return self._records

    @property
    def group_count(self) -> int:
        return self._group_count

    def get(self, verse_id: str) -> Optional[Verse]:
        return self._by_id.get(verse_id)

    def prefix(self, n: int) -> Sequence[Verse]:
        return self._records[:max(n, 0)]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Verse]:
        return iter(self._records)
