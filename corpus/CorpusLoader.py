# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: CorpusLoader
# -----------------------------------------------------------------------------
import json
import logging
from pathlib import Path
from typing import Any, List

from corpus.Verse import VerseGroup
from utility.logging_utils import get_class_logger


class CorpusLoader:
    """
    Reads the static corpus file into VerseGroup objects.

    Accepted shapes:
      {"surahs": [{"number": 1, "name": "...", "content": ["...", ...]}, ...]}
      [{"number": 1, "name": "...", "content": [...]}, ...]
    """

    def __init__(self, path: str | Path, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.logger = logger or get_class_logger(self.__class__)

    def load_groups(self) -> List[VerseGroup]:
        if not self.path.is_file():
            raise FileNotFoundError(f"Corpus file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as f:
            payload = json.load(f)

        raw_groups = payload.get("surahs", []) if isinstance(payload, dict) else payload
        if not isinstance(raw_groups, list):
            raise ValueError(f"Corpus file {self.path} has no list of groups")

        groups = [self._to_group(g) for g in raw_groups if isinstance(g, dict)]

        self.logger.info(
            "Loaded %d groups (%d verses) from %s",
            len(groups),
            sum(len(g.content) for g in groups),
            self.path,
        )
        return groups

    @staticmethod
    def _to_group(raw: dict) -> VerseGroup:
        content: Any = raw.get("content") or []
        return VerseGroup(
            number=raw.get("number"),
            name=raw.get("name") or "",
            content=[str(line) for line in content],
        )
