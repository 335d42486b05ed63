# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-08
# Description: CorpusHealth
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from corpus.CorpusIndex import CorpusIndex
from utility.logging_utils import get_class_logger


class CorpusHealth:
    """Checks that the corpus index is non-empty and verse ids are unique."""

    def __init__(self, index: CorpusIndex, logger: Optional[logging.Logger] = None):
        self.index = index
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> bool:
        total = len(self.index)
        if total == 0:
            self.logger.error("Corpus healthcheck FAILED: index is empty")
            return False

        unique = len({v.verse_id for v in self.index})
        if unique != total:
            self.logger.error(
                "Corpus healthcheck FAILED: %d duplicate verse ids in %d verses",
                total - unique,
                total,
            )
            return False

        self.logger.info("Corpus healthcheck PASSED (%d verses, %d groups)", total, self.index.group_count)
        return True
