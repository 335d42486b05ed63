# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from config.Config import Config
from corpus.CorpusIndex import CorpusIndex
from embedding.OllamaEmbedder import OllamaEmbedder
from health.SmokeTestRunner import SmokeTestRunner
from services.CorpusStatsService import CorpusStatsService
from services.HealthService import HealthService
from services.VerseSearchService import VerseSearchService
from utility.logging_utils import get_class_logger


class AppContainer:
    """
    Owns object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("AppContainer config: %s", self.cfg.summary())

        # Corpus is built once and read-only afterwards
        self.index = CorpusIndex.from_path(self.cfg.corpus_path)

        # Core infrastructure
        self.embedder = OllamaEmbedder(cfg=self.cfg)

        # Return a singleton VerseSearchService instance
        self.search_service = VerseSearchService(self.index, self.embedder)

        # Smoke tests / health
        self.test_runner = SmokeTestRunner(index=self.index, embedder=self.embedder)
        self.health_service = HealthService(test_runner=self.test_runner)

        # Return a singleton CorpusStatsService instance
        self.stats_service = CorpusStatsService(search_service=self.search_service)

    async def aclose(self) -> None:
        await self.embedder.aclose()

# Singleton container instance
app_container = AppContainer()
