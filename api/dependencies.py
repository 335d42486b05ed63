# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import app_container
from services.CorpusStatsService import CorpusStatsService
from services.HealthService import HealthService
from services.VerseSearchService import VerseSearchService

def get_search_service() -> VerseSearchService:
    # use the singleton service from the container
    return app_container.search_service

def get_health_service() -> HealthService:
    # use the singleton service from the container
    return app_container.health_service

def get_stats_service() -> CorpusStatsService:
    # use the singleton service from the container
    return app_container.stats_service
