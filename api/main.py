# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: main.py
# -----------------------------------------------------------------------------
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.AppContainer import app_container
from api.routers import health, search, stats, verses
from utility.logging_utils import get_logger

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    logger.info("Shutting down: closing embedding client")
    await app_container.aclose()


app = FastAPI(title="Verse Search API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(search.router)
app.include_router(verses.router)
app.include_router(stats.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("VERSE_API_HOST", "127.0.0.1"),
        port=int(os.getenv("VERSE_API_PORT", "8000")),
    )
