from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.scraper import build_default_scraper


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    scraper = build_default_scraper()
    try:
        yield
    finally:
        scraper.close()
        build_default_scraper.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Jestad Scraper",
        description="Extracts LoRaWAN sensor readings from the dashboard readings table.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
