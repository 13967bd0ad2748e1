import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.api.endpoints import lyrics
from app.core.config import get_settings
from app.core.http_client import HttpClientManager

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await HttpClientManager.close()

app = FastAPI(
    title="Lyrics Relay",
    description="Relays track lookups to LRCLIB and returns synced and plain lyrics.",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)

app.include_router(lyrics.router)
