# main.py
"""
Point d'entrée de l'API Checkup.
Enregistre les modules via leurs routers.

Le lifespan porte tout ce qui a un cycle de vie : configuration du
logging, puis rate limiter (tâche de purge démarrée / annulée ici).
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkup.core.config import settings
from checkup.core.logging import configure_logging
from checkup.infra.rate_limit import RateLimiter

from checkup.modules.client.router import router as client_router
from checkup.modules.sync.router   import router as sync_router

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    limiter = RateLimiter(cleanup_interval=settings.RATE_LIMIT_CLEANUP_SECONDS)
    limiter.start()
    app.state.rate_limiter = limiter
    logger.info("Checkup API started", extra={"version": VERSION})
    try:
        yield
    finally:
        await limiter.stop()
        logger.info("Checkup API stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(client_router)
app.include_router(sync_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}
