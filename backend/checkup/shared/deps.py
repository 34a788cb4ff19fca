# checkup/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends() : jamais appelées directement.

Les composants à cycle de vie (rate limiter) vivent sur app.state,
créés et arrêtés par le lifespan de main.py.
"""
import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from checkup.core.config import Settings, settings
from checkup.core.database import get_db
from checkup.infra.rate_limit import RateLimiter
from checkup.infra.sheets import SheetsClient
from checkup.modules.sync.service import SyncService


def get_settings() -> Settings:
    return settings


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def get_client_ip(request: Request) -> str:
    """IP appelante : X-Forwarded-For (1ère entrée) > X-Real-IP > pair TCP."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    return request.client.host if request.client else "unknown"


def get_sync_service(
    config: Annotated[Settings, Depends(get_settings)],
) -> SyncService:
    return SyncService(SheetsClient.from_settings(config), config)


# ── Garde-fous ─────────────────────────────────────────────

async def enforce_sync_rate_limit(
    request: Request,
    response: Response,
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
    config: Annotated[Settings, Depends(get_settings)],
) -> None:
    """3 syncs / heure par appelant (configurable). 429 au-delà."""
    identifier = f"sync:{get_client_ip(request)}"
    result = limiter.check(identifier, config.SYNC_RATE_LIMIT, config.SYNC_RATE_WINDOW_SECONDS)
    headers = result.headers(limiter.now())

    if result.limited:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Zu viele Anfragen. Bitte versuche es später erneut.",
            headers=headers,
        )
    response.headers.update(headers)


async def verify_cron_secret(
    request: Request,
    config: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Le job planifié s'authentifie avec Authorization: Bearer <CRON_SECRET>."""
    if not config.CRON_SECRET:
        if config.DEBUG:
            return
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Cron secret not configured",
        )

    expected = f"Bearer {config.CRON_SECRET}"
    provided = request.headers.get("authorization", "")
    if not secrets.compare_digest(provided.encode(), expected.encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


# ── Type aliases pour les routers ─────────────────────────
DbDep          = Annotated[AsyncSession, Depends(get_db)]
SyncServiceDep = Annotated[SyncService, Depends(get_sync_service)]
