# checkup/infra/rate_limit.py
"""
Rate limiter en mémoire, fenêtre fixe par identifiant.

Cycle de vie explicite : créé et démarré par le lifespan FastAPI,
arrêté à l'extinction. Le nettoyage des entrées expirées tourne dans
une tâche asyncio annulée par stop().

Utilisé par la sync manuelle (3 appels / heure par appelant) : c'est
la seule protection contre deux syncs concurrentes sur le même store.
"""
import asyncio
import contextlib
import math
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class RateLimitEntry:
    count: int
    reset_at: float


@dataclass
class RateLimitResult:
    limited: bool
    limit: int
    remaining: int
    reset_at: float

    def headers(self, now: float) -> Dict[str, str]:
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(int(self.reset_at)),
        }
        if self.limited:
            headers["Retry-After"] = str(max(math.ceil(self.reset_at - now), 0))
        return headers


class RateLimiter:

    def __init__(self, cleanup_interval: float = 300.0, clock: Callable[[], float] = time.time):
        self.cleanup_interval = cleanup_interval
        self._clock = clock
        self._store: Dict[str, RateLimitEntry] = {}
        self._cleanup_task: Optional[asyncio.Task] = None

    # ── Cycle de vie ──────────────────────────────────────────

    def start(self) -> None:
        if self._cleanup_task is None:
            self._cleanup_task = asyncio.create_task(self._cleanup_loop())

    async def stop(self) -> None:
        if self._cleanup_task is not None:
            self._cleanup_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._cleanup_task
            self._cleanup_task = None
        self._store.clear()

    async def _cleanup_loop(self) -> None:
        while True:
            await asyncio.sleep(self.cleanup_interval)
            removed = self.cleanup()
            if removed:
                logger.debug("Entrées rate limit expirées supprimées", extra={"count": removed})

    # ── API ───────────────────────────────────────────────────

    def now(self) -> float:
        return self._clock()

    def cleanup(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._store.items() if now > entry.reset_at]
        for key in expired:
            del self._store[key]
        return len(expired)

    def check(self, identifier: str, limit: int, window_seconds: float) -> RateLimitResult:
        now = self._clock()
        entry = self._store.get(identifier)

        if entry is None or now > entry.reset_at:
            entry = RateLimitEntry(count=1, reset_at=now + window_seconds)
            self._store[identifier] = entry
            return RateLimitResult(False, limit, limit - 1, entry.reset_at)

        entry.count += 1
        if entry.count > limit:
            return RateLimitResult(True, limit, 0, entry.reset_at)
        return RateLimitResult(False, limit, limit - entry.count, entry.reset_at)
