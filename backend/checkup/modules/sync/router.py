# modules/sync/router.py
"""
Endpoints de synchronisation tableur → base.

Règle : ce fichier ne touche jamais la DB ni l'engine.
Tout passe par SyncService, qui ne lève jamais : un échec revient
sous forme de SyncResult(success=False) et devient un 500 ici.
"""
from typing import Dict

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from checkup.modules.sync.schemas import SyncErrorOut, SyncResultOut
from checkup.modules.sync.service import SyncResult
from checkup.shared.deps import (
    DbDep,
    SyncServiceDep,
    enforce_sync_rate_limit,
    verify_cron_secret,
)

router = APIRouter(tags=["Sync"])


def _dependency_headers(response: Response) -> Dict[str, str]:
    """En-têtes posés par les dépendances (X-RateLimit-*) sur la réponse injectée."""
    return {k: v for k, v in response.headers.items() if k.lower() != "content-length"}


def _to_response(result: SyncResult, error_label: str, response: Response):
    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": error_label, "details": result.error},
            headers=_dependency_headers(response),
        )
    return result.to_dict()


@router.post(
    "/sync",
    response_model=SyncResultOut,
    responses={429: {"model": SyncErrorOut}, 500: {"model": SyncErrorOut}},
    dependencies=[Depends(enforce_sync_rate_limit)],
    summary="Synchroniser les données clients depuis Google Sheets",
)
async def trigger_sync(db: DbDep, service: SyncServiceDep, response: Response):
    """
    Remplace toutes les fiches clients et assessments par le contenu
    actuel du tableur. Tout ou rien : en cas d'échec les données
    précédentes restent en place.
    """
    result = await service.sync_client_data_from_sheets(db)
    return _to_response(result, "Failed to sync detailed data", response)


@router.get(
    "/cron/sync",
    response_model=SyncResultOut,
    responses={401: {"model": SyncErrorOut}, 500: {"model": SyncErrorOut}},
    dependencies=[Depends(verify_cron_secret)],
    summary="Sync planifiée (job quotidien)",
)
async def scheduled_sync(db: DbDep, service: SyncServiceDep, response: Response):
    """Même pipeline que /sync, déclenché par le planificateur (02:00 UTC)."""
    result = await service.sync_client_data_from_sheets(db)
    return _to_response(result, "Scheduled sync failed", response)
