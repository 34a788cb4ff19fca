# modules/client/router.py
"""
Endpoints de consultation des fiches clients.
Liste → Détail → Comparaison T0/T4

Règle : ce fichier ne touche jamais la DB ni l'engine.
Tout passe par client_service.
"""
from fastapi import APIRouter, HTTPException, Query, status
from typing import List, Optional

from checkup.modules.client.service import ClientService
from checkup.modules.client.schemas import (
    ClientOut,
    ClientDetailOut,
    ComparisonOut,
)
from checkup.shared.deps import DbDep

router = APIRouter(prefix="/clients", tags=["Clients"])
service = ClientService()


# ─────────────────────────────────────────────
# LISTE
# ─────────────────────────────────────────────

@router.get(
    "",
    response_model=List[ClientOut],
    summary="Liste des clients",
)
async def list_clients(
    db: DbDep,
    coach: Optional[str] = Query(None, description="Filtre sur le nom du coach"),
    include_deleted: bool = Query(False, description="Inclure les clients au statut Gelöscht"),
):
    """Plus récents d'abord (date d'inscription décroissante)."""
    return await service.list_clients(db, coach_name=coach, include_deleted=include_deleted)


@router.get(
    "/coaches",
    response_model=List[str],
    summary="Coachs présents dans les données",
)
async def list_coaches(db: DbDep):
    return await service.list_coaches(db)


# ─────────────────────────────────────────────
# FICHE CLIENT
# ─────────────────────────────────────────────

@router.get(
    "/{client_id}",
    response_model=ClientDetailOut,
    summary="Fiche client + assessments",
)
async def get_client(client_id: str, db: DbDep):
    try:
        return await service.get_client_detail(db, client_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")


@router.get(
    "/{client_id}/comparison",
    response_model=ComparisonOut,
    summary="Comparaison T0 / T4",
)
async def get_comparison(client_id: str, db: DbDep):
    """
    Résumés par catégorie, score global, données radar et détail
    par métrique. Fonctionne aussi avec un seul timepoint disponible.
    """
    try:
        return await service.get_comparison(db, client_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
