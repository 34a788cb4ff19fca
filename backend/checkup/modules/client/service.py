# modules/client/service.py
"""
Lecture des fiches clients + comparaison T0/T4.

Responsabilités :
1. Interroger la DB via repository (fiches, assessments)
2. Séparer les assessments par timepoint
3. Déléguer tout calcul à engine/comparison (fonctions pures)
"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, List, Optional, Tuple

from checkup.engine.comparison.report import build_comparison_report
from checkup.modules.client.repository import ClientRepository
from checkup.shared.enums import Timepoint
from checkup.shared.models import Assessment, Client

repo = ClientRepository()


def split_by_timepoint(
    assessments: List[Assessment],
) -> Tuple[Optional[Assessment], Optional[Assessment]]:
    """(T0, T4) : un timepoint inconnu est ignoré, le dernier doublon gagne."""
    by_timepoint: Dict[str, Assessment] = {}
    for assessment in assessments:
        by_timepoint[assessment.timepoint] = assessment
    return by_timepoint.get(Timepoint.T0.value), by_timepoint.get(Timepoint.T4.value)


class ClientService:

    async def list_clients(
        self,
        db: AsyncSession,
        coach_name: Optional[str] = None,
        include_deleted: bool = False,
    ) -> List[Client]:
        return await repo.list_clients(db, coach_name=coach_name, include_deleted=include_deleted)

    async def list_coaches(self, db: AsyncSession) -> List[str]:
        return await repo.list_coach_names(db)

    async def get_client_detail(self, db: AsyncSession, client_id: str) -> Dict:
        client = await repo.get_client(db, client_id)
        if not client:
            raise LookupError("CLIENT_NOT_FOUND")

        assessments = await repo.get_assessments(db, client_id)
        return {"client": client, "assessments": assessments}

    async def get_comparison(self, db: AsyncSession, client_id: str) -> Dict:
        """
        Rapport T0/T4 de la fiche client.
        Fonctionne avec 0, 1 ou 2 assessments : le rapport signale ce qui manque.
        """
        client = await repo.get_client(db, client_id)
        if not client:
            raise LookupError("CLIENT_NOT_FOUND")

        t0, t4 = split_by_timepoint(await repo.get_assessments(db, client_id))
        report = build_comparison_report(t0, t4)
        report["client_id"] = client.client_id
        return report
