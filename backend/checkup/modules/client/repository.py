# modules/client/repository.py
"""
Lecture des fiches clients et de leurs assessments.
Toute la logique SQL est ici : les services n'écrivent jamais de queries directes.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from typing import List, Optional

from checkup.shared.enums import ClientStatus
from checkup.shared.models import Client, Assessment


class ClientRepository:

    async def list_clients(
        self,
        db: AsyncSession,
        coach_name: Optional[str] = None,
        include_deleted: bool = False,
    ) -> List[Client]:
        query = select(Client)
        if coach_name:
            query = query.where(Client.coach_name == coach_name)
        if not include_deleted:
            query = query.where(func.lower(Client.status) != ClientStatus.DELETED.value.lower())

        r = await db.execute(query.order_by(Client.registration_date.desc()))
        return r.scalars().all()

    async def get_client(self, db: AsyncSession, client_id: str) -> Optional[Client]:
        r = await db.execute(select(Client).where(Client.client_id == client_id))
        return r.scalar_one_or_none()

    async def get_assessments(self, db: AsyncSession, client_id: str) -> List[Assessment]:
        r = await db.execute(
            select(Assessment)
            .where(Assessment.client_id == client_id)
            .order_by(Assessment.timepoint.asc())
        )
        return r.scalars().all()

    async def list_coach_names(self, db: AsyncSession) -> List[str]:
        r = await db.execute(select(Client.coach_name).distinct().order_by(Client.coach_name))
        return list(r.scalars().all())

