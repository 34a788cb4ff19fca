# modules/sync/repository.py
"""
Accès DB pour la synchronisation.
Toute la logique SQL est ici : le service orchestre, il n'écrit jamais de queries.

Aucune méthode ne commit : la sync les appelle à l'intérieur d'une
unique transaction ouverte par le service.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, insert
from typing import Dict, List

from checkup.shared.models import Client, Assessment


class SyncRepository:

    async def delete_all_assessments(self, db: AsyncSession) -> int:
        r = await db.execute(delete(Assessment))
        return r.rowcount or 0

    async def delete_all_clients(self, db: AsyncSession) -> int:
        r = await db.execute(delete(Client))
        return r.rowcount or 0

    async def create_many_clients(self, db: AsyncSession, rows: List[Dict]) -> int:
        if not rows:
            return 0
        await db.execute(insert(Client), rows)
        return len(rows)

    async def create_many_assessments(self, db: AsyncSession, rows: List[Dict]) -> int:
        if not rows:
            return 0
        await db.execute(insert(Assessment), rows)
        return len(rows)
