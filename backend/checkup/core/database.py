# backend/checkup/core/database.py
"""
Moteur SQLAlchemy async + session par requête.

Le store relationnel est traité comme opaque : les services passent
toujours par les repositories, jamais par l'engine directement.
"""
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from checkup.core.config import settings


class Base(DeclarativeBase):
    pass


engine = create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dépendance FastAPI : une session par requête, fermée en sortie."""
    async with SessionLocal() as session:
        yield session
