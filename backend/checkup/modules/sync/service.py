# modules/sync/service.py
"""
Synchronisation tableur → base relationnelle.

Machine à états :
    FETCHING → TRANSFORMING → REPLACING → DONE
        └──────────┴─────────────┴──────→ FAILED

1. FETCHING      : 3 plages lues en parallèle, parsées puis jointes (engine/ingestion)
2. TRANSFORMING  : aplatissement en deux lots (clients, assessments)
3. REPLACING     : UNE transaction : delete assessments, delete clients,
                   insert clients, insert assessments. Toute erreur → rollback,
                   les données précédentes restent intactes.

Politique d'erreur unique : tout ou rien. Un client en échec fait échouer
la sync entière (pas de "skip and continue").

Aucune sérialisation des syncs concurrentes ici : la protection est le
rate limit du router.
"""
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from checkup.core.config import Settings, settings as default_settings
from checkup.core.database import SessionLocal
from checkup.engine.ingestion.combiner import combine_client_data
from checkup.engine.ingestion.parser import (
    ParseReport,
    parse_assessment_rows,
    parse_overview_rows,
)
from checkup.engine.ingestion.records import ClientRecord
from checkup.infra.sheets import SheetsClient
from checkup.modules.sync.repository import SyncRepository
from checkup.shared.enums import SyncState, Timepoint

logger = logging.getLogger(__name__)

repo = SyncRepository()


class SheetSource(Protocol):
    async def fetch_ranges(self, ranges: Sequence[str]) -> List[List[List[str]]]: ...


@dataclass
class SyncStats:
    fetch_duration: int = 0
    delete_duration: int = 0
    insert_duration: int = 0
    total_duration: int = 0


@dataclass
class SyncResult:
    success: bool
    clients_created: int = 0
    assessments_created: int = 0
    total_clients: int = 0
    duration: int = 0
    error: Optional[str] = None
    state: SyncState = SyncState.DONE
    date_fallbacks: int = 0
    stats: SyncStats = field(default_factory=SyncStats)

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["state"] = self.state.value
        return data


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def prepare_batch_data(records: List[ClientRecord]) -> Tuple[List[Dict], List[Dict]]:
    """Un row client par enregistrement, 0 à 2 rows assessment."""
    clients: List[Dict] = []
    assessments: List[Dict] = []

    for record in records:
        clients.append(record.overview.to_row())
        for assessment in (record.assessment_t0, record.assessment_t4):
            if assessment is not None:
                assessments.append(assessment.to_row())

    return clients, assessments


class SyncService:

    def __init__(self, source: SheetSource, settings: Settings = default_settings):
        self.source = source
        self.ranges = (
            settings.SHEETS_OVERVIEW_RANGE,
            settings.SHEETS_T0_RANGE,
            settings.SHEETS_T4_RANGE,
        )

    async def fetch_client_data(self, report: ParseReport) -> List[ClientRecord]:
        """Lecture des trois onglets + parsing + jointure."""
        overview_rows, t0_rows, t4_rows = await self.source.fetch_ranges(self.ranges)

        overview = parse_overview_rows(overview_rows, report)
        t0 = parse_assessment_rows(t0_rows, Timepoint.T0, report)
        t4 = parse_assessment_rows(t4_rows, Timepoint.T4, report)

        return combine_client_data(overview, t0, t4)

    async def replace_all_data(
        self,
        db: AsyncSession,
        clients: List[Dict],
        assessments: List[Dict],
        stats: SyncStats,
    ) -> Tuple[int, int]:
        """Delete + insert dans une seule transaction (rollback sur toute exception)."""
        async with db.begin():
            delete_start = time.perf_counter()
            await repo.delete_all_assessments(db)
            await repo.delete_all_clients(db)
            stats.delete_duration = _elapsed_ms(delete_start)

            insert_start = time.perf_counter()
            clients_created = await repo.create_many_clients(db, clients)
            assessments_created = await repo.create_many_assessments(db, assessments)
            stats.insert_duration = _elapsed_ms(insert_start)

        return clients_created, assessments_created

    async def sync_client_data_from_sheets(self, db: AsyncSession) -> SyncResult:
        """Point d'entrée : ne lève jamais, retourne toujours un SyncResult."""
        start = time.perf_counter()
        stats = SyncStats()
        report = ParseReport()
        state = SyncState.FETCHING

        try:
            logger.info("Sync : lecture du tableur")
            fetch_start = time.perf_counter()
            records = await self.fetch_client_data(report)
            stats.fetch_duration = _elapsed_ms(fetch_start)
            logger.info(
                "Sync : tableur lu",
                extra={"clients": len(records), "duration_ms": stats.fetch_duration},
            )

            if not records:
                stats.total_duration = _elapsed_ms(start)
                return SyncResult(
                    success=True,
                    duration=stats.total_duration,
                    date_fallbacks=report.date_fallbacks,
                    stats=stats,
                )

            state = SyncState.TRANSFORMING
            clients, assessments = prepare_batch_data(records)

            state = SyncState.REPLACING
            clients_created, assessments_created = await self.replace_all_data(
                db, clients, assessments, stats
            )

            state = SyncState.DONE
            stats.total_duration = _elapsed_ms(start)
            logger.info(
                "Sync terminée",
                extra={
                    "clients_created": clients_created,
                    "assessments_created": assessments_created,
                    "date_fallbacks": report.date_fallbacks,
                    "fetch_ms": stats.fetch_duration,
                    "delete_ms": stats.delete_duration,
                    "insert_ms": stats.insert_duration,
                    "total_ms": stats.total_duration,
                },
            )
            return SyncResult(
                success=True,
                clients_created=clients_created,
                assessments_created=assessments_created,
                total_clients=len(records),
                duration=stats.total_duration,
                state=state,
                date_fallbacks=report.date_fallbacks,
                stats=stats,
            )

        except Exception as e:
            stats.total_duration = _elapsed_ms(start)
            logger.error(
                "Sync échouée",
                exc_info=True,
                extra={"failed_in": state.value, "duration_ms": stats.total_duration},
            )
            return SyncResult(
                success=False,
                duration=stats.total_duration,
                error=str(e) or type(e).__name__,
                state=SyncState.FAILED,
                date_fallbacks=report.date_fallbacks,
                stats=stats,
            )


async def sync_client_data_from_sheets() -> SyncResult:
    """Sync autonome (script, job planifié) : session et client Sheets propres."""
    service = SyncService(SheetsClient.from_settings(default_settings))
    async with SessionLocal() as db:
        return await service.sync_client_data_from_sheets(db)
