# engine/ingestion/combiner.py
"""
Jointure des trois onglets par client_id.

Ancrage sur l'overview : un assessment sans ligne "Auswertung" est
ignoré. T0 sans T4 (ou l'inverse) est le cas normal en cours de
programme : aucune erreur.
"""
import logging
from typing import Dict, List

from checkup.engine.ingestion.records import AssessmentData, ClientOverview, ClientRecord

logger = logging.getLogger(__name__)


def combine_client_data(
    overview: Dict[str, ClientOverview],
    t0_assessments: Dict[str, AssessmentData],
    t4_assessments: Dict[str, AssessmentData],
) -> List[ClientRecord]:
    combined = [
        ClientRecord(
            overview=client,
            assessment_t0=t0_assessments.get(client_id),
            assessment_t4=t4_assessments.get(client_id),
        )
        for client_id, client in overview.items()
    ]

    orphans = (set(t0_assessments) | set(t4_assessments)) - set(overview)
    if orphans:
        logger.info("Assessments sans client dans l'overview ignorés", extra={"count": len(orphans)})

    logger.info("Données combinées", extra={"clients": len(combined)})
    return combined
