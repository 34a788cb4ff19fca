# engine/ingestion/parser.py
"""
Parsing défensif des lignes brutes du tableur Checkup.

Règles de tolérance (aucune exception ne remonte d'une cellule) :
    - ligne sans client_id                 → ignorée silencieusement
    - ligne qui n'est pas une liste        → ignorée + warning
    - date illisible / vide / "#N/A"       → maintenant (UTC) + warning + compteur
    - nombre vide / sentinelle / illisible → None
    - libellé vide / sentinelle            → None, sinon trim
    - doublon de client_id                 → la dernière ligne gagne

Les champs d'évaluation du coaching ne sont lus que pour T4.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional

from checkup.engine.ingestion.layouts import (
    COACHING_COLUMNS,
    NUMERIC_FIELDS,
    OVERVIEW_CHAT_LINK,
    OVERVIEW_COACH_NAME,
    OVERVIEW_LAYOUT,
    OVERVIEW_REGISTRATION_DATE,
    OVERVIEW_STATUS,
    OVERVIEW_WEEKS,
    OVERVIEW_WELLBEING_T0,
    OVERVIEW_WELLBEING_T4,
    QUESTIONNAIRE_COLUMNS,
    T0_LAYOUT,
    T4_LAYOUT,
    RowShapeError,
    check_row_shape,
)
from checkup.engine.ingestion.records import AssessmentData, ClientOverview
from checkup.shared.enums import ClientStatus, Timepoint

logger = logging.getLogger(__name__)

SENTINELS = frozenset({"#N/A"})
UNKNOWN_COACH = "Unbekannter Coach"
CLIENT_NAME_PREFIX = "Klient"

_LEADING_INT = re.compile(r"[+-]?\d+")
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_DATE = re.compile(
    r"(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4})"
    r"(?:\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?"
)


@dataclass
class ParseReport:
    """Compteurs de qualité de données remontés jusqu'au SyncResult."""
    rows_seen: int = 0
    rows_skipped: int = 0
    date_fallbacks: int = 0


# ── Cellules ──────────────────────────────────────────────────────────────────

def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == "" or value.strip() in SENTINELS


def parse_number(value: Optional[str]) -> Optional[int]:
    """Entier en tête de cellule ("7", " 7 ", "7,5" → 7). Jamais d'exception."""
    if _is_blank(value):
        return None
    match = _LEADING_INT.match(value.strip())
    return int(match.group()) if match else None


def parse_string(value: Optional[str]) -> Optional[str]:
    if _is_blank(value):
        return None
    return value.strip()


def parse_weeks(value: Optional[str]) -> float:
    """Virgule décimale allemande acceptée ("4,5"). Illisible → 0."""
    if _is_blank(value):
        return 0.0
    match = _LEADING_FLOAT.match(value.strip().replace(",", "."))
    if not match:
        return 0.0
    return max(float(match.group()), 0.0)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    "DD.MM.YYYY" ou "DD.MM.YYYY HH:MM[:SS]" → datetime UTC.
    None si la cellule est vide, sentinelle ou invalide (31.02.2024, ...).
    """
    if _is_blank(value):
        return None
    match = _DATE.match(value.strip())
    if not match:
        return None

    parts = {k: int(v) for k, v in match.groupdict().items() if v is not None}
    try:
        return datetime(
            parts["year"], parts["month"], parts["day"],
            parts.get("hour", 0), parts.get("minute", 0), parts.get("second", 0),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def _date_or_now(value: str, context: str, report: ParseReport) -> datetime:
    parsed = parse_date(value)
    if parsed is not None:
        return parsed

    report.date_fallbacks += 1
    logger.warning("Date illisible, remplacée par maintenant", extra={"context": context, "raw": value})
    return datetime.now(timezone.utc)


def _or_default(value: str, default: str) -> str:
    return default if _is_blank(value) else value.strip()


# ── Onglets ───────────────────────────────────────────────────────────────────

def parse_overview_rows(
    rows: Iterable, report: Optional[ParseReport] = None
) -> Dict[str, ClientOverview]:
    """Onglet "Auswertung" → {client_id: ClientOverview}."""
    report = report if report is not None else ParseReport()
    overview: Dict[str, ClientOverview] = {}

    for raw in rows:
        report.rows_seen += 1
        try:
            row = check_row_shape(raw, OVERVIEW_LAYOUT)
        except RowShapeError as e:
            report.rows_skipped += 1
            logger.warning("Ligne ignorée : %s", e)
            continue

        client_id = row[OVERVIEW_LAYOUT.client_id].strip()
        if not client_id:
            report.rows_skipped += 1
            continue

        overview[client_id] = ClientOverview(
            client_id=client_id,
            client_name=f"{CLIENT_NAME_PREFIX} {client_id[:8]}",
            coach_name=_or_default(row[OVERVIEW_COACH_NAME], UNKNOWN_COACH),
            status=_or_default(row[OVERVIEW_STATUS], ClientStatus.UNKNOWN.value),
            registration_date=_date_or_now(
                row[OVERVIEW_REGISTRATION_DATE], f"overview:{client_id}", report
            ),
            weeks=parse_weeks(row[OVERVIEW_WEEKS]),
            chat_link=row[OVERVIEW_CHAT_LINK].strip(),
            wellbeing_t0_basic=parse_number(row[OVERVIEW_WELLBEING_T0]),
            wellbeing_t4_basic=parse_number(row[OVERVIEW_WELLBEING_T4]),
        )

    return overview


def parse_assessment_rows(
    rows: Iterable, timepoint: Timepoint, report: Optional[ParseReport] = None
) -> Dict[str, AssessmentData]:
    """Onglet T0 ou T4 → {client_id: AssessmentData}."""
    report = report if report is not None else ParseReport()
    timepoint = Timepoint(timepoint)
    layout = T4_LAYOUT if timepoint == Timepoint.T4 else T0_LAYOUT
    assessments: Dict[str, AssessmentData] = {}

    for raw in rows:
        report.rows_seen += 1
        try:
            row = check_row_shape(raw, layout)
        except RowShapeError as e:
            report.rows_skipped += 1
            logger.warning("Ligne ignorée : %s", e)
            continue

        client_id = row[layout.client_id].strip()
        if not client_id:
            report.rows_skipped += 1
            continue

        values = {}
        for name, index in QUESTIONNAIRE_COLUMNS.items():
            parse = parse_number if name in NUMERIC_FIELDS else parse_string
            values[name] = parse(row[index])

        if timepoint == Timepoint.T4:
            for name, index in COACHING_COLUMNS.items():
                parse = parse_number if name in NUMERIC_FIELDS else parse_string
                values[name] = parse(row[index])

        assessments[client_id] = AssessmentData(
            client_id=client_id,
            timepoint=timepoint,
            submitted_at=_date_or_now(
                row[layout.submitted_at], f"{timepoint.value}:{client_id}", report
            ),
            **values,
        )

    return assessments
