# engine/comparison/metrics.py
"""
Catalogue des métriques du questionnaire Checkup.

Chaque métrique : champ de l'assessment, libellé d'affichage, type
d'échelle et sens (is_positive). Les groupes servent à la fois au
calcul des résumés (summary.py) et à l'affichage côté fiche client.
"""
from dataclasses import dataclass
from typing import Any, Tuple

NUMERIC = "numeric"
CATEGORICAL = "categorical"


@dataclass(frozen=True)
class MetricDef:
    field: str
    label: str
    kind: str = CATEGORICAL
    is_positive: bool = True


WELLBEING = MetricDef("wellbeing", "Wohlbefinden", NUMERIC, True)

BURDENS: Tuple[MetricDef, ...] = (
    MetricDef("stress",            "Stress",             CATEGORICAL, False),
    MetricDef("exhaustion",        "Erschöpfung",        CATEGORICAL, False),
    MetricDef("anxiety",           "Angst",              CATEGORICAL, False),
    MetricDef("depression",        "Depression",         CATEGORICAL, False),
    MetricDef("self_doubt",        "Selbstzweifel",      CATEGORICAL, False),
    MetricDef("sleep_problems",    "Schlafprobleme",     CATEGORICAL, False),
    MetricDef("tension",           "Anspannung",         CATEGORICAL, False),
    MetricDef("irritability",      "Reizbarkeit",        CATEGORICAL, False),
    MetricDef("social_withdrawal", "Sozialer Rückzug",   CATEGORICAL, False),
    MetricDef("other",             "Sonstiges",          CATEGORICAL, False),
)

LIFE_AREAS: Tuple[MetricDef, ...] = (
    MetricDef("work_area",    "Arbeitsbereich", NUMERIC, True),
    MetricDef("private_area", "Privatbereich",  NUMERIC, True),
)

SELF_CARE: Tuple[MetricDef, ...] = (
    MetricDef("adequate_sleep",  "Ausreichend Schlaf",       CATEGORICAL, True),
    MetricDef("healthy_eating",  "Gesunde Ernährung",        CATEGORICAL, True),
    MetricDef("sufficient_rest", "Ausreichend Erholung",     CATEGORICAL, True),
    MetricDef("exercise",        "Bewegung",                 CATEGORICAL, True),
    MetricDef("set_boundaries",  "Grenzen setzen",           CATEGORICAL, True),
    MetricDef("time_for_beauty", "Zeit für Schönes",         CATEGORICAL, True),
    MetricDef("share_emotions",  "Gefühle teilen",           CATEGORICAL, True),
    MetricDef("live_values",     "Werte leben",              CATEGORICAL, True),
)

# T4 uniquement : pas de comparaison possible, affichage seul
COACHING_EVALUATION: Tuple[MetricDef, ...] = (
    MetricDef("trust",                "Vertrauen",               CATEGORICAL, True),
    MetricDef("genuine_interest",     "Echtes Interesse",        CATEGORICAL, True),
    MetricDef("mutual_understanding", "Gegenseitiges Verständnis", CATEGORICAL, True),
    MetricDef("goal_alignment",       "Zielausrichtung",         CATEGORICAL, True),
    MetricDef("learning_experience",  "Lernerfahrung",           NUMERIC, True),
    MetricDef("progress_achievement", "Fortschritt",             NUMERIC, True),
    MetricDef("general_satisfaction", "Allgemeine Zufriedenheit", NUMERIC, True),
)

COMPARED_GROUPS = {
    "wellbeing":  (WELLBEING,),
    "burdens":    BURDENS,
    "life_areas": LIFE_AREAS,
    "self_care":  SELF_CARE,
}


def metric_value(record: Any, field: str) -> Any:
    """Lit un champ sur un dict, un dataclass ou un objet ORM. record None → None."""
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)
