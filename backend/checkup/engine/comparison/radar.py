# engine/comparison/radar.py
"""
Projection des métriques sur un axe commun 0-10 pour le radar T0/T4.

    Numérique (0-10)  → inchangé
    Charge            → Gering(1)=10, Mittel(2)=5, Stark(3)=0
    Positive          → Selten(1)=3.33, Mittel(2)=6.67, Oft(3)=10
    Absent            → 0

Le radar garde huit axes : bien-être, quatre charges principales,
deux domaines de vie et un axe autosoin (moyenne des 8 habitudes).
"""
from typing import Any, Dict, List, Optional, Union

from checkup.engine.comparison.categories import category_rank
from checkup.engine.comparison.metrics import (
    BURDENS,
    LIFE_AREAS,
    SELF_CARE,
    WELLBEING,
    metric_value,
)

RADAR_MAX = 10.0
BURDEN_STEP = 5.0

# Charges affichées sur le radar (les 6 autres restent dans le résumé)
RADAR_BURDENS = tuple(m for m in BURDENS if m.field in ("stress", "exhaustion", "anxiety", "depression"))
SELF_CARE_LABEL = "Selbstfürsorge"


def normalize_for_radar(value: Optional[Union[int, float, str]], is_positive_metric: bool = True) -> float:
    if value is None:
        return 0.0

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    rank = category_rank(value)
    if rank == 0:
        return 0.0

    if not is_positive_metric:
        return RADAR_MAX - (rank - 1) * BURDEN_STEP
    return rank / 3 * RADAR_MAX


def self_care_axis(record: Any) -> float:
    """Moyenne des huit habitudes normalisées. Pas d'assessment → 0."""
    if record is None:
        return 0.0
    values = [normalize_for_radar(metric_value(record, m.field), True) for m in SELF_CARE]
    return sum(values) / len(values)


def radar_labels() -> List[str]:
    return (
        [WELLBEING.label]
        + [f"{m.label} (↓)" for m in RADAR_BURDENS]
        + [m.label for m in LIFE_AREAS]
        + [SELF_CARE_LABEL]
    )


def _radar_series(record: Any) -> List[float]:
    if record is None:
        return [0.0] * len(radar_labels())

    series = [normalize_for_radar(metric_value(record, WELLBEING.field), True)]
    series += [normalize_for_radar(metric_value(record, m.field), False) for m in RADAR_BURDENS]
    series += [normalize_for_radar(metric_value(record, m.field), True) for m in LIFE_AREAS]
    series.append(self_care_axis(record))
    return series


def prepare_radar_chart_data(t0: Any, t4: Any) -> Dict[str, List]:
    """Séries T0/T4 alignées sur les mêmes libellés. Aucun assessment → listes vides."""
    if t0 is None and t4 is None:
        return {"labels": [], "t0_data": [], "t4_data": []}

    return {
        "labels": radar_labels(),
        "t0_data": _radar_series(t0),
        "t4_data": _radar_series(t4),
    }
