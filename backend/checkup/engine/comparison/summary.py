# engine/comparison/summary.py
"""
Résumés d'évolution T0 → T4 par groupe de métriques.

Classification d'une variation (en %, orientée amélioration) :
    > +1 %  → improved
    < -1 %  → worsened
    sinon   → unchanged   (la bande ±1 % absorbe le bruit flottant)

Invariant : improved + worsened + unchanged == total, où total compte
les paires dont la variation est définie.

Score global : moyenne NON pondérée des quatre groupes (bien-être,
charges, domaines de vie, autosoin). Les 10 charges ne pèsent pas plus
que l'unique note de bien-être.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from checkup.engine.comparison.change import (
    calculate_categorical_change,
    calculate_numeric_change,
)
from checkup.engine.comparison.metrics import (
    BURDENS,
    LIFE_AREAS,
    SELF_CARE,
    metric_value,
)

IMPROVEMENT_THRESHOLD = 1.0


@dataclass
class CategorySummary:
    avg_change: float = 0.0
    improved: int = 0
    worsened: int = 0
    unchanged: int = 0
    total: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class MetricPair:
    t0: Any
    t4: Any
    is_positive_metric: bool = True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def pair_change(pair: Any) -> Optional[float]:
    """Variation d'une paire : numérique si deux nombres, catégorielle si deux libellés."""
    t0 = metric_value(pair, "t0")
    t4 = metric_value(pair, "t4")
    is_positive = metric_value(pair, "is_positive_metric")
    if is_positive is None:
        is_positive = True

    if _is_number(t0) and _is_number(t4):
        return calculate_numeric_change(t0, t4)
    if isinstance(t0, str) and isinstance(t4, str):
        return calculate_categorical_change(t0, t4, is_positive)
    return None


def _classify(summary: CategorySummary, change: float) -> None:
    if change > IMPROVEMENT_THRESHOLD:
        summary.improved += 1
    elif change < -IMPROVEMENT_THRESHOLD:
        summary.worsened += 1
    else:
        summary.unchanged += 1


def calculate_category_average(values: Iterable[Any]) -> CategorySummary:
    """
    Agrège une collection de paires (MetricPair ou dict t0/t4/is_positive_metric).
    Les paires indéfinies sont ignorées ; liste vide → résumé à zéro.
    """
    summary = CategorySummary()
    changes = []

    for pair in values:
        change = pair_change(pair)
        if change is None:
            continue
        changes.append(change)
        _classify(summary, change)

    summary.total = len(changes)
    summary.avg_change = sum(changes) / len(changes) if changes else 0.0
    return summary


def _group_pairs(t0: Any, t4: Any, metrics) -> list:
    return [
        MetricPair(
            t0=metric_value(t0, m.field),
            t4=metric_value(t4, m.field),
            is_positive_metric=m.is_positive,
        )
        for m in metrics
    ]


# ── Résumés par groupe ────────────────────────────────────────────────────────

def calculate_wellbeing_summary(
    t0_wellbeing: Optional[float],
    t4_wellbeing: Optional[float],
) -> CategorySummary:
    change = calculate_numeric_change(t0_wellbeing, t4_wellbeing)
    summary = CategorySummary()
    if change is None:
        return summary

    summary.avg_change = change
    summary.total = 1
    _classify(summary, change)
    return summary


def calculate_burdens_summary(t0: Any, t4: Any) -> CategorySummary:
    return calculate_category_average(_group_pairs(t0, t4, BURDENS))


def calculate_life_areas_summary(t0: Any, t4: Any) -> CategorySummary:
    return calculate_category_average(_group_pairs(t0, t4, LIFE_AREAS))


def calculate_self_care_summary(t0: Any, t4: Any) -> CategorySummary:
    return calculate_category_average(_group_pairs(t0, t4, SELF_CARE))


def calculate_overall_improvement(t0: Any, t4: Any) -> float:
    """Moyenne des quatre groupes. 0 si l'un des deux assessments manque."""
    if t0 is None or t4 is None:
        return 0.0

    groups = (
        calculate_wellbeing_summary(metric_value(t0, "wellbeing"), metric_value(t4, "wellbeing")),
        calculate_burdens_summary(t0, t4),
        calculate_life_areas_summary(t0, t4),
        calculate_self_care_summary(t0, t4),
    )
    return sum(g.avg_change for g in groups) / len(groups)


def build_assessment_summary(t0: Any, t4: Any) -> Dict:
    """Bloc "résumé" complet de la fiche client."""
    return {
        "overall_improvement": calculate_overall_improvement(t0, t4),
        "wellbeing": calculate_wellbeing_summary(
            metric_value(t0, "wellbeing"), metric_value(t4, "wellbeing")
        ).to_dict(),
        "burdens":    calculate_burdens_summary(t0, t4).to_dict(),
        "life_areas": calculate_life_areas_summary(t0, t4).to_dict(),
        "self_care":  calculate_self_care_summary(t0, t4).to_dict(),
    }
