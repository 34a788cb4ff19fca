# engine/comparison/report.py
"""
Rapport de comparaison T0/T4 complet pour la fiche client.

Assemble, sans jamais toucher la DB :
    summary   → résumés par groupe + score global (summary.py)
    radar     → séries normalisées 0-10 (radar.py)
    metrics   → une ligne par métrique comparée, groupée
    coaching  → évaluation du coaching (T4 seul, pas de comparaison)

Pour une métrique catégorielle, la variation brute se calcule sur les
rangs (Gering=1 … Stark=3) ; elle n'est pas orientée : c'est
is_positive qui dit si la hausse est une amélioration.
"""
from typing import Any, Dict, List, Optional

from checkup.engine.comparison.categories import category_rank
from checkup.engine.comparison.change import (
    calculate_categorical_change,
    calculate_change,
    calculate_numeric_change,
    change_indicator,
    comparison_summary,
)
from checkup.engine.comparison.metrics import (
    COACHING_EVALUATION,
    COMPARED_GROUPS,
    NUMERIC,
    MetricDef,
    metric_value,
)
from checkup.engine.comparison.radar import prepare_radar_chart_data
from checkup.engine.comparison.summary import build_assessment_summary


def _numeric_repr(value: Any, metric: MetricDef) -> Optional[float]:
    """Valeur numérique comparable : la note elle-même, ou le rang (None si 0)."""
    if value is None:
        return None
    if metric.kind == NUMERIC:
        return value
    rank = category_rank(value)
    return rank or None


def compare_metric(t0: Any, t4: Any, metric: MetricDef) -> Dict:
    t0_value = metric_value(t0, metric.field)
    t4_value = metric_value(t4, metric.field)
    t0_num = _numeric_repr(t0_value, metric)
    t4_num = _numeric_repr(t4_value, metric)

    if metric.kind == NUMERIC:
        percentage = calculate_numeric_change(t0_value, t4_value)
    else:
        percentage = calculate_categorical_change(t0_value, t4_value, metric.is_positive)

    change = calculate_change(t0_num, t4_num)
    return {
        "field": metric.field,
        "label": metric.label,
        "is_positive": metric.is_positive,
        "t0": t0_value,
        "t4": t4_value,
        "change": change,
        "percentage_change": percentage,
        "indicator": change_indicator(change),
        "summary": comparison_summary(t0_num, t4_num, metric.is_positive),
    }


def build_comparison_report(t0: Any, t4: Any) -> Dict:
    metrics: Dict[str, List[Dict]] = {
        group: [compare_metric(t0, t4, m) for m in defs]
        for group, defs in COMPARED_GROUPS.items()
    }

    coaching = [
        {"field": m.field, "label": m.label, "value": metric_value(t4, m.field)}
        for m in COACHING_EVALUATION
    ] if t4 is not None else []

    return {
        "has_t0": t0 is not None,
        "has_t4": t4 is not None,
        "summary": build_assessment_summary(t0, t4),
        "radar": prepare_radar_chart_data(t0, t4),
        "metrics": metrics,
        "coaching_evaluation": coaching,
    }
