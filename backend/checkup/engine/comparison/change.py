# engine/comparison/change.py
"""
Calcul des évolutions T0 → T4 pour une métrique isolée.

Convention de signe :
    Les variations en pourcentage sont orientées "amélioration" :
    une baisse d'une charge (Stark → Gering) sort POSITIVE.
    Les variations brutes (t4 - t0) ne sont jamais inversées : c'est
    l'affichage qui interprète leur sens via is_positive_metric.
"""
from typing import Optional, Union

from checkup.engine.comparison.categories import category_rank

Number = Union[int, float]

# Indicateurs de direction pour l'affichage
INDICATOR_UP   = "↑"
INDICATOR_DOWN = "↓"
INDICATOR_FLAT = "→"


# ── Variations en pourcentage ─────────────────────────────────────────────────

def calculate_numeric_change(t0: Optional[Number], t4: Optional[Number]) -> Optional[float]:
    """
    Variation en % pour une note 0-10.
    t0 = 0 : pas de division : 0 % si t4 = 0, sinon 100 %.
    """
    if t0 is None or t4 is None:
        return None
    if t0 == 0:
        return 0.0 if t4 == 0 else 100.0
    return (t4 - t0) / t0 * 100


def calculate_categorical_change(
    t0: Optional[str],
    t4: Optional[str],
    is_positive_metric: bool = True,
) -> Optional[float]:
    """
    Variation en % entre deux libellés catégoriels.
    Un libellé absent ou inconnu (rang 0) rend la variation indéfinie.
    """
    if not t0 or not t4:
        return None

    t0_rank = category_rank(t0)
    t4_rank = category_rank(t4)
    if t0_rank == 0 or t4_rank == 0:
        return None

    change = (t4_rank - t0_rank) / t0_rank * 100

    # Charges : une baisse de sévérité est une amélioration
    return change if is_positive_metric else -change


def calculate_percentage_change(t0: Optional[Number], t4: Optional[Number]) -> Optional[float]:
    """Variante affichage : indéfinie dès que t0 = 0 (pas de convention 100 %)."""
    if t0 is None or t4 is None or t0 == 0:
        return None
    return (t4 - t0) / t0 * 100


# ── Variation brute & affichage ───────────────────────────────────────────────

def calculate_change(t0: Optional[Number], t4: Optional[Number]) -> Optional[Number]:
    """Différence brute t4 - t0, None si une des deux valeurs manque."""
    if t0 is None or t4 is None:
        return None
    return t4 - t0


def change_indicator(change: Optional[Number]) -> str:
    """Flèche de direction. Zéro (ou absent) → indicateur neutre."""
    if not change:
        return INDICATOR_FLAT
    return INDICATOR_UP if change > 0 else INDICATOR_DOWN


def is_improvement(change: Number, is_positive_metric: bool = True) -> bool:
    if change == 0:
        return False
    return change > 0 if is_positive_metric else change < 0


def comparison_summary(
    t0: Optional[Number],
    t4: Optional[Number],
    is_positive_metric: bool = True,
) -> str:
    """Phrase courte affichée sous chaque métrique de la fiche client."""
    if t0 is None and t4 is None:
        return "Keine Daten verfügbar"
    if t0 is None:
        return "Nur T4 Daten verfügbar"
    if t4 is None:
        return "Nur T0 Daten verfügbar"

    change = t4 - t0
    if change == 0:
        return "Keine Veränderung"

    magnitude = f"{abs(change):.1f}"
    if is_improvement(change, is_positive_metric):
        return f"Verbesserung um {magnitude}"
    return f"Verschlechterung um {magnitude}"
