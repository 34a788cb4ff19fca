# engine/comparison/categories.py
"""
Conversion des libellés catégoriels du Checkup en rangs numériques.

Deux échelles ordinales partagent la même plage 1-3 :
    Charges     : Gering(1) < Mittel(2) < Stark(3)   : bas = mieux
    Autosoin    : Selten(1) < Mittel(2) < Oft(3)     : haut = mieux

Le rang ne porte PAS le sens de l'échelle : les appelants passent
is_positive_metric pour l'indiquer.
"""
from typing import Dict, Optional

CATEGORY_RANKS: Dict[str, int] = {
    "gering": 1,
    "selten": 1,
    "mittel": 2,
    "stark":  3,
    "oft":    3,
}

CATEGORY_LABELS: Dict[int, str] = {
    1: "Gering/Selten",
    2: "Mittel",
    3: "Stark/Oft",
}
NO_ANSWER_LABEL = "Keine Angabe"

BURDEN_LABELS = ("Gering", "Mittel", "Stark")
SELF_CARE_LABELS = ("Selten", "Mittel", "Oft")


def category_rank(label: Optional[str]) -> int:
    """Libellé → rang 1-3. Absent, vide ou inconnu → 0."""
    if not label:
        return 0
    return CATEGORY_RANKS.get(label.strip().lower(), 0)


def category_label(rank: int) -> str:
    """Rang → libellé d'affichage. Perd l'échelle d'origine (1 = Gering ou Selten)."""
    return CATEGORY_LABELS.get(rank, NO_ANSWER_LABEL)
