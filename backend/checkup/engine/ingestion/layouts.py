# engine/ingestion/layouts.py
"""
Disposition des colonnes des trois onglets du tableur Checkup.

Les lignes arrivent de l'API Sheets comme des listes de chaînes dont la
position fait le sens. Chaque onglet a sa propre carte de colonnes :
T0 et T4 n'ont PAS le même layout (onglets de formulaires différents) :

    Auswertung (A:H)     client_id | chat_link | wb T0 | wb T4 | coach | statut | inscription | semaines
    Checkup T0 (A:X)     0-20 questionnaire | 21 user_id | 22 Submitted At
    Checkup T4 (A:AN)    0-20 questionnaire | 21-27 évaluation coaching | 28 user_id | 29 Submitted At

L'API tronque les cellules vides en fin de ligne : une ligne courte est
complétée à la largeur du layout, jamais rejetée.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List

from checkup.shared.enums import SheetKind


class RowShapeError(ValueError):
    """Ligne qui n'a pas la forme d'une ligne de tableur (pas une séquence)."""


# ── Auswertung ────────────────────────────────────────────────────────────────

OVERVIEW_CLIENT_ID = 0
OVERVIEW_CHAT_LINK = 1
OVERVIEW_WELLBEING_T0 = 2
OVERVIEW_WELLBEING_T4 = 3
OVERVIEW_COACH_NAME = 4
OVERVIEW_STATUS = 5
OVERVIEW_REGISTRATION_DATE = 6
OVERVIEW_WEEKS = 7


# ── Questionnaire commun T0 / T4 ──────────────────────────────────────────────

QUESTIONNAIRE_COLUMNS: Dict[str, int] = {
    "wellbeing":         0,
    "stress":            1,
    "exhaustion":        2,
    "anxiety":           3,
    "depression":        4,
    "self_doubt":        5,
    "sleep_problems":    6,
    "tension":           7,
    "irritability":      8,
    "social_withdrawal": 9,
    "other":             10,
    "work_area":         11,
    "private_area":      12,
    "adequate_sleep":    13,
    "healthy_eating":    14,
    "sufficient_rest":   15,
    "exercise":          16,
    "set_boundaries":    17,
    "time_for_beauty":   18,
    "share_emotions":    19,
    "live_values":       20,
}

# Évaluation du coaching : onglet T4 seulement
COACHING_COLUMNS: Dict[str, int] = {
    "trust":                21,
    "genuine_interest":     22,
    "mutual_understanding": 23,
    "goal_alignment":       24,
    "learning_experience":  25,
    "progress_achievement": 26,
    "general_satisfaction": 27,
}

NUMERIC_FIELDS: FrozenSet[str] = frozenset({
    "wellbeing",
    "work_area",
    "private_area",
    "learning_experience",
    "progress_achievement",
    "general_satisfaction",
})


@dataclass(frozen=True)
class SheetLayout:
    kind: SheetKind
    client_id: int
    width: int
    submitted_at: int = -1
    columns: Dict[str, int] = field(default_factory=dict)


OVERVIEW_LAYOUT = SheetLayout(
    kind=SheetKind.OVERVIEW,
    client_id=OVERVIEW_CLIENT_ID,
    width=8,
)

T0_LAYOUT = SheetLayout(
    kind=SheetKind.T0,
    client_id=21,
    submitted_at=22,
    width=24,
    columns=dict(QUESTIONNAIRE_COLUMNS),
)

T4_LAYOUT = SheetLayout(
    kind=SheetKind.T4,
    client_id=28,
    submitted_at=29,
    width=40,
    columns={**QUESTIONNAIRE_COLUMNS, **COACHING_COLUMNS},
)

LAYOUTS: Dict[SheetKind, SheetLayout] = {
    SheetKind.OVERVIEW: OVERVIEW_LAYOUT,
    SheetKind.T0: T0_LAYOUT,
    SheetKind.T4: T4_LAYOUT,
}


def check_row_shape(row: Any, layout: SheetLayout) -> List[str]:
    """
    Contrôle de forme à la frontière d'ingestion.

    Retourne la ligne en chaînes, complétée par "" jusqu'à layout.width.
    Lève RowShapeError si la ligne n'est pas une liste/tuple.
    """
    if not isinstance(row, (list, tuple)):
        raise RowShapeError(
            f"{layout.kind.value}: ligne de type {type(row).__name__}, liste attendue"
        )

    cells = ["" if cell is None else str(cell) for cell in row]
    if len(cells) < layout.width:
        cells.extend([""] * (layout.width - len(cells)))
    return cells
