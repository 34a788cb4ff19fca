"""
Toutes les énumérations du projet Checkup.

Source unique de vérité pour les timepoints, statuts et états de sync.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum


class Timepoint(str, Enum):
    T0 = "T0"   # Baseline : début du coaching
    T4 = "T4"   # Suivi : 4 semaines plus tard


class ClientStatus(str, Enum):
    """
    Statuts connus du tableur. La colonne reste du texte libre en base :
    une valeur inconnue est conservée telle quelle.
    """
    ACTIVE  = "Aktiv"
    ENDED   = "Beendet"
    DELETED = "Gelöscht"
    UNKNOWN = "Unbekannt"


class SheetKind(str, Enum):
    OVERVIEW = "overview"   # Onglet "Auswertung"
    T0       = "T0"         # Onglet "InApp_AllyTime Checkup T0"
    T4       = "T4"         # Onglet "InApp_AllyTime Checkup T4"


class SyncState(str, Enum):
    FETCHING     = "fetching"
    TRANSFORMING = "transforming"
    REPLACING    = "replacing"
    DONE         = "done"
    FAILED       = "failed"
