"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from checkup.shared.models import Client, Assessment

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (Alembic, create_all).
"""

from checkup.shared.models.Client     import Client
from checkup.shared.models.Assessment import Assessment

__all__ = [
    "Client",
    "Assessment",
]
