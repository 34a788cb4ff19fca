# checkup/shared/models/Client.py
"""
Fiche client issue de l'onglet "Auswertung".

Possédée exclusivement par la sync : remplacée en bloc à chaque import,
jamais modifiée ailleurs.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from checkup.core.database import Base


class Client(Base):
    __tablename__ = "clients"
    id                 = Column(Integer, primary_key=True, index=True)
    client_id          = Column(String,  nullable=False, unique=True, index=True)
    client_name        = Column(String,  nullable=False)
    coach_name         = Column(String,  nullable=False, index=True)
    status             = Column(String,  nullable=False)    # texte libre : Aktiv | Beendet | Gelöscht | ...
    registration_date  = Column(DateTime(timezone=True), nullable=False)
    weeks              = Column(Float,   nullable=False, default=0.0)
    chat_link          = Column(String,  nullable=False, default="")
    wellbeing_t0_basic = Column(Integer, nullable=True)     # 0-10
    wellbeing_t4_basic = Column(Integer, nullable=True)     # 0-10
    created_at         = Column(DateTime(timezone=True), server_default=func.now())

    # Pas de FK dure : les assessments orphelins sont tolérés
    assessments = relationship(
        "Assessment",
        primaryjoin="Client.client_id == foreign(Assessment.client_id)",
        order_by="Assessment.timepoint",
        viewonly=True,
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Client client_id={self.client_id} coach={self.coach_name}>"
