# checkup/shared/models/Assessment.py
"""
Questionnaire Checkup à un timepoint donné.

Client ──< Assessment (0, 1 ou 2 lignes : T0 et/ou T4)

Échelles :
    wellbeing, work_area, private_area           → entier 0-10
    10 charges psychologiques (stress, ...)      → Gering | Mittel | Stark  (bas = mieux)
    8 habitudes d'autosoin (adequate_sleep, ...) → Selten | Mittel | Oft    (haut = mieux)
    Évaluation du coaching (T4 uniquement)       → 4 catégorielles + 3 notes 0-10
"""
from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from checkup.core.database import Base


class Assessment(Base):
    __tablename__ = "assessments"
    __table_args__ = (
        UniqueConstraint("client_id", "timepoint", name="uq_assessments_client_timepoint"),
    )

    id           = Column(Integer, primary_key=True, index=True)
    client_id    = Column(String,  nullable=False, index=True)
    timepoint    = Column(String,  nullable=False)          # "T0" | "T4"
    submitted_at = Column(DateTime(timezone=True), nullable=False)

    # Bien-être global
    wellbeing = Column(Integer, nullable=True)

    # Charges psychologiques
    stress            = Column(String, nullable=True)
    exhaustion        = Column(String, nullable=True)
    anxiety           = Column(String, nullable=True)
    depression        = Column(String, nullable=True)
    self_doubt        = Column(String, nullable=True)
    sleep_problems    = Column(String, nullable=True)
    tension           = Column(String, nullable=True)
    irritability      = Column(String, nullable=True)
    social_withdrawal = Column(String, nullable=True)
    other             = Column(String, nullable=True)

    # Domaines de vie
    work_area    = Column(Integer, nullable=True)
    private_area = Column(Integer, nullable=True)

    # Autosoin
    adequate_sleep  = Column(String, nullable=True)
    healthy_eating  = Column(String, nullable=True)
    sufficient_rest = Column(String, nullable=True)
    exercise        = Column(String, nullable=True)
    set_boundaries  = Column(String, nullable=True)
    time_for_beauty = Column(String, nullable=True)
    share_emotions  = Column(String, nullable=True)
    live_values     = Column(String, nullable=True)

    # Évaluation du coaching : NULL quand timepoint = T0
    trust                = Column(String,  nullable=True)
    genuine_interest     = Column(String,  nullable=True)
    mutual_understanding = Column(String,  nullable=True)
    goal_alignment       = Column(String,  nullable=True)
    learning_experience  = Column(Integer, nullable=True)
    progress_achievement = Column(Integer, nullable=True)
    general_satisfaction = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Assessment client={self.client_id} timepoint={self.timepoint}>"
