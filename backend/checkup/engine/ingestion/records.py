# engine/ingestion/records.py
"""
Enregistrements typés produits par le parser : pur Python, sans ORM.

    ClientOverview  ← une ligne "Auswertung"
    AssessmentData  ← une ligne T0 ou T4
    ClientRecord    ← overview + T0 optionnel + T4 optionnel (combiner)
"""
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, Optional

from checkup.shared.enums import Timepoint


@dataclass
class ClientOverview:
    client_id: str
    client_name: str
    coach_name: str
    status: str
    registration_date: datetime
    weeks: float
    chat_link: str
    wellbeing_t0_basic: Optional[int] = None
    wellbeing_t4_basic: Optional[int] = None

    def to_row(self) -> Dict:
        return asdict(self)


@dataclass
class AssessmentData:
    client_id: str
    timepoint: Timepoint
    submitted_at: datetime

    wellbeing: Optional[int] = None

    stress: Optional[str] = None
    exhaustion: Optional[str] = None
    anxiety: Optional[str] = None
    depression: Optional[str] = None
    self_doubt: Optional[str] = None
    sleep_problems: Optional[str] = None
    tension: Optional[str] = None
    irritability: Optional[str] = None
    social_withdrawal: Optional[str] = None
    other: Optional[str] = None

    work_area: Optional[int] = None
    private_area: Optional[int] = None

    adequate_sleep: Optional[str] = None
    healthy_eating: Optional[str] = None
    sufficient_rest: Optional[str] = None
    exercise: Optional[str] = None
    set_boundaries: Optional[str] = None
    time_for_beauty: Optional[str] = None
    share_emotions: Optional[str] = None
    live_values: Optional[str] = None

    # T4 uniquement
    trust: Optional[str] = None
    genuine_interest: Optional[str] = None
    mutual_understanding: Optional[str] = None
    goal_alignment: Optional[str] = None
    learning_experience: Optional[int] = None
    progress_achievement: Optional[int] = None
    general_satisfaction: Optional[int] = None

    def to_row(self) -> Dict:
        row = asdict(self)
        row["timepoint"] = self.timepoint.value
        return row


@dataclass
class ClientRecord:
    overview: ClientOverview
    assessment_t0: Optional[AssessmentData] = None
    assessment_t4: Optional[AssessmentData] = None

    @property
    def client_id(self) -> str:
        return self.overview.client_id
