# checkup/modules/client/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Dict, Union
from datetime import datetime


# ── Fiche client ───────────────────────────────────────────

class ClientOut(BaseModel):
    client_id: str
    client_name: str
    coach_name: str
    status: str
    registration_date: datetime
    weeks: float
    chat_link: str
    wellbeing_t0_basic: Optional[int] = None
    wellbeing_t4_basic: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)


class AssessmentOut(BaseModel):
    client_id: str
    timepoint: str                  # "T0" | "T4"
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

    trust: Optional[str] = None
    genuine_interest: Optional[str] = None
    mutual_understanding: Optional[str] = None
    goal_alignment: Optional[str] = None
    learning_experience: Optional[int] = None
    progress_achievement: Optional[int] = None
    general_satisfaction: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)


class ClientDetailOut(BaseModel):
    client: ClientOut
    assessments: List[AssessmentOut]
    model_config = ConfigDict(from_attributes=True)


# ── Comparaison T0 / T4 ────────────────────────────────────

class CategorySummaryOut(BaseModel):
    avg_change: float
    improved: int
    worsened: int
    unchanged: int
    total: int


class AssessmentSummaryOut(BaseModel):
    overall_improvement: float
    wellbeing: CategorySummaryOut
    burdens: CategorySummaryOut
    life_areas: CategorySummaryOut
    self_care: CategorySummaryOut


class RadarOut(BaseModel):
    labels: List[str]
    t0_data: List[float]
    t4_data: List[float]


class MetricComparisonOut(BaseModel):
    field: str
    label: str
    is_positive: bool
    t0: Optional[Union[int, str]] = None
    t4: Optional[Union[int, str]] = None
    change: Optional[float] = None
    percentage_change: Optional[float] = None
    indicator: str                  # "↑" | "↓" | "→"
    summary: str


class CoachingItemOut(BaseModel):
    field: str
    label: str
    value: Optional[Union[int, str]] = None


class ComparisonOut(BaseModel):
    client_id: str
    has_t0: bool
    has_t4: bool
    summary: AssessmentSummaryOut
    radar: RadarOut
    metrics: Dict[str, List[MetricComparisonOut]]
    coaching_evaluation: List[CoachingItemOut]
