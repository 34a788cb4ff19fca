# checkup/modules/sync/schemas.py
from pydantic import BaseModel
from typing import Optional


class SyncStatsOut(BaseModel):
    fetch_duration: int
    delete_duration: int
    insert_duration: int
    total_duration: int


class SyncResultOut(BaseModel):
    success: bool
    clients_created: int
    assessments_created: int
    total_clients: int
    duration: int                   # ms
    error: Optional[str] = None
    state: str                      # "done" | "failed"
    date_fallbacks: int = 0         # dates illisibles remplacées par "maintenant"
    stats: SyncStatsOut


class SyncErrorOut(BaseModel):
    error: str
    details: Optional[str] = None
