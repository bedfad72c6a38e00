"""
Session Data Model

Training sessions and the attendance recorded against them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from academy_analytics.models.timestamps import UtcDatetime


class SessionType(str, Enum):
    """Kind of scheduled session."""

    TRAINING = "TRAINING"
    MATCH_PREP = "MATCH_PREP"
    FITNESS = "FITNESS"
    OTHER = "OTHER"


class AttendanceStatus(str, Enum):
    """Attendance outcome for one player at one session."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class Session(BaseModel):
    """One schedulable unit against which attendance is measured."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: UtcDatetime
    centre_id: str | None = None
    squad_id: str | None = None
    coach_id: str | None = None
    type: SessionType = SessionType.TRAINING


class AttendanceRecord(BaseModel):
    """Attendance mark for a (session, player) pair."""

    model_config = ConfigDict(frozen=True)

    id: str
    session_id: str
    player_id: str
    status: AttendanceStatus
    recorded_at: UtcDatetime | None = None

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT
