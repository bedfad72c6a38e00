"""
Wellness and Feedback Data Models

Self-reported wellness check-ins and monthly coach feedback.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from academy_analytics.models.timestamps import UtcDatetime


class EnergyLevel(str, Enum):
    """Self-reported energy state."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class FeedbackStatus(str, Enum):
    """Feedback publication state."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class WellnessEntry(BaseModel):
    """A player's post-session or daily wellness check-in."""

    model_config = ConfigDict(frozen=True)

    id: str
    player_id: str
    date: UtcDatetime
    session_id: str | None = None
    exertion: int = Field(ge=1, le=5)  # RPE-style, 1 (easy) to 5 (maximal)
    energy: EnergyLevel
    note: str = ""


class Feedback(BaseModel):
    """Monthly coach feedback for a player."""

    model_config = ConfigDict(frozen=True)

    id: str
    player_id: str
    coach_id: str
    month: int = Field(ge=1, le=12)
    year: int
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    focus_goal: str = ""
    overall_note: str = ""
    status: FeedbackStatus = FeedbackStatus.DRAFT
    created_at: UtcDatetime
    updated_at: UtcDatetime | None = None

    @property
    def is_published(self) -> bool:
        return self.status == FeedbackStatus.PUBLISHED
