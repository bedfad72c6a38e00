"""
Player Data Model

Pydantic models for players and the academy structures they belong to:
centres, squads, coaches and pathway levels.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from academy_analytics.models.timestamps import UtcDatetime


class PlayerStatus(str, Enum):
    """Player membership status."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Centre(BaseModel):
    """A training centre."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    short_name: str = ""
    city: str = ""


class Squad(BaseModel):
    """A squad / age group, tagged with its coarse competitive tier."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    level_key: str = ""


class Coach(BaseModel):
    """A coach and the centres they work at."""

    model_config = ConfigDict(frozen=True)

    id: str
    full_name: str
    centre_ids: list[str] = Field(default_factory=list)


class PromotionCriteria(BaseModel):
    """Requirements a player must meet to move past a pathway level."""

    model_config = ConfigDict(frozen=True)

    min_attendance_rate: int | None = None
    min_tenure_months: int | None = None
    min_matches: int | None = None
    coach_recommendation_required: bool = False


class PathwayLevel(BaseModel):
    """
    Ordinal competitive tier.

    Levels are ordered by ``order``; the next level up is the one whose
    order is exactly one greater.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    key: str = ""
    name: str
    order: int
    description: str = ""
    criteria: PromotionCriteria = Field(default_factory=PromotionCriteria)


class Player(BaseModel):
    """
    Academy player.

    ``exited_at`` is only meaningful for inactive players; an active player
    carrying an exit date is rejected.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    full_name: str
    centre_id: str | None = None
    squad_id: str | None = None
    pathway_level_id: str | None = None
    date_of_birth: UtcDatetime | None = None
    joined_at: UtcDatetime | None = None
    exited_at: UtcDatetime | None = None
    status: PlayerStatus = PlayerStatus.ACTIVE

    @model_validator(mode="after")
    def _check_exit_date(self) -> "Player":
        if self.status == PlayerStatus.ACTIVE and self.exited_at is not None:
            raise ValueError(f"Active player {self.id} cannot have an exit date")
        return self

    @property
    def is_active(self) -> bool:
        """Check if the player is currently active."""
        return self.status == PlayerStatus.ACTIVE
