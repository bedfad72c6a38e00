"""
Match Data Model

Fixtures and the per-player selection decisions made for them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from academy_analytics.models.timestamps import UtcDatetime

# Competition names may carry the opponent after an en dash,
# e.g. "Youth League – FC Bengaluru".
COMPETITION_SEPARATOR = "–"


class SelectionStatus(str, Enum):
    """Whether a player was picked for a match."""

    SELECTED = "SELECTED"
    NOT_SELECTED = "NOT_SELECTED"


class ReasonCategory(str, Enum):
    """Why a selection decision was made."""

    SQUAD_ROTATION = "SQUAD_ROTATION"
    TACTICAL = "TACTICAL"
    DISCIPLINE = "DISCIPLINE"
    OTHER = "OTHER"


class Match(BaseModel):
    """A fixture played by a squad."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: UtcDatetime
    competition_name: str = ""
    squad_id: str | None = None
    centre_id: str | None = None

    @property
    def competition(self) -> str:
        """Competition part of the fixture name."""
        head = self.competition_name.split(COMPETITION_SEPARATOR)[0].strip()
        return head or self.competition_name

    @property
    def opponent(self) -> str:
        """Opponent part of the fixture name, "TBD" when not given."""
        parts = self.competition_name.split(COMPETITION_SEPARATOR)
        if len(parts) < 2 or not parts[1].strip():
            return "TBD"
        return parts[1].strip()


class MatchSelection(BaseModel):
    """Selection decision for a (match, player) pair."""

    model_config = ConfigDict(frozen=True)

    id: str
    match_id: str
    player_id: str
    status: SelectionStatus
    reason_category: ReasonCategory | None = None

    @property
    def is_selected(self) -> bool:
        return self.status == SelectionStatus.SELECTED
