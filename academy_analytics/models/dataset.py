"""
Dataset Snapshot

Read-only snapshot of every record an analytics query needs. Callers fetch
and authorize the data, build a Dataset once, and pass it explicitly to the
processors. Invariants that span collections are checked here so the
calculators can rely on them.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, model_validator

from academy_analytics.models.match import Match, MatchSelection
from academy_analytics.models.player import (
    Centre,
    Coach,
    PathwayLevel,
    Player,
    Squad,
)
from academy_analytics.models.session import AttendanceRecord, Session
from academy_analytics.models.wellness import Feedback, WellnessEntry


class EntityNotFoundError(ValueError):
    """A required root entity id does not resolve in the dataset."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


def _duplicates(pairs: list[tuple[str, str]]) -> list[tuple[str, str]]:
    return [pair for pair, count in Counter(pairs).items() if count > 1]


class Dataset(BaseModel):
    """Complete academy snapshot for one query."""

    model_config = ConfigDict(frozen=True)

    centres: list[Centre] = Field(default_factory=list)
    squads: list[Squad] = Field(default_factory=list)
    pathway_levels: list[PathwayLevel] = Field(default_factory=list)
    coaches: list[Coach] = Field(default_factory=list)
    players: list[Player] = Field(default_factory=list)
    sessions: list[Session] = Field(default_factory=list)
    attendance: list[AttendanceRecord] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)
    selections: list[MatchSelection] = Field(default_factory=list)
    wellness: list[WellnessEntry] = Field(default_factory=list)
    feedback: list[Feedback] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_invariants(self) -> Dataset:
        duplicate_marks = _duplicates(
            [(r.session_id, r.player_id) for r in self.attendance]
        )
        if duplicate_marks:
            raise ValueError(
                f"Duplicate attendance records for (session, player): {duplicate_marks}"
            )

        duplicate_picks = _duplicates(
            [(s.match_id, s.player_id) for s in self.selections]
        )
        if duplicate_picks:
            raise ValueError(
                f"Duplicate match selections for (match, player): {duplicate_picks}"
            )

        orders = [level.order for level in self.pathway_levels]
        if len(orders) != len(set(orders)):
            raise ValueError(f"Pathway level orders must be unique, got {orders}")
        return self

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_player(self, player_id: str) -> Player:
        """Return the player or raise EntityNotFoundError."""
        for player in self.players:
            if player.id == player_id:
                return player
        raise EntityNotFoundError("Player", player_id)

    def get_coach(self, coach_id: str) -> Coach:
        """Return the coach or raise EntityNotFoundError."""
        for coach in self.coaches:
            if coach.id == coach_id:
                return coach
        raise EntityNotFoundError("Coach", coach_id)

    def find_squad(self, squad_id: str | None) -> Squad | None:
        return next((s for s in self.squads if s.id == squad_id), None)

    def find_centre(self, centre_id: str | None) -> Centre | None:
        return next((c for c in self.centres if c.id == centre_id), None)

    def find_pathway_level(self, level_id: str | None) -> PathwayLevel | None:
        return next((lvl for lvl in self.pathway_levels if lvl.id == level_id), None)

    def next_pathway_level(self, level: PathwayLevel | None) -> PathwayLevel | None:
        """Level whose order is exactly one above ``level`` (order 0 if None)."""
        target = (level.order if level else 0) + 1
        return next((lvl for lvl in self.pathway_levels if lvl.order == target), None)

    def squad_name(self, squad_id: str | None) -> str:
        squad = self.find_squad(squad_id)
        return squad.name if squad else ""

    def active_players(self) -> list[Player]:
        return [p for p in self.players if p.is_active]
