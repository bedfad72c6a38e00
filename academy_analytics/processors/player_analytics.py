"""
Player Analytics Builder

Assembles one player's analytics snapshot from the leaf calculators:
attendance and consistency, match exposure, wellness, recent match
history, readiness and pathway progression.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any

from loguru import logger

from academy_analytics.analytics.rates import (
    AttendanceLabel,
    calculate_attendance_rate,
    calculate_match_exposure,
)
from academy_analytics.analytics.streaks import longest_attendance_streak
from academy_analytics.analytics.wellness import summarize_wellness
from academy_analytics.analytics.windows import Granularity, in_range, trailing_window
from academy_analytics.config import AnalyticsConfig, ReadinessThresholds
from academy_analytics.models.dataset import Dataset
from academy_analytics.models.filters import AnalyticsFilters
from academy_analytics.models.match import ReasonCategory, SelectionStatus
from academy_analytics.models.player import PathwayLevel, Player
from academy_analytics.models.timestamps import to_naive_utc, utc_now
from academy_analytics.processors.admin_analytics import (
    AdminAnalyticsProcessor,
    AttendancePoint,
)


class ReadinessLabel(str, Enum):
    """Coarse readiness for the next pathway level."""

    ON_TRACK = "On Track"
    NEARLY_THERE = "Nearly There"
    NEEDS_FOCUS = "Needs Focus"


@dataclass(frozen=True)
class RecentMatch:
    """A squad fixture annotated with the player's selection outcome."""

    match_id: str
    match_date: str
    competition: str
    opponent: str
    status: SelectionStatus
    reason: ReasonCategory | None = None


@dataclass(frozen=True)
class WellnessPoint:
    """One wellness check-in, trimmed for charting."""

    date: str
    exertion: int
    energy: str


@dataclass(frozen=True)
class PathwayProgress:
    """Current level, next level and the current level's criteria."""

    current_level: str | None = None
    next_level: str | None = None
    attendance_requirement: str | None = None
    min_tenure_months: int | None = None
    min_matches: int | None = None
    coach_recommendation_required: bool = False


@dataclass
class PlayerAnalytics:
    """Complete analytics snapshot for one player."""

    player_id: str
    player_name: str
    squad_name: str

    # Attendance and consistency
    attendance_rate: int
    attendance_label: AttendanceLabel
    sessions_attended_30_days: int
    longest_streak: int
    attendance_target: int

    # Match exposure
    total_matches: int
    selected_matches: int
    exposure_rate: int

    # Wellness
    avg_exertion: float
    avg_energy: str

    readiness_label: ReadinessLabel
    pathway: PathwayProgress

    published_feedback_count: int = 0
    last_feedback_at: datetime | None = None

    recent_matches: list[RecentMatch] = field(default_factory=list)
    weekly_attendance: list[AttendancePoint] = field(default_factory=list)
    wellness_entries: list[WellnessPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return asdict(self)


def readiness_label(
    attendance_rate: int,
    exposure_rate: int,
    thresholds: ReadinessThresholds | None = None,
) -> ReadinessLabel:
    """Threshold rule combining attendance and match exposure."""
    thresholds = thresholds or ReadinessThresholds()
    if (
        attendance_rate >= thresholds.on_track_attendance
        and exposure_rate >= thresholds.on_track_exposure
    ):
        return ReadinessLabel.ON_TRACK
    if attendance_rate >= thresholds.nearly_there_attendance:
        return ReadinessLabel.NEARLY_THERE
    return ReadinessLabel.NEEDS_FOCUS


class PlayerAnalyticsBuilder:
    """
    Builds PlayerAnalytics snapshots from a dataset.

    Usage:
        builder = PlayerAnalyticsBuilder(dataset)
        snapshot = builder.build("player-1", AnalyticsFilters(date_range=rng))
    """

    def __init__(self, dataset: Dataset, config: AnalyticsConfig | None = None) -> None:
        self.dataset = dataset
        self.config = config or AnalyticsConfig()
        self._admin = AdminAnalyticsProcessor(dataset, self.config)

    def build(
        self,
        player_id: str,
        filters: AnalyticsFilters | None = None,
        now: datetime | None = None,
    ) -> PlayerAnalytics:
        """
        Build the analytics snapshot for a player.

        Args:
            player_id: Player to analyse
            filters: Only ``date_range`` applies to the player view
            now: Reference time for now-relative windows

        Returns:
            PlayerAnalytics

        Raises:
            EntityNotFoundError: If the player does not exist
        """
        player = self.dataset.get_player(player_id)
        filters = filters or AnalyticsFilters()
        date_range = filters.date_range
        now = to_naive_utc(now) if now else utc_now()
        data = self.dataset

        attendance = calculate_attendance_rate(
            player.id, data.sessions, data.attendance, date_range, self.config.attendance
        )
        exposure = calculate_match_exposure(
            player.id, player.squad_id, data.matches, data.selections, date_range
        )
        wellness = summarize_wellness(player.id, data.wellness, date_range)

        published = sorted(
            (f for f in data.feedback if f.player_id == player.id and f.is_published),
            key=lambda f: f.created_at,
            reverse=True,
        )

        snapshot = PlayerAnalytics(
            player_id=player.id,
            player_name=player.full_name,
            squad_name=data.squad_name(player.squad_id),
            attendance_rate=attendance.rate,
            attendance_label=attendance.label,
            sessions_attended_30_days=self._sessions_attended_recently(player, now),
            longest_streak=longest_attendance_streak(player.id, data.sessions, data.attendance),
            attendance_target=self.config.player.attendance_target,
            total_matches=exposure.available,
            selected_matches=exposure.selected,
            exposure_rate=exposure.exposure_rate,
            avg_exertion=wellness.avg_exertion,
            avg_energy=wellness.avg_energy,
            readiness_label=readiness_label(
                attendance.rate, exposure.exposure_rate, self.config.readiness
            ),
            pathway=self._pathway_progress(player),
            published_feedback_count=len(published),
            last_feedback_at=published[0].created_at if published else None,
            recent_matches=self._recent_matches(player),
            weekly_attendance=self._admin.attendance_over_time(
                AnalyticsFilters(date_range=date_range, player_id=player.id),
                Granularity.WEEK,
            ),
            wellness_entries=[
                WellnessPoint(
                    date=w.date.date().isoformat(),
                    exertion=w.exertion,
                    energy=w.energy.value,
                )
                for w in data.wellness
                if w.player_id == player.id and in_range(w.date, date_range)
            ],
        )

        logger.debug(
            f"Built analytics for {player.id}: attendance {snapshot.attendance_rate}% "
            f"({snapshot.attendance_label.value}), exposure {snapshot.exposure_rate}%, "
            f"readiness {snapshot.readiness_label.value}"
        )
        return snapshot

    def _sessions_attended_recently(self, player: Player, now: datetime) -> int:
        """PRESENT marks in the trailing window, regardless of caller range."""
        window = trailing_window(now, self.config.player.trailing_days)
        session_ids = {s.id for s in self.dataset.sessions if in_range(s.date, window)}
        return sum(
            1
            for r in self.dataset.attendance
            if r.player_id == player.id and r.session_id in session_ids and r.is_present
        )

    def _recent_matches(self, player: Player) -> list[RecentMatch]:
        """Most recent squad fixtures, newest first."""
        squad_matches = sorted(
            (m for m in self.dataset.matches if m.squad_id == player.squad_id),
            key=lambda m: m.date,
            reverse=True,
        )[: self.config.player.recent_matches]

        selections = {
            s.match_id: s for s in self.dataset.selections if s.player_id == player.id
        }

        recent = []
        for match in squad_matches:
            selection = selections.get(match.id)
            status = selection.status if selection else SelectionStatus.NOT_SELECTED
            reason = None
            if selection and not selection.is_selected:
                reason = selection.reason_category
            recent.append(
                RecentMatch(
                    match_id=match.id,
                    match_date=match.date.date().isoformat(),
                    competition=match.competition,
                    opponent=match.opponent,
                    status=status,
                    reason=reason,
                )
            )
        return recent

    def _pathway_progress(self, player: Player) -> PathwayProgress:
        """
        Current level, the level after it and the current level's criteria.

        A player without a resolvable level is shown at the configured
        ``unassigned_level`` with no criteria; its next level is the one of
        order 1.
        """
        level: PathwayLevel | None = self.dataset.find_pathway_level(player.pathway_level_id)
        next_level = self.dataset.next_pathway_level(level)
        if level is None:
            return PathwayProgress(
                current_level=self.config.player.unassigned_level,
                next_level=next_level.name if next_level else None,
            )

        criteria = level.criteria
        requirement = None
        if criteria.min_attendance_rate:
            requirement = f"{criteria.min_attendance_rate}% attendance"

        return PathwayProgress(
            current_level=level.name,
            next_level=next_level.name if next_level else None,
            attendance_requirement=requirement,
            min_tenure_months=criteria.min_tenure_months,
            min_matches=criteria.min_matches,
            coach_recommendation_required=criteria.coach_recommendation_required,
        )
