"""
Coach Analytics Processor

Cohort view for one coach. A coach's roster is every player with an
attendance record at one of the coach's sessions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Iterable

import numpy as np
from loguru import logger

from academy_analytics.analytics.rates import (
    AttendanceLabel,
    calculate_attendance_rate,
    round_half_up,
)
from academy_analytics.analytics.wellness import count_high_load_signals, mean_exertion
from academy_analytics.analytics.windows import (
    filter_sessions,
    group_by,
    in_range,
    trailing_window,
    week_start,
)
from academy_analytics.config import AnalyticsConfig
from academy_analytics.models.dataset import Dataset
from academy_analytics.models.filters import AnalyticsFilters, DateRange
from academy_analytics.models.player import Player
from academy_analytics.models.session import Session
from academy_analytics.models.timestamps import to_naive_utc, utc_now


@dataclass(frozen=True)
class PlayerEngagement:
    """Engagement of one roster player with the coach's sessions."""

    player_id: str
    player_name: str
    squad_name: str
    sessions_attended: int
    sessions_scheduled: int
    attendance_rate: int
    label: AttendanceLabel


@dataclass(frozen=True)
class SquadAttendance:
    """Mean attendance rate of the roster players in one squad."""

    squad_id: str | None
    squad_name: str
    attendance_rate: int


@dataclass(frozen=True)
class SessionExertion:
    """Average reported exertion for one session."""

    session_id: str
    avg_exertion: float


@dataclass
class CoachAnalytics:
    """Coach dashboard summary."""

    coach_id: str
    coach_name: str
    players_under_coach: int
    avg_attendance: int
    avg_exertion: float
    sessions_this_week: int
    wellness_flags: int
    player_engagement: list[PlayerEngagement] = field(default_factory=list)
    squad_attendance: list[SquadAttendance] = field(default_factory=list)
    session_exertion: list[SessionExertion] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return asdict(self)


def coach_roster(
    dataset: Dataset,
    coach_id: str,
    sessions: Iterable[Session] | None = None,
) -> list[Player]:
    """
    Players linked to a coach through attendance at the coach's sessions.

    Args:
        dataset: Snapshot to search
        coach_id: Coach whose roster to build
        sessions: Restrict linkage to these sessions (defaults to all of the
            coach's sessions)

    Returns:
        Players in dataset order
    """
    if sessions is None:
        sessions = (s for s in dataset.sessions if s.coach_id == coach_id)
    session_ids = {s.id for s in sessions}
    player_ids = {r.player_id for r in dataset.attendance if r.session_id in session_ids}
    return [p for p in dataset.players if p.id in player_ids]


class CoachAnalyticsProcessor:
    """
    Aggregates engagement, attendance and wellness for a coach's roster.

    Usage:
        processor = CoachAnalyticsProcessor(dataset)
        summary = processor.summarize("coach-1", filters, now=utc_now())
    """

    def __init__(self, dataset: Dataset, config: AnalyticsConfig | None = None) -> None:
        self.dataset = dataset
        self.config = config or AnalyticsConfig()

    def summarize(
        self,
        coach_id: str,
        filters: AnalyticsFilters | None = None,
        now: datetime | None = None,
    ) -> CoachAnalytics:
        """
        Build the coach summary.

        Args:
            coach_id: Coach to summarize
            filters: ``date_range`` and ``squad_id`` narrow the coach's sessions
            now: Reference time for "this week" and the wellness-flag window

        Returns:
            CoachAnalytics

        Raises:
            EntityNotFoundError: If the coach does not exist
        """
        coach = self.dataset.get_coach(coach_id)
        filters = filters or AnalyticsFilters()
        now = to_naive_utc(now) if now else utc_now()
        date_range = filters.date_range
        data = self.dataset

        sessions = filter_sessions(
            data.sessions,
            AnalyticsFilters(date_range=date_range, squad_id=filters.squad_id, coach_id=coach.id),
        )
        session_ids = {s.id for s in sessions}
        players = coach_roster(data, coach.id, sessions)
        roster_ids = {p.id for p in players}

        engagement = []
        for player in players:
            rate = calculate_attendance_rate(
                player.id, data.sessions, data.attendance, date_range, self.config.attendance
            )
            attended = sum(
                1
                for r in data.attendance
                if r.player_id == player.id and r.session_id in session_ids and r.is_present
            )
            engagement.append(
                PlayerEngagement(
                    player_id=player.id,
                    player_name=player.full_name,
                    squad_name=data.squad_name(player.squad_id),
                    sessions_attended=attended,
                    sessions_scheduled=len(sessions),
                    attendance_rate=rate.rate,
                    label=rate.label,
                )
            )

        rates_by_player = {e.player_id: e.attendance_rate for e in engagement}
        squad_attendance = [
            SquadAttendance(
                squad_id=squad_id,
                squad_name=data.squad_name(squad_id),
                attendance_rate=round_half_up(
                    float(np.mean([rates_by_player[p.id] for p in members]))
                ),
            )
            for squad_id, members in group_by(players, lambda p: p.squad_id).items()
        ]
        avg_attendance = (
            round_half_up(float(np.mean([s.attendance_rate for s in squad_attendance])))
            if squad_attendance
            else 0
        )

        roster_wellness = [w for w in data.wellness if w.player_id in roster_ids]
        in_range_wellness = [w for w in roster_wellness if in_range(w.date, date_range)]

        this_week = week_start(now)
        open_week = DateRange(start=this_week, end=datetime.max)
        sessions_this_week = sum(1 for s in sessions if in_range(s.date, open_week))

        queue_settings = self.config.feedback_queue
        wellness_flags = count_high_load_signals(
            roster_wellness,
            trailing_window(now, queue_settings.high_load_window_days),
            queue_settings.high_load_min_exertion,
        )

        wellness_by_session = group_by(
            (w for w in data.wellness if w.session_id), lambda w: w.session_id
        )
        session_exertion = [
            SessionExertion(
                session_id=s.id,
                avg_exertion=mean_exertion(wellness_by_session.get(s.id, [])),
            )
            for s in sessions
        ]

        logger.debug(
            f"Coach {coach.id}: {len(players)} players across {len(sessions)} sessions"
        )
        return CoachAnalytics(
            coach_id=coach.id,
            coach_name=coach.full_name,
            players_under_coach=len(players),
            avg_attendance=avg_attendance,
            avg_exertion=mean_exertion(in_range_wellness),
            sessions_this_week=sessions_this_week,
            wellness_flags=wellness_flags,
            player_engagement=engagement,
            squad_attendance=squad_attendance,
            session_exertion=session_exertion,
        )
