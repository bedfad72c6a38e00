"""
Admin Analytics Processor

Academy-wide cohort aggregates for the admin dashboard:
- Headline KPIs (active players, sessions, matches, attendance, wellness)
- Attendance by centre and over time
- Pathway pipeline distribution
- Weekly session counts and training load
- Match participation distribution
- Active player forecast

Two figures here are deliberate approximations kept for continuity with
numbers already reported to the academy: the per-centre denominator
(sessions x distinct attendees) and the weekly exertion blend, which
averages each session into the running value pairwise rather than
cumulatively.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import numpy as np
from loguru import logger

from academy_analytics.analytics.forecast import CohortForecast, project_cohort_size
from academy_analytics.analytics.rates import (
    calculate_attendance_rate,
    round_half_up,
    safe_percentage,
)
from academy_analytics.analytics.wellness import mean_exertion
from academy_analytics.analytics.windows import (
    Granularity,
    filter_matches,
    filter_sessions,
    group_by,
    group_by_period,
    in_range,
)
from academy_analytics.config import AnalyticsConfig
from academy_analytics.models.dataset import Dataset
from academy_analytics.models.filters import AnalyticsFilters

PARTICIPATION_BUCKETS = ("0", "1-5", "6-10", "10+")


@dataclass(frozen=True)
class AdminKPIs:
    """Headline numbers for the admin dashboard."""

    total_active_players: int
    avg_attendance: int
    sessions_in_range: int
    matches_in_range: int
    avg_wellness: int


@dataclass(frozen=True)
class CentreAttendance:
    """Approximate attendance rate for one centre."""

    centre_id: str
    centre_name: str
    scheduled: int
    attended: int
    attendance_rate: int


@dataclass(frozen=True)
class AttendancePoint:
    """One bucket of the attendance time series."""

    period: str
    scheduled: int
    attended: int
    rate: int


@dataclass(frozen=True)
class PipelineDistribution:
    """Active players per pathway level name."""

    pipeline: dict[str, int]
    total_active: int


@dataclass(frozen=True)
class WeeklyLoad:
    """Sessions and blended average exertion for one week."""

    week: str
    sessions: int
    avg_exertion: float


@dataclass(frozen=True)
class CompetitionCount:
    """Number of fixtures in one competition."""

    competition: str
    matches: int


@dataclass(frozen=True)
class MatchesOverview:
    """Fixture counts and player participation buckets."""

    by_competition: list[CompetitionCount] = field(default_factory=list)
    participation_distribution: dict[str, int] = field(default_factory=dict)


def participation_bucket(selected_matches: int) -> str:
    """Bucket label for a player's selected-match count."""
    if selected_matches <= 0:
        return "0"
    if selected_matches <= 5:
        return "1-5"
    if selected_matches <= 10:
        return "6-10"
    return "10+"


class AdminAnalyticsProcessor:
    """
    Cohort aggregator for academy administrators.

    Usage:
        processor = AdminAnalyticsProcessor(dataset)
        kpis = processor.kpis(AnalyticsFilters(centre_id="centre-3lok"))
        series = processor.attendance_over_time(filters, "month")
    """

    def __init__(self, dataset: Dataset, config: AnalyticsConfig | None = None) -> None:
        """
        Initialize the processor.

        Args:
            dataset: Snapshot to aggregate over
            config: Thresholds (defaults if not provided)
        """
        self.dataset = dataset
        self.config = config or AnalyticsConfig()

    def kpis(self, filters: AnalyticsFilters | None = None) -> AdminKPIs:
        """
        Compute headline KPIs.

        The average attendance is the unweighted mean of every active
        player's own rate, so players with no sessions in range pull the
        mean down with a zero.
        """
        filters = filters or AnalyticsFilters()
        date_range = filters.date_range
        players = self.dataset.active_players()

        sessions = filter_sessions(self.dataset.sessions, filters)
        matches = filter_matches(self.dataset.matches, filters)

        rates = [
            calculate_attendance_rate(
                p.id,
                self.dataset.sessions,
                self.dataset.attendance,
                date_range,
                self.config.attendance,
            ).rate
            for p in players
        ]
        avg_attendance = round_half_up(float(np.mean(rates))) if rates else 0

        wellness = [w for w in self.dataset.wellness if in_range(w.date, date_range)]
        avg_wellness = round_half_up(mean_exertion(wellness))

        logger.debug(
            f"Admin KPIs: {len(players)} active players, {len(sessions)} sessions, "
            f"{len(matches)} matches in scope"
        )
        return AdminKPIs(
            total_active_players=len(players),
            avg_attendance=avg_attendance,
            sessions_in_range=len(sessions),
            matches_in_range=len(matches),
            avg_wellness=avg_wellness,
        )

    def attendance_by_centre(
        self, filters: AnalyticsFilters | None = None
    ) -> list[CentreAttendance]:
        """
        Approximate attendance per centre.

        Scheduled is ``sessions in range x distinct players with any record
        at those sessions``, not an exact per-player sum.
        """
        date_range = filters.date_range if filters else None
        results = []

        for centre in self.dataset.centres:
            session_ids = {
                s.id
                for s in self.dataset.sessions
                if s.centre_id == centre.id and in_range(s.date, date_range)
            }
            records = [r for r in self.dataset.attendance if r.session_id in session_ids]
            attended = sum(1 for r in records if r.is_present)
            attendees = {r.player_id for r in records}
            scheduled = len(session_ids) * len(attendees)

            results.append(
                CentreAttendance(
                    centre_id=centre.id,
                    centre_name=centre.name,
                    scheduled=scheduled,
                    attended=attended,
                    attendance_rate=safe_percentage(attended, scheduled),
                )
            )

        return results

    def attendance_over_time(
        self,
        filters: AnalyticsFilters | None = None,
        granularity: Granularity | str = Granularity.WEEK,
    ) -> list[AttendancePoint]:
        """
        Attendance time series bucketed by week or month.

        Scheduled counts attendance rows, not sessions: a session with no
        rows adds nothing to its bucket. With ``filters.player_id`` set only
        that player's rows are counted.
        """
        filters = filters or AnalyticsFilters()
        sessions = filter_sessions(self.dataset.sessions, filters)
        rows_by_session = group_by(
            (
                r
                for r in self.dataset.attendance
                if not filters.player_id or r.player_id == filters.player_id
            ),
            lambda r: r.session_id,
        )

        points = []
        for period, bucket in group_by_period(sessions, lambda s: s.date, granularity).items():
            rows = [r for s in bucket for r in rows_by_session.get(s.id, [])]
            attended = sum(1 for r in rows if r.is_present)
            points.append(
                AttendancePoint(
                    period=period,
                    scheduled=len(rows),
                    attended=attended,
                    rate=safe_percentage(attended, len(rows)),
                )
            )
        return points

    def pipeline_distribution(
        self, filters: AnalyticsFilters | None = None
    ) -> PipelineDistribution:
        """Count active players per pathway level, keyed by level name."""
        filters = filters or AnalyticsFilters()
        players = [
            p
            for p in self.dataset.active_players()
            if (not filters.centre_id or p.centre_id == filters.centre_id)
            and (not filters.squad_id or p.squad_id == filters.squad_id)
        ]
        per_level = Counter(p.pathway_level_id for p in players)
        pipeline = {level.name: per_level.get(level.id, 0) for level in self.dataset.pathway_levels}
        return PipelineDistribution(pipeline=pipeline, total_active=len(players))

    def sessions_and_load(self, filters: AnalyticsFilters | None = None) -> list[WeeklyLoad]:
        """
        Weekly session counts with a blended average exertion.

        Each session's mean exertion is folded into its week as
        ``(previous + new) / 2``; the first non-zero value is taken as is.
        """
        sessions = filter_sessions(self.dataset.sessions, filters)
        wellness_by_session = group_by(
            (w for w in self.dataset.wellness if w.session_id),
            lambda w: w.session_id,
        )

        weeks = []
        for week, bucket in group_by_period(sessions, lambda s: s.date, Granularity.WEEK).items():
            blended = 0.0
            for session in bucket:
                entries = wellness_by_session.get(session.id, [])
                if not entries:
                    continue
                avg = float(np.mean([w.exertion for w in entries]))
                blended = avg if blended == 0 else (blended + avg) / 2
            weeks.append(
                WeeklyLoad(
                    week=week,
                    sessions=len(bucket),
                    avg_exertion=round_half_up(blended, 1),
                )
            )
        return weeks

    def matches_overview(self, filters: AnalyticsFilters | None = None) -> MatchesOverview:
        """
        Fixture counts per competition and participation buckets.

        Competition counts group on the full fixture name, "Other" when it is
        blank, and are scoped by the filters. Participation covers every
        active player across the full selection history, each selection
        counted once.
        """
        matches = filter_matches(self.dataset.matches, filters)
        by_competition = [
            CompetitionCount(competition=name, matches=len(group))
            for name, group in group_by(matches, lambda m: m.competition_name or "Other").items()
        ]

        selected_counts = Counter(
            s.player_id for s in self.dataset.selections if s.is_selected
        )
        distribution = dict.fromkeys(PARTICIPATION_BUCKETS, 0)
        for player in self.dataset.active_players():
            distribution[participation_bucket(selected_counts.get(player.id, 0))] += 1

        return MatchesOverview(
            by_competition=by_competition,
            participation_distribution=distribution,
        )

    def active_players_forecast(self) -> CohortForecast:
        """Project the active player count forward."""
        return project_cohort_size(len(self.dataset.active_players()), self.config.forecast)
