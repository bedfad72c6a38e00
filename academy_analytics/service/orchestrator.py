"""
Analytics Service

Single entry point for the presentation layer. Wraps one dataset snapshot
and composes the processors into the admin, coach and player dashboards.

Each call is a pure function of (snapshot, filters, clock); the service
keeps no state between calls beyond what it was constructed with.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable

from loguru import logger

from academy_analytics.analytics.forecast import CohortForecast
from academy_analytics.analytics.windows import Granularity
from academy_analytics.config import AnalyticsConfig
from academy_analytics.models.dataset import Dataset
from academy_analytics.models.filters import AnalyticsFilters
from academy_analytics.models.timestamps import utc_now
from academy_analytics.processors.admin_analytics import (
    AdminAnalyticsProcessor,
    AdminKPIs,
    AttendancePoint,
    CentreAttendance,
    MatchesOverview,
    PipelineDistribution,
    WeeklyLoad,
)
from academy_analytics.processors.coach_analytics import (
    CoachAnalytics,
    CoachAnalyticsProcessor,
)
from academy_analytics.processors.feedback_queue import (
    FeedbackQueueEngine,
    FeedbackQueueItem,
)
from academy_analytics.processors.player_analytics import (
    PlayerAnalytics,
    PlayerAnalyticsBuilder,
)


@dataclass
class AdminDashboard:
    """Everything the admin analytics page renders."""

    kpis: AdminKPIs
    attendance_by_centre: list[CentreAttendance] = field(default_factory=list)
    attendance_over_time: list[AttendancePoint] = field(default_factory=list)
    pipeline: PipelineDistribution | None = None
    sessions_and_load: list[WeeklyLoad] = field(default_factory=list)
    matches: MatchesOverview | None = None
    forecast: CohortForecast | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return asdict(self)


class AnalyticsService:
    """
    Facade over the analytics processors.

    Usage:
        service = AnalyticsService(dataset)
        admin = service.admin_dashboard(AnalyticsFilters(centre_id="centre-3lok"))
        player = service.player_dashboard("player-1")
    """

    def __init__(
        self,
        dataset: Dataset,
        config: AnalyticsConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            dataset: Snapshot every query runs against
            config: Thresholds and windows (defaults if not provided)
            clock: Returns "now" for trailing windows (current UTC if not provided).
                Aware results are converted to naive UTC by the processors.
        """
        self.dataset = dataset
        self.config = config or AnalyticsConfig()
        self.clock = clock or utc_now

        self.admin = AdminAnalyticsProcessor(dataset, self.config)
        self.players = PlayerAnalyticsBuilder(dataset, self.config)
        self.coaches = CoachAnalyticsProcessor(dataset, self.config)
        self.queue = FeedbackQueueEngine(dataset, self.config)

        logger.info(
            f"AnalyticsService ready: {len(dataset.players)} players, "
            f"{len(dataset.sessions)} sessions, {len(dataset.matches)} matches"
        )

    def admin_dashboard(
        self,
        filters: AnalyticsFilters | None = None,
        granularity: Granularity | str = Granularity.WEEK,
    ) -> AdminDashboard:
        """Build every admin aggregate for the given scope."""
        filters = filters or AnalyticsFilters()
        dashboard = AdminDashboard(
            kpis=self.admin.kpis(filters),
            attendance_by_centre=self.admin.attendance_by_centre(filters),
            attendance_over_time=self.admin.attendance_over_time(filters, granularity),
            pipeline=self.admin.pipeline_distribution(filters),
            sessions_and_load=self.admin.sessions_and_load(filters),
            matches=self.admin.matches_overview(filters),
            forecast=self.admin.active_players_forecast(),
        )
        logger.info(
            f"Admin dashboard built: {dashboard.kpis.total_active_players} active players, "
            f"{len(dashboard.attendance_over_time)} attendance buckets"
        )
        return dashboard

    def player_dashboard(
        self,
        player_id: str,
        filters: AnalyticsFilters | None = None,
    ) -> PlayerAnalytics:
        """
        Build one player's snapshot.

        Raises:
            EntityNotFoundError: If the player does not exist
        """
        return self.players.build(player_id, filters, now=self.clock())

    def coach_dashboard(
        self,
        coach_id: str,
        filters: AnalyticsFilters | None = None,
    ) -> CoachAnalytics:
        """
        Build a coach's roster summary.

        Raises:
            EntityNotFoundError: If the coach does not exist
        """
        return self.coaches.summarize(coach_id, filters, now=self.clock())

    def feedback_queue(self, coach_id: str) -> list[FeedbackQueueItem]:
        """
        Build a coach's feedback queue.

        Raises:
            EntityNotFoundError: If the coach does not exist
        """
        return self.queue.build_queue(coach_id, now=self.clock())

    def active_players_forecast(self) -> CohortForecast:
        """Placeholder projection of the active player count."""
        return self.admin.active_players_forecast()
