"""
Feedback Queue Rule Engine

Builds a coach's action queue: roster players who need attention, each with
every reason that applies. Rules are evaluated top to bottom and the first
reason that fires becomes the player's primary reason, so list order is
priority order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable

from loguru import logger

from academy_analytics.analytics.rates import calculate_attendance_rate
from academy_analytics.analytics.wellness import count_high_load_signals
from academy_analytics.analytics.windows import trailing_window
from academy_analytics.config import AnalyticsConfig, QueueRuleSettings
from academy_analytics.models.dataset import Dataset
from academy_analytics.models.player import Player
from academy_analytics.models.timestamps import to_naive_utc, utc_now
from academy_analytics.processors.coach_analytics import coach_roster


@dataclass(frozen=True)
class RuleContext:
    """Per-player facts the queue rules are evaluated against."""

    player: Player
    now: datetime
    attendance_rate: int
    last_published_feedback_at: datetime | None
    high_load_signals: int
    settings: QueueRuleSettings


@dataclass(frozen=True)
class QueueRule:
    """A named predicate and the reason it adds when it holds."""

    name: str
    predicate: Callable[[RuleContext], bool]
    message: Callable[[RuleContext], str]


@dataclass(frozen=True)
class FeedbackQueueItem:
    """A player needing coach attention."""

    player_id: str
    player_name: str
    squad_name: str
    reasons: list[str] = field(default_factory=list)
    primary_reason: str = ""
    attendance_rate: int = 0


def _feedback_is_stale(ctx: RuleContext) -> bool:
    if ctx.last_published_feedback_at is None:
        return True
    cutoff = ctx.now - timedelta(days=ctx.settings.feedback_staleness_days)
    return ctx.last_published_feedback_at < cutoff


DEFAULT_RULES: list[QueueRule] = [
    QueueRule(
        name="stale_feedback",
        predicate=_feedback_is_stale,
        message=lambda ctx: (
            f"No feedback in last {ctx.settings.feedback_staleness_days} days"
        ),
    ),
    QueueRule(
        name="low_attendance",
        predicate=lambda ctx: ctx.attendance_rate < ctx.settings.low_attendance_threshold,
        message=lambda ctx: (
            f"Attendance {ctx.attendance_rate}% "
            f"(below {ctx.settings.low_attendance_threshold}%)"
        ),
    ),
    QueueRule(
        name="high_load",
        predicate=lambda ctx: ctx.high_load_signals >= ctx.settings.high_load_min_signals,
        message=lambda ctx: "High load signals detected",
    ),
]


class FeedbackQueueEngine:
    """
    Evaluates queue rules across a coach's roster.

    Usage:
        engine = FeedbackQueueEngine(dataset)
        queue = engine.build_queue("coach-1", now=utc_now())
    """

    def __init__(
        self,
        dataset: Dataset,
        config: AnalyticsConfig | None = None,
        rules: list[QueueRule] | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            dataset: Snapshot to evaluate
            config: Rule thresholds (defaults if not provided)
            rules: Ordered rule list (DEFAULT_RULES if not provided)
        """
        self.dataset = dataset
        self.config = config or AnalyticsConfig()
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)

    def build_context(self, player: Player, now: datetime) -> RuleContext:
        """Gather the facts the rules need for one player."""
        now = to_naive_utc(now)
        settings = self.config.feedback_queue
        published = [
            f.created_at
            for f in self.dataset.feedback
            if f.player_id == player.id and f.is_published
        ]
        attendance = calculate_attendance_rate(
            player.id,
            self.dataset.sessions,
            self.dataset.attendance,
            bands=self.config.attendance,
        )
        signals = count_high_load_signals(
            (w for w in self.dataset.wellness if w.player_id == player.id),
            trailing_window(now, settings.high_load_window_days),
            settings.high_load_min_exertion,
        )
        return RuleContext(
            player=player,
            now=now,
            attendance_rate=attendance.rate,
            last_published_feedback_at=max(published) if published else None,
            high_load_signals=signals,
            settings=settings,
        )

    def evaluate(self, ctx: RuleContext) -> list[str]:
        """Reasons from every rule that fires, in rule order."""
        return [rule.message(ctx) for rule in self.rules if rule.predicate(ctx)]

    def evaluate_player(self, player_id: str, now: datetime | None = None) -> list[str]:
        """
        Reasons a single player would be queued for.

        Raises:
            EntityNotFoundError: If the player does not exist
        """
        player = self.dataset.get_player(player_id)
        return self.evaluate(self.build_context(player, now or utc_now()))

    def build_queue(self, coach_id: str, now: datetime | None = None) -> list[FeedbackQueueItem]:
        """
        Build the feedback queue for a coach.

        Args:
            coach_id: Coach whose roster to evaluate
            now: Reference time for staleness and load windows

        Returns:
            Queue items for players with at least one reason, in roster order

        Raises:
            EntityNotFoundError: If the coach does not exist
        """
        coach = self.dataset.get_coach(coach_id)
        now = to_naive_utc(now) if now else utc_now()

        queue = []
        for player in coach_roster(self.dataset, coach.id):
            ctx = self.build_context(player, now)
            reasons = self.evaluate(ctx)
            if not reasons:
                continue
            queue.append(
                FeedbackQueueItem(
                    player_id=player.id,
                    player_name=player.full_name,
                    squad_name=self.dataset.squad_name(player.squad_id),
                    reasons=reasons,
                    primary_reason=reasons[0],
                    attendance_rate=ctx.attendance_rate,
                )
            )

        logger.debug(f"Feedback queue for {coach.id}: {len(queue)} players flagged")
        return queue
