"""
Processors Module

Composite aggregators built on the leaf analytics.

Processors:
    - PlayerAnalyticsBuilder: one player's analytics snapshot
    - AdminAnalyticsProcessor: academy-wide KPIs, time series and distributions
    - CoachAnalyticsProcessor: a coach's roster engagement and wellness
    - FeedbackQueueEngine: rule-based coach action queue
"""

from academy_analytics.processors.admin_analytics import (
    AdminAnalyticsProcessor,
    AdminKPIs,
    AttendancePoint,
    CentreAttendance,
    CompetitionCount,
    MatchesOverview,
    PipelineDistribution,
    WeeklyLoad,
    participation_bucket,
)
from academy_analytics.processors.player_analytics import (
    PathwayProgress,
    PlayerAnalytics,
    PlayerAnalyticsBuilder,
    ReadinessLabel,
    RecentMatch,
    WellnessPoint,
    readiness_label,
)
from academy_analytics.processors.coach_analytics import (
    CoachAnalytics,
    CoachAnalyticsProcessor,
    PlayerEngagement,
    SessionExertion,
    SquadAttendance,
    coach_roster,
)
from academy_analytics.processors.feedback_queue import (
    DEFAULT_RULES,
    FeedbackQueueEngine,
    FeedbackQueueItem,
    QueueRule,
    RuleContext,
)

__all__ = [
    "AdminAnalyticsProcessor",
    "AdminKPIs",
    "AttendancePoint",
    "CentreAttendance",
    "CompetitionCount",
    "MatchesOverview",
    "PipelineDistribution",
    "WeeklyLoad",
    "participation_bucket",
    "PathwayProgress",
    "PlayerAnalytics",
    "PlayerAnalyticsBuilder",
    "ReadinessLabel",
    "RecentMatch",
    "WellnessPoint",
    "readiness_label",
    "CoachAnalytics",
    "CoachAnalyticsProcessor",
    "PlayerEngagement",
    "SessionExertion",
    "SquadAttendance",
    "coach_roster",
    "DEFAULT_RULES",
    "FeedbackQueueEngine",
    "FeedbackQueueItem",
    "QueueRule",
    "RuleContext",
]
