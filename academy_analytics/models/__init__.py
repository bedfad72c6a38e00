"""
Data Models Module

This module contains Pydantic models for representing academy records.

Models:
    - Player, Centre, Squad, Coach, PathwayLevel: academy structure
    - Session, AttendanceRecord: training attendance
    - Match, MatchSelection: fixtures and selection decisions
    - WellnessEntry, Feedback: player check-ins and coach feedback
    - Dataset: read-only snapshot passed to every query
    - DateRange, AnalyticsFilters: query scope
    - UtcDatetime: naive-UTC timestamp field type
"""

from academy_analytics.models.player import (
    Centre,
    Coach,
    PathwayLevel,
    Player,
    PlayerStatus,
    PromotionCriteria,
    Squad,
)
from academy_analytics.models.session import (
    AttendanceRecord,
    AttendanceStatus,
    Session,
    SessionType,
)
from academy_analytics.models.match import (
    Match,
    MatchSelection,
    ReasonCategory,
    SelectionStatus,
)
from academy_analytics.models.wellness import (
    EnergyLevel,
    Feedback,
    FeedbackStatus,
    WellnessEntry,
)
from academy_analytics.models.filters import AnalyticsFilters, DateRange
from academy_analytics.models.dataset import Dataset, EntityNotFoundError
from academy_analytics.models.timestamps import UtcDatetime, to_naive_utc, utc_now

__all__ = [
    "Centre",
    "Coach",
    "PathwayLevel",
    "Player",
    "PlayerStatus",
    "PromotionCriteria",
    "Squad",
    "AttendanceRecord",
    "AttendanceStatus",
    "Session",
    "SessionType",
    "Match",
    "MatchSelection",
    "ReasonCategory",
    "SelectionStatus",
    "EnergyLevel",
    "Feedback",
    "FeedbackStatus",
    "WellnessEntry",
    "AnalyticsFilters",
    "DateRange",
    "Dataset",
    "EntityNotFoundError",
    "UtcDatetime",
    "to_naive_utc",
    "utc_now",
]
