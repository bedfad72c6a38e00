"""
Analytics Module

Leaf calculators shared by every dashboard.

Components:
    - in_range / group_by / group_by_period: time windows and bucketing
    - calculate_attendance_rate / calculate_match_exposure: safe rate derivation
    - longest_attendance_streak: consecutive attendance detection
    - summarize_wellness: exertion and energy summaries
    - project_cohort_size: placeholder cohort forecast
"""

from academy_analytics.analytics.windows import (
    Granularity,
    filter_matches,
    filter_sessions,
    group_by,
    group_by_period,
    in_range,
    period_key,
    to_datetime,
    trailing_window,
    week_start,
)
from academy_analytics.analytics.rates import (
    AttendanceLabel,
    AttendanceRate,
    MatchExposure,
    attendance_label,
    calculate_attendance_rate,
    calculate_match_exposure,
    round_half_up,
    safe_percentage,
)
from academy_analytics.analytics.streaks import longest_attendance_streak
from academy_analytics.analytics.wellness import (
    NO_ENERGY_DATA,
    WellnessSummary,
    count_high_load_signals,
    dominant_energy,
    is_high_load,
    mean_exertion,
    summarize_wellness,
)
from academy_analytics.analytics.forecast import CohortForecast, project_cohort_size

__all__ = [
    # Windows and grouping
    "Granularity",
    "filter_matches",
    "filter_sessions",
    "group_by",
    "group_by_period",
    "in_range",
    "period_key",
    "to_datetime",
    "trailing_window",
    "week_start",
    # Rates
    "AttendanceLabel",
    "AttendanceRate",
    "MatchExposure",
    "attendance_label",
    "calculate_attendance_rate",
    "calculate_match_exposure",
    "round_half_up",
    "safe_percentage",
    # Streaks
    "longest_attendance_streak",
    # Wellness
    "NO_ENERGY_DATA",
    "WellnessSummary",
    "count_high_load_signals",
    "dominant_energy",
    "is_high_load",
    "mean_exertion",
    "summarize_wellness",
    # Forecast
    "CohortForecast",
    "project_cohort_size",
]
