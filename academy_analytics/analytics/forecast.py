"""
Cohort Forecast

Placeholder projection of cohort size. The fixed growth multipliers are a
stand-in until enrolment history is available for trend fitting.
"""

from __future__ import annotations

from dataclasses import dataclass

from academy_analytics.analytics.rates import round_half_up
from academy_analytics.config import ForecastSettings


@dataclass(frozen=True)
class CohortForecast:
    """Projected cohort size at fixed horizons."""

    current: int
    in_3_months: int
    in_6_months: int


def project_cohort_size(
    current: int,
    settings: ForecastSettings | None = None,
) -> CohortForecast:
    """Project ``current`` forward with the configured multipliers."""
    settings = settings or ForecastSettings()
    return CohortForecast(
        current=current,
        in_3_months=round_half_up(current * settings.three_month_multiplier),
        in_6_months=round_half_up(current * settings.six_month_multiplier),
    )
