"""
Query Filters

Scope parameters accepted by every aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time


@dataclass(frozen=True)
class DateRange:
    """Inclusive ``[start, end]`` time window."""

    start: datetime
    end: datetime

    @classmethod
    def for_days(cls, first: date, last: date) -> DateRange:
        """Build a range covering whole calendar days, ``first`` to ``last``."""
        return cls(
            start=datetime.combine(first, time.min),
            end=datetime.combine(last, time.max),
        )


@dataclass(frozen=True)
class AnalyticsFilters:
    """
    Filter object shared by admin, coach and player views.

    Every field is optional; an unset field does not restrict the query.
    """

    date_range: DateRange | None = None
    centre_id: str | None = None
    squad_id: str | None = None
    coach_id: str | None = None
    player_id: str | None = None

    def with_player(self, player_id: str | None) -> AnalyticsFilters:
        """Copy of these filters scoped to one player."""
        return replace(self, player_id=player_id)
