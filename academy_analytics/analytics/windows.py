"""
Time Windows and Grouping

Primitives every higher-level metric is built on:
- Inclusive time-window membership (``in_range``)
- Scope filtering of sessions and matches
- Group-by-key and group-by-period (week / month) bucketing
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, TypeVar

from academy_analytics.models.filters import AnalyticsFilters, DateRange
from academy_analytics.models.match import Match
from academy_analytics.models.session import Session
from academy_analytics.models.timestamps import to_naive_utc

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class Granularity(str, Enum):
    """Bucket size for time-series grouping."""

    WEEK = "week"
    MONTH = "month"


def to_datetime(value: Any) -> datetime | None:
    """
    Interpret a timestamp-like value.

    Accepts datetimes, dates (promoted to midnight) and ISO-8601 strings.
    Offset-aware values come back as naive UTC. Returns None for anything
    else instead of raising.
    """
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return to_naive_utc(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def in_range(timestamp: Any, date_range: DateRange | None = None) -> bool:
    """
    Check whether a timestamp falls inside an inclusive window.

    Args:
        timestamp: Record timestamp (datetime, date or ISO string)
        date_range: Window to test against; None means unbounded

    Returns:
        True if no range is given or ``start <= timestamp <= end``.
        Malformed timestamps are a miss, never an error.
    """
    if date_range is None:
        return True

    moment = to_datetime(timestamp)
    start = to_datetime(date_range.start)
    end = to_datetime(date_range.end)
    if moment is None or start is None or end is None:
        return False

    return start <= moment <= end


def trailing_window(now: datetime, days: int) -> DateRange:
    """Now-relative window covering the last ``days`` days."""
    return DateRange(start=now - timedelta(days=days), end=now)


def week_start(value: datetime) -> datetime:
    """Midnight of the Sunday that starts ``value``'s week."""
    days_since_sunday = (value.weekday() + 1) % 7
    return datetime.combine(
        value.date() - timedelta(days=days_since_sunday), time.min, tzinfo=value.tzinfo
    )


def period_key(value: Any, granularity: Granularity | str) -> str | None:
    """Bucket key for a timestamp: week-start ISO date or ``YYYY-MM``."""
    moment = to_datetime(value)
    if moment is None:
        return None
    if Granularity(granularity) == Granularity.WEEK:
        return week_start(moment).date().isoformat()
    return f"{moment.year:04d}-{moment.month:02d}"


def group_by(records: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group records by key.

    Keys keep first-seen order and each bucket keeps input order.
    """
    groups: dict[K, list[T]] = {}
    for record in records:
        groups.setdefault(key_fn(record), []).append(record)
    return groups


def group_by_period(
    records: Iterable[T],
    date_fn: Callable[[T], Any],
    granularity: Granularity | str = Granularity.WEEK,
) -> dict[str, list[T]]:
    """
    Group records into week or month buckets.

    Args:
        records: Records to bucket
        date_fn: Extracts the timestamp of a record
        granularity: "week" (Sunday-based) or "month"

    Returns:
        Mapping of period key to records. Records without an interpretable
        timestamp are left out.

    Raises:
        ValueError: If granularity is not week or month
    """
    granularity = Granularity(granularity)
    groups: dict[str, list[T]] = {}
    for record in records:
        key = period_key(date_fn(record), granularity)
        if key is None:
            continue
        groups.setdefault(key, []).append(record)
    return groups


def filter_sessions(
    sessions: Iterable[Session],
    filters: AnalyticsFilters | None = None,
) -> list[Session]:
    """Sessions matching range, centre, squad and coach filters."""
    if filters is None:
        return list(sessions)
    return [
        s
        for s in sessions
        if in_range(s.date, filters.date_range)
        and (not filters.centre_id or s.centre_id == filters.centre_id)
        and (not filters.squad_id or s.squad_id == filters.squad_id)
        and (not filters.coach_id or s.coach_id == filters.coach_id)
    ]


def filter_matches(
    matches: Iterable[Match],
    filters: AnalyticsFilters | None = None,
) -> list[Match]:
    """Matches matching range, centre and squad filters."""
    if filters is None:
        return list(matches)
    return [
        m
        for m in matches
        if in_range(m.date, filters.date_range)
        and (not filters.centre_id or m.centre_id == filters.centre_id)
        and (not filters.squad_id or m.squad_id == filters.squad_id)
    ]
