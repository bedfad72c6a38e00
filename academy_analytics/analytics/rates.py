"""
Rate Calculators

Attendance rate and match exposure for a single player, with an explicit
zero-denominator policy: no data yields a zero rate and a "No Data" label,
never an error or NaN.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from academy_analytics.analytics.windows import in_range
from academy_analytics.config import AttendanceBands
from academy_analytics.models.filters import DateRange
from academy_analytics.models.match import Match, MatchSelection
from academy_analytics.models.session import AttendanceRecord, Session


class AttendanceLabel(str, Enum):
    """Attendance banding shown next to a rate."""

    STRONG = "Strong"
    MODERATE = "Moderate"
    NEEDS_WORK = "Needs Work"
    NO_DATA = "No Data"


@dataclass(frozen=True)
class AttendanceRate:
    """Attendance rate for one player over a window."""

    rate: int
    label: AttendanceLabel
    attended: int = 0
    scheduled: int = 0


@dataclass(frozen=True)
class MatchExposure:
    """Share of available squad matches a player was selected for."""

    exposure_rate: int = 0
    available: int = 0
    selected: int = 0


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """
    Round with halves going up (2.5 -> 3), unlike Python's banker's rounding.

    Returns an int when ``ndigits`` is 0.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def safe_percentage(numerator: float, denominator: float) -> int:
    """Whole-number percentage, 0 when the denominator is 0."""
    if denominator <= 0:
        return 0
    return round_half_up(100 * numerator / denominator)


def attendance_label(rate: int, bands: AttendanceBands | None = None) -> AttendanceLabel:
    """Band a rate into Strong / Moderate / Needs Work."""
    bands = bands or AttendanceBands()
    if rate >= bands.strong:
        return AttendanceLabel.STRONG
    if rate >= bands.moderate:
        return AttendanceLabel.MODERATE
    return AttendanceLabel.NEEDS_WORK


def calculate_attendance_rate(
    player_id: str,
    sessions: Iterable[Session],
    attendance: Iterable[AttendanceRecord],
    date_range: DateRange | None = None,
    bands: AttendanceBands | None = None,
) -> AttendanceRate:
    """
    Calculate a player's attendance rate.

    The denominator is every session in the window, not just sessions where
    the player has a record, so unmarked sessions count against the player.

    Args:
        player_id: Player to score
        sessions: All sessions in the dataset
        attendance: All attendance records in the dataset
        date_range: Optional inclusive window
        bands: Label thresholds

    Returns:
        AttendanceRate; rate 0 and label "No Data" when no sessions are in range
    """
    session_ids = {s.id for s in sessions if in_range(s.date, date_range)}
    scheduled = len(session_ids)
    if scheduled == 0:
        return AttendanceRate(rate=0, label=AttendanceLabel.NO_DATA)

    attended = sum(
        1
        for record in attendance
        if record.player_id == player_id
        and record.session_id in session_ids
        and record.is_present
    )
    rate = safe_percentage(attended, scheduled)
    return AttendanceRate(
        rate=rate,
        label=attendance_label(rate, bands),
        attended=attended,
        scheduled=scheduled,
    )


def calculate_match_exposure(
    player_id: str,
    squad_id: str | None,
    matches: Iterable[Match],
    selections: Iterable[MatchSelection],
    date_range: DateRange | None = None,
) -> MatchExposure:
    """
    Calculate a player's match exposure within their squad's fixtures.

    Args:
        player_id: Player to score
        squad_id: The player's squad; matches of other squads are ignored
        matches: All matches in the dataset
        selections: All selection decisions in the dataset
        date_range: Optional inclusive window

    Returns:
        MatchExposure; all zeros when the squad has no matches in range
    """
    match_ids = {
        m.id for m in matches if m.squad_id == squad_id and in_range(m.date, date_range)
    }
    available = len(match_ids)
    if available == 0:
        return MatchExposure()

    selected = sum(
        1
        for selection in selections
        if selection.player_id == player_id
        and selection.match_id in match_ids
        and selection.is_selected
    )
    return MatchExposure(
        exposure_rate=safe_percentage(selected, available),
        available=available,
        selected=selected,
    )
