"""
Attendance Streaks

Longest run of consecutive attended sessions over a player's full history.
"""

from __future__ import annotations

from typing import Iterable

from academy_analytics.models.session import AttendanceRecord, Session


def longest_attendance_streak(
    player_id: str,
    sessions: Iterable[Session],
    attendance: Iterable[AttendanceRecord],
) -> int:
    """
    Count the longest run of consecutive sessions the player attended.

    Sessions are walked in chronological order. A session with no record
    for the player breaks the streak exactly like an ABSENT mark.

    Returns:
        Streak length in sessions (not calendar days)
    """
    attended = {
        record.session_id
        for record in attendance
        if record.player_id == player_id and record.is_present
    }

    longest = 0
    current = 0
    for session in sorted(sessions, key=lambda s: s.date):
        if session.id in attended:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest
