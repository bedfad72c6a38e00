"""
Tests for Attendance Streaks
"""

from datetime import datetime, timedelta, timezone

from academy_analytics.analytics.streaks import longest_attendance_streak
from academy_analytics.models.session import AttendanceRecord, Session


def _session(session_id, day):
    return Session(id=session_id, date=datetime(2025, 11, day, 17))


def _mark(session_id, status="PRESENT"):
    return AttendanceRecord(
        id=f"att-{session_id}", session_id=session_id, player_id="player-1", status=status
    )


class TestLongestStreak:
    """Tests for longest_attendance_streak."""

    def test_unmarked_session_breaks_streak(self, academy):
        """Test that a session without a record resets the run."""
        assert longest_attendance_streak("player-1", academy.sessions, academy.attendance) == 2

    def test_absence_breaks_streak(self, academy):
        """Test that an ABSENT mark resets the run."""
        assert longest_attendance_streak("player-5", academy.sessions, academy.attendance) == 1

    def test_no_attendance(self, academy):
        """Test a player with no records."""
        assert longest_attendance_streak("player-9", academy.sessions, academy.attendance) == 0

    def test_sessions_walked_chronologically(self):
        """Test that input order does not matter."""
        sessions = [_session("s3", 7), _session("s1", 3), _session("s4", 9), _session("s2", 5)]
        attendance = [_mark("s1"), _mark("s2"), _mark("s3"), _mark("s4", "ABSENT")]
        assert longest_attendance_streak("player-1", sessions, attendance) == 3

    def test_empty_history(self):
        """Test no sessions at all."""
        assert longest_attendance_streak("player-1", [], []) == 0

    def test_present_everywhere_equals_session_count(self):
        """Test a perfect record streaks across every session."""
        sessions = [_session(f"s{day}", day) for day in range(1, 8)]
        attendance = [_mark(s.id) for s in sessions]
        assert longest_attendance_streak("player-1", sessions, attendance) == len(sessions)

    def test_absent_everywhere_is_zero(self):
        """Test a player absent from every session."""
        sessions = [_session(f"s{day}", day) for day in range(1, 8)]
        attendance = [_mark(s.id, "ABSENT") for s in sessions]
        assert longest_attendance_streak("player-1", sessions, attendance) == 0

    def test_two_of_three_weekday_sessions(self, weekday_dataset):
        """Test Mon and Wed attended, Fri missed."""
        assert longest_attendance_streak(
            "player-1", weekday_dataset.sessions, weekday_dataset.attendance
        ) == 2

    def test_mixed_naive_and_aware_dates(self):
        """Test aware session dates are ordered on their UTC instant."""
        ist = timezone(timedelta(hours=5, minutes=30))
        sessions = [
            _session("s0", 3),
            Session(id="s2", date=datetime(2025, 11, 5, 17, tzinfo=timezone.utc)),
            # 21:00 IST is 15:30 UTC, so s1 comes before s2
            Session(id="s1", date=datetime(2025, 11, 5, 21, tzinfo=ist)),
            _session("s3", 7),
            Session(id="s4", date="2025-11-09T17:00:00Z"),
        ]
        attendance = [_mark("s0"), _mark("s1", "ABSENT"), _mark("s2"), _mark("s3"), _mark("s4")]
        assert longest_attendance_streak("player-1", sessions, attendance) == 3
