"""
Tests for Academy Data Models

Tests for record validation, dataset invariants and lookups.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from academy_analytics.models import (
    AttendanceRecord,
    Dataset,
    EntityNotFoundError,
    Feedback,
    Match,
    Player,
    PlayerStatus,
    Session,
    WellnessEntry,
    to_naive_utc,
    utc_now,
)
from academy_analytics.models.filters import AnalyticsFilters


class TestPlayer:
    """Tests for Player model."""

    def test_defaults_to_active(self):
        """Test default status."""
        player = Player(id="p", full_name="Test Player")
        assert player.status == PlayerStatus.ACTIVE
        assert player.is_active

    def test_active_player_cannot_have_exit_date(self):
        """Test the exit-date invariant."""
        with pytest.raises(ValidationError):
            Player(id="p", full_name="Test Player", exited_at=datetime(2025, 1, 1))

    def test_inactive_player_with_exit_date(self):
        """Test inactive players may carry an exit date."""
        player = Player(
            id="p", full_name="Test Player", status="INACTIVE", exited_at=datetime(2025, 1, 1)
        )
        assert not player.is_active

    def test_models_are_frozen(self):
        """Test immutability."""
        player = Player(id="p", full_name="Test Player")
        with pytest.raises(ValidationError):
            player.full_name = "Renamed"


class TestMatch:
    """Tests for Match model."""

    def test_competition_and_opponent(self):
        """Test splitting a fixture name on the en dash."""
        match = Match(id="m", date=datetime(2025, 11, 8), competition_name="Youth League – FC Bengaluru")
        assert match.competition == "Youth League"
        assert match.opponent == "FC Bengaluru"

    def test_opponent_defaults_to_tbd(self):
        """Test a fixture name without an opponent."""
        match = Match(id="m", date=datetime(2025, 11, 8), competition_name="Karnataka D Division")
        assert match.competition == "Karnataka D Division"
        assert match.opponent == "TBD"


class TestWellnessEntry:
    """Tests for WellnessEntry model."""

    @pytest.mark.parametrize("exertion", [0, 6])
    def test_exertion_out_of_range(self, exertion):
        """Test exertion must be 1-5."""
        with pytest.raises(ValidationError):
            WellnessEntry(
                id="w", player_id="p", date=datetime(2025, 11, 4), exertion=exertion, energy="LOW"
            )


class TestTimestamps:
    """Tests for timestamp normalisation on record fields."""

    def test_aware_values_become_naive_utc(self):
        """Test offsets are applied and dropped."""
        session = Session(id="s", date="2025-11-30T22:30:00+05:30")
        feedback = Feedback(
            id="f", player_id="p", coach_id="c", month=11, year=2025,
            created_at="2025-11-25T10:00:00Z",
        )
        assert session.date == datetime(2025, 11, 30, 17)
        assert session.date.tzinfo is None
        assert feedback.created_at == datetime(2025, 11, 25, 10)

    def test_naive_values_unchanged(self):
        """Test naive timestamps are taken as UTC already."""
        record = AttendanceRecord(
            id="a", session_id="s", player_id="p", status="PRESENT",
            recorded_at=datetime(2025, 11, 2, 18),
        )
        assert record.recorded_at == datetime(2025, 11, 2, 18)

    def test_optional_fields(self):
        """Test optional timestamps stay optional and still normalise."""
        player = Player(
            id="p", full_name="Test Player", status="INACTIVE",
            exited_at=datetime(2025, 3, 1, 1, tzinfo=timezone(timedelta(hours=2))),
        )
        assert player.joined_at is None
        assert player.exited_at == datetime(2025, 2, 28, 23)

    def test_to_naive_utc(self):
        """Test the conversion helper directly."""
        assert to_naive_utc(datetime(2025, 1, 1, tzinfo=timezone.utc)) == datetime(2025, 1, 1)
        assert to_naive_utc(datetime(2025, 1, 1)) == datetime(2025, 1, 1)
        assert utc_now().tzinfo is None


class TestDatasetInvariants:
    """Tests for cross-collection invariants."""

    def test_valid_snapshot(self, academy):
        """Test the shared fixture validates."""
        assert len(academy.players) == 4
        assert len(academy.sessions) == 5

    def test_empty_snapshot(self):
        """Test every collection is optional."""
        dataset = Dataset()
        assert dataset.players == []
        assert dataset.active_players() == []

    def test_duplicate_attendance_rejected(self, academy_records):
        """Test at most one attendance record per (session, player)."""
        academy_records["attendance"].append(
            {"id": "att-dup", "session_id": "sess-1", "player_id": "player-1", "status": "ABSENT"}
        )
        with pytest.raises(ValidationError, match="Duplicate attendance"):
            Dataset.model_validate(academy_records)

    def test_duplicate_selection_rejected(self, academy_records):
        """Test at most one selection per (match, player)."""
        academy_records["selections"].append(
            {"id": "sel-dup", "match_id": "match-1", "player_id": "player-1",
             "status": "NOT_SELECTED"}
        )
        with pytest.raises(ValidationError, match="Duplicate match selections"):
            Dataset.model_validate(academy_records)

    def test_pathway_orders_unique(self, academy_records):
        """Test pathway level orders must be unique."""
        academy_records["pathway_levels"][1]["order"] = 1
        with pytest.raises(ValidationError, match="orders must be unique"):
            Dataset.model_validate(academy_records)


class TestDatasetLookups:
    """Tests for Dataset lookup helpers."""

    def test_get_player(self, academy):
        """Test resolving a player."""
        assert academy.get_player("player-1").full_name == "Arjun Rao"

    def test_get_player_not_found(self, academy):
        """Test unknown player id."""
        with pytest.raises(EntityNotFoundError, match="Player not found: ghost"):
            academy.get_player("ghost")

    def test_not_found_is_value_error(self, academy):
        """Test callers catching ValueError still see lookups fail."""
        with pytest.raises(ValueError):
            academy.get_coach("ghost")

    def test_optional_lookups(self, academy):
        """Test lookups that return None."""
        assert academy.find_squad("squad-u17").name == "U17 Boys"
        assert academy.find_squad("ghost") is None
        assert academy.find_centre(None) is None
        assert academy.squad_name("ghost") == ""

    def test_next_pathway_level(self, academy):
        """Test the next level is order + 1."""
        youth = academy.find_pathway_level("lvl-youth")
        assert academy.next_pathway_level(youth).name == "Karnataka D Division"

        top = academy.find_pathway_level("lvl-c-div")
        assert academy.next_pathway_level(top) is None

        assert academy.next_pathway_level(None).id == "lvl-youth"

    def test_active_players(self, academy):
        """Test inactive players are excluded."""
        assert [p.id for p in academy.active_players()] == ["player-1", "player-2", "player-5"]


class TestAnalyticsFilters:
    """Tests for filter helpers."""

    def test_with_player(self):
        """Test scoping a copy to one player."""
        filters = AnalyticsFilters(centre_id="centre-3lok")
        scoped = filters.with_player("player-1")
        assert scoped.player_id == "player-1"
        assert scoped.centre_id == "centre-3lok"
        assert filters.player_id is None
