"""
Pytest Configuration and Fixtures

Shared fixtures and configuration for the Academy Analytics test suite.

The ``academy`` snapshot covers two centres over November 2025:

    sess-1  Sun 2025-11-02  3lok     u17  coach-1   p1 P, p5 P
    sess-2  Tue 2025-11-04  3lok     u17  coach-1   p1 P, p5 A
    sess-3  Wed 2025-11-05  depot18  u21  coach-1   p2 P
    sess-4  Sun 2025-11-09  3lok     u17  coach-1   p1 P, p5 P
    sess-5  Wed 2025-11-12  depot18  u21  coach-2   p2 A
"""

from datetime import datetime
from typing import Any

import pytest

from academy_analytics.models.dataset import Dataset


@pytest.fixture
def now() -> datetime:
    """Reference time used for now-relative windows."""
    return datetime(2025, 12, 1, 12, 0)


@pytest.fixture
def academy_records() -> dict[str, Any]:
    """Raw snapshot records, as a data-access layer would supply them."""
    return {
        "centres": [
            {
                "id": "centre-3lok",
                "name": "3lok Football Fitness Hub",
                "short_name": "3LOK",
                "city": "Bengaluru",
            },
            {
                "id": "centre-depot18",
                "name": "Depot18 - Sports",
                "short_name": "DEPOT18",
                "city": "Bengaluru",
            },
        ],
        "squads": [
            {"id": "squad-u17", "name": "U17 Boys", "level_key": "YOUTH"},
            {"id": "squad-u21", "name": "U21 Boys", "level_key": "D_DIV"},
        ],
        "pathway_levels": [
            {
                "id": "lvl-youth",
                "key": "YOUTH",
                "name": "Youth Leagues",
                "order": 1,
                "criteria": {"min_attendance_rate": 75, "min_tenure_months": 3},
            },
            {
                "id": "lvl-d-div",
                "key": "D_DIV",
                "name": "Karnataka D Division",
                "order": 2,
                "criteria": {
                    "min_attendance_rate": 80,
                    "min_tenure_months": 6,
                    "coach_recommendation_required": True,
                },
            },
            {
                "id": "lvl-c-div",
                "key": "C_DIV",
                "name": "Karnataka C Division",
                "order": 3,
                "criteria": {
                    "min_attendance_rate": 85,
                    "min_matches": 5,
                    "coach_recommendation_required": True,
                },
            },
        ],
        "coaches": [
            {
                "id": "coach-1",
                "full_name": "Nitesh Sharma",
                "centre_ids": ["centre-3lok", "centre-depot18"],
            },
            {"id": "coach-2", "full_name": "Dhruv Katyal", "centre_ids": ["centre-depot18"]},
            {"id": "coach-3", "full_name": "Meera Pillai", "centre_ids": []},
        ],
        "players": [
            {
                "id": "player-1",
                "full_name": "Arjun Rao",
                "centre_id": "centre-3lok",
                "squad_id": "squad-u17",
                "pathway_level_id": "lvl-youth",
                "joined_at": "2023-07-01T00:00:00",
                "status": "ACTIVE",
            },
            {
                "id": "player-2",
                "full_name": "Karan Mehta",
                "centre_id": "centre-depot18",
                "squad_id": "squad-u21",
                "pathway_level_id": "lvl-d-div",
                "joined_at": "2022-09-01T00:00:00",
                "status": "ACTIVE",
            },
            {
                "id": "player-5",
                "full_name": "Rohit Nair",
                "centre_id": "centre-3lok",
                "squad_id": "squad-u17",
                "pathway_level_id": "lvl-youth",
                "joined_at": "2024-01-10T00:00:00",
                "status": "ACTIVE",
            },
            {
                "id": "player-9",
                "full_name": "Vikram Iyer",
                "centre_id": "centre-3lok",
                "squad_id": "squad-u17",
                "pathway_level_id": "lvl-youth",
                "joined_at": "2023-01-15T00:00:00",
                "exited_at": "2025-06-30T00:00:00",
                "status": "INACTIVE",
            },
        ],
        "sessions": [
            {"id": "sess-1", "date": datetime(2025, 11, 2, 17, 0), "centre_id": "centre-3lok",
             "squad_id": "squad-u17", "coach_id": "coach-1", "type": "TRAINING"},
            {"id": "sess-2", "date": datetime(2025, 11, 4, 17, 0), "centre_id": "centre-3lok",
             "squad_id": "squad-u17", "coach_id": "coach-1", "type": "TRAINING"},
            {"id": "sess-3", "date": datetime(2025, 11, 5, 18, 0), "centre_id": "centre-depot18",
             "squad_id": "squad-u21", "coach_id": "coach-1", "type": "TRAINING"},
            {"id": "sess-4", "date": datetime(2025, 11, 9, 17, 0), "centre_id": "centre-3lok",
             "squad_id": "squad-u17", "coach_id": "coach-1", "type": "TRAINING"},
            {"id": "sess-5", "date": datetime(2025, 11, 12, 18, 0), "centre_id": "centre-depot18",
             "squad_id": "squad-u21", "coach_id": "coach-2", "type": "FITNESS"},
        ],
        "attendance": [
            {"id": "att-1", "session_id": "sess-1", "player_id": "player-1", "status": "PRESENT"},
            {"id": "att-2", "session_id": "sess-1", "player_id": "player-5", "status": "PRESENT"},
            {"id": "att-3", "session_id": "sess-2", "player_id": "player-1", "status": "PRESENT"},
            {"id": "att-4", "session_id": "sess-2", "player_id": "player-5", "status": "ABSENT"},
            {"id": "att-5", "session_id": "sess-3", "player_id": "player-2", "status": "PRESENT"},
            {"id": "att-6", "session_id": "sess-4", "player_id": "player-1", "status": "PRESENT"},
            {"id": "att-7", "session_id": "sess-4", "player_id": "player-5", "status": "PRESENT"},
            {"id": "att-8", "session_id": "sess-5", "player_id": "player-2", "status": "ABSENT"},
        ],
        "matches": [
            {"id": "match-1", "date": datetime(2025, 11, 8, 10, 0),
             "competition_name": "Youth League – FC Bengaluru",
             "squad_id": "squad-u17", "centre_id": "centre-3lok"},
            {"id": "match-2", "date": datetime(2025, 11, 15, 10, 0),
             "competition_name": "Youth League – Kickstart FC",
             "squad_id": "squad-u17", "centre_id": "centre-3lok"},
            {"id": "match-3", "date": datetime(2025, 11, 20, 16, 0),
             "competition_name": "Karnataka D Division",
             "squad_id": "squad-u21", "centre_id": "centre-depot18"},
        ],
        "selections": [
            {"id": "sel-1", "match_id": "match-1", "player_id": "player-1",
             "status": "SELECTED", "reason_category": "SQUAD_ROTATION"},
            {"id": "sel-2", "match_id": "match-2", "player_id": "player-1",
             "status": "SELECTED", "reason_category": "TACTICAL"},
            {"id": "sel-3", "match_id": "match-1", "player_id": "player-5",
             "status": "NOT_SELECTED", "reason_category": "TACTICAL"},
            {"id": "sel-4", "match_id": "match-2", "player_id": "player-5",
             "status": "SELECTED", "reason_category": "SQUAD_ROTATION"},
            {"id": "sel-5", "match_id": "match-3", "player_id": "player-2",
             "status": "NOT_SELECTED", "reason_category": "DISCIPLINE"},
        ],
        "wellness": [
            {"id": "well-1", "player_id": "player-1", "date": datetime(2025, 11, 2, 19, 0),
             "session_id": "sess-1", "exertion": 4, "energy": "HIGH", "note": "Felt sharp"},
            {"id": "well-2", "player_id": "player-1", "date": datetime(2025, 11, 4, 19, 0),
             "session_id": "sess-2", "exertion": 4, "energy": "MEDIUM"},
            {"id": "well-3", "player_id": "player-1", "date": datetime(2025, 11, 9, 19, 0),
             "session_id": "sess-4", "exertion": 5, "energy": "MEDIUM", "note": "Tough session"},
            {"id": "well-4", "player_id": "player-5", "date": datetime(2025, 11, 4, 19, 0),
             "session_id": "sess-2", "exertion": 3, "energy": "LOW", "note": "Tired after school"},
            {"id": "well-5", "player_id": "player-5", "date": datetime(2025, 11, 9, 19, 0),
             "session_id": "sess-4", "exertion": 3, "energy": "MEDIUM"},
            {"id": "well-6", "player_id": "player-2", "date": datetime(2025, 11, 5, 20, 0),
             "session_id": "sess-3", "exertion": 4, "energy": "LOW", "note": "Exams + training"},
        ],
        "feedback": [
            {"id": "fb-1", "player_id": "player-1", "coach_id": "coach-1", "month": 11,
             "year": 2025, "strengths": ["Excellent training intensity"],
             "improvements": ["Weak foot passing under pressure"],
             "focus_goal": "Maintain 85%+ attendance", "status": "PUBLISHED",
             "created_at": datetime(2025, 11, 20, 9, 0)},
            {"id": "fb-2", "player_id": "player-5", "coach_id": "coach-1", "month": 11,
             "year": 2025, "status": "DRAFT", "created_at": datetime(2025, 11, 25, 9, 0)},
            {"id": "fb-3", "player_id": "player-2", "coach_id": "coach-1", "month": 7,
             "year": 2025, "status": "PUBLISHED", "created_at": datetime(2025, 8, 1, 9, 0)},
        ],
    }


@pytest.fixture
def academy(academy_records: dict[str, Any]) -> Dataset:
    """Validated academy snapshot."""
    return Dataset.model_validate(academy_records)


@pytest.fixture
def weekday_dataset() -> Dataset:
    """
    Three sessions in one week (Mon, Wed, Fri); player-1 attends the first two.
    """
    return Dataset.model_validate(
        {
            "players": [{"id": "player-1", "full_name": "Arjun Rao", "squad_id": "squad-u17"}],
            "sessions": [
                {"id": "s1", "date": datetime(2025, 11, 3, 17, 0)},
                {"id": "s2", "date": datetime(2025, 11, 5, 17, 0)},
                {"id": "s3", "date": datetime(2025, 11, 7, 17, 0)},
            ],
            "attendance": [
                {"id": "a1", "session_id": "s1", "player_id": "player-1", "status": "PRESENT"},
                {"id": "a2", "session_id": "s2", "player_id": "player-1", "status": "PRESENT"},
            ],
        }
    )
