from __future__ import annotations

from datetime import datetime, timezone

from trail_logbook.badges import BADGE_RULES, evaluate_badges
from trail_logbook.model import StatsSummary

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_evaluate_badges_multiple_tiers() -> None:
    badges = evaluate_badges(
        {"totalHikes": 15, "totalDistance": 150, "totalElevation": 2500, "currentStreak": 7},
        now=NOW,
    )
    names = [b.name for b in badges]
    assert names == [
        "First Hike",
        "10K Walker",
        "100K Walker",
        "Peak Climber",
        "Regular Hiker",
        "Consistent Hiker",
    ]
    assert badges[0].description == "Completed your first hike"
    assert all(b.earned_at == NOW for b in badges)


def test_evaluate_badges_top_tiers_and_thresholds_inclusive() -> None:
    badges = evaluate_badges(
        {"total_hikes": 50, "total_distance": 10, "total_elevation": 5000, "current_streak": 5}
    )
    names = {b.name for b in badges}
    assert {"Hiking Enthusiast", "Mountain Climber", "Consistent Hiker", "10K Walker"} <= names
    assert "100K Walker" not in names


def test_evaluate_badges_nothing_earned() -> None:
    assert evaluate_badges({}) == []
    assert evaluate_badges({"totalHikes": "lots"}) == []


def test_evaluate_badges_from_stats_object() -> None:
    stats = StatsSummary(
        total_hikes=1,
        total_distance=0,
        total_elevation=0,
        total_duration=0,
        by_difficulty={},
        by_status={},
    )
    assert [b.name for b in evaluate_badges(stats)] == ["First Hike"]


def test_badges_are_monotonic_in_stats() -> None:
    low = {"totalHikes": 10, "totalDistance": 20, "totalElevation": 1200, "currentStreak": 1}
    high = {k: v * 10 for k, v in low.items()}
    low_names = {b.name for b in evaluate_badges(low)}
    high_names = {b.name for b in evaluate_badges(high)}
    assert low_names <= high_names
    assert len(high_names) == len(BADGE_RULES)
