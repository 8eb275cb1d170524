"""Evaluación de insignias por umbrales sobre estadísticas agregadas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from trail_logbook.model import Badge


@dataclass(frozen=True)
class BadgeRule:
    """Earned when ``metric >= threshold``."""

    name: str
    description: str
    metric: str
    threshold: float


BADGE_RULES: tuple[BadgeRule, ...] = (
    BadgeRule("First Hike", "Completed your first hike", "total_hikes", 1),
    BadgeRule("10K Walker", "Walked 10 kilometers total", "total_distance", 10),
    BadgeRule("100K Walker", "Walked 100 kilometers total", "total_distance", 100),
    BadgeRule(
        "Peak Climber", "Climbed 1000 meters total elevation", "total_elevation", 1000
    ),
    BadgeRule(
        "Mountain Climber",
        "Climbed 5000 meters total elevation",
        "total_elevation",
        5000,
    ),
    BadgeRule("Regular Hiker", "Completed 10 hikes", "total_hikes", 10),
    BadgeRule("Hiking Enthusiast", "Completed 50 hikes", "total_hikes", 50),
    BadgeRule("Consistent Hiker", "Maintained a 5-hike streak", "current_streak", 5),
)

_CAMEL_NAMES = {
    "total_hikes": "totalHikes",
    "total_distance": "totalDistance",
    "total_elevation": "totalElevation",
    "current_streak": "currentStreak",
}


def evaluate_badges(stats: Any, *, now: datetime | None = None) -> list[Badge]:
    """Return every badge whose threshold the stats reach.

    Tiers are independent: 150 km earns both distance badges. ``stats``
    may be a mapping (snake_case or camelCase keys) or an object with
    snake_case attributes; missing metrics count as 0.
    """
    earned_at = now or datetime.now(tz=timezone.utc)
    return [
        Badge(name=rule.name, description=rule.description, earned_at=earned_at)
        for rule in BADGE_RULES
        if _metric(stats, rule.metric) >= rule.threshold
    ]


def _metric(stats: Any, name: str) -> float:
    if isinstance(stats, Mapping):
        value = stats.get(name, stats.get(_CAMEL_NAMES[name]))
    else:
        value = getattr(stats, name, None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value
