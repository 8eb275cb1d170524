"""Modelos tipados para caminatas, usuarios, metas y estadísticas derivadas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class GeoPoint:
    """GPS position (start/end location or a gps track sample)."""

    latitude: float
    longitude: float
    elevation: float | None = None
    accuracy: float | None = None
    timestamp: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        return _drop_none(
            {
                "latitude": self.latitude,
                "longitude": self.longitude,
                "elevation": self.elevation,
                "accuracy": self.accuracy,
                "timestamp": self.timestamp,
            }
        )


@dataclass(frozen=True)
class Waypoint:
    """GPS waypoint recorded along a hike."""

    latitude: float
    longitude: float
    elevation: float | None = None
    timestamp: datetime | None = None
    description: str = ""
    type: str = ""

    def to_document(self) -> dict[str, Any]:
        return _drop_none(
            {
                "latitude": self.latitude,
                "longitude": self.longitude,
                "elevation": self.elevation,
                "timestamp": self.timestamp,
                "description": self.description,
                "type": self.type,
            }
        )


@dataclass(frozen=True)
class HikeRecord:
    """Canonical hike record (logged or planned)."""

    title: str
    location: str
    distance: float
    elevation: float
    difficulty: str
    status: str
    created_at: Any
    updated_at: datetime
    route: str = ""
    date: datetime | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: float = 0
    weather: str = ""
    notes: str = ""
    waypoints: tuple[Waypoint, ...] = ()
    start_location: GeoPoint | None = None
    end_location: GeoPoint | None = None
    route_map: str = ""
    gps_track: tuple[GeoPoint, ...] = ()
    user_id: str | None = None
    pinned: bool = False
    shared: bool = False
    accomplishments: tuple[str, ...] = ()

    def to_document(self) -> dict[str, Any]:
        """Return the camelCase document shape used by the hike store."""
        return {
            "title": self.title,
            "location": self.location,
            "route": self.route,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "duration": self.duration,
            "distance": self.distance,
            "elevation": self.elevation,
            "difficulty": self.difficulty,
            "weather": self.weather,
            "notes": self.notes,
            "waypoints": [w.to_document() for w in self.waypoints],
            "startLocation": _point_doc(self.start_location),
            "endLocation": _point_doc(self.end_location),
            "routeMap": self.route_map,
            "gpsTrack": [p.to_document() for p in self.gps_track],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "userId": self.user_id,
            "status": self.status,
            "pinned": self.pinned,
            "shared": self.shared,
            "accomplishments": list(self.accomplishments),
        }


@dataclass(frozen=True)
class Preferences:
    """User hiking preferences; every key has its own default."""

    difficulty: str = "beginner"
    terrain: str = "mixed"
    distance: str = "short"
    units: str = "metric"
    privacy: str = "friends"


@dataclass(frozen=True)
class UserStats:
    """Stats block stored on a user profile."""

    total_hikes: int = 0
    total_distance: float = 0
    total_elevation: float = 0
    achievements: tuple[str, ...] = ()


@dataclass(frozen=True)
class UserRecord:
    """Canonical user profile."""

    email: str
    display_name: str
    created_at: Any
    updated_at: datetime
    bio: str = ""
    location: str | None = None
    photo_url: str = ""
    preferences: Preferences = field(default_factory=Preferences)
    stats: UserStats = field(default_factory=UserStats)

    def to_document(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "displayName": self.display_name,
            "bio": self.bio,
            "location": self.location,
            "photoURL": self.photo_url,
            "preferences": {
                "difficulty": self.preferences.difficulty,
                "terrain": self.preferences.terrain,
                "distance": self.preferences.distance,
                "units": self.preferences.units,
                "privacy": self.preferences.privacy,
            },
            "stats": {
                "totalHikes": self.stats.total_hikes,
                "totalDistance": self.stats.total_distance,
                "totalElevation": self.stats.total_elevation,
                "achievements": list(self.stats.achievements),
            },
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class GoalRecord:
    """User goal (normalized payload plus lifecycle fields once stored)."""

    title: str | None
    category: str | None
    target_value: float
    unit: str = ""
    description: str = ""
    target_date: datetime | None = None
    user_id: str | None = None
    current_progress: float = 0
    status: str = "active"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "targetValue": self.target_value,
            "unit": self.unit,
            "targetDate": self.target_date,
            "userId": self.user_id,
            "currentProgress": self.current_progress,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of any validator: validity flag plus every error found."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.valid

    def to_document(self) -> dict[str, Any]:
        return {"valid": self.valid, "isValid": self.valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class StatsSummary:
    """Totals and counters recomputed from a hike collection."""

    total_hikes: int
    total_distance: float
    total_elevation: float
    total_duration: float
    by_difficulty: dict[str, int]
    by_status: dict[str, int]

    def to_document(self) -> dict[str, Any]:
        return {
            "totalHikes": self.total_hikes,
            "totalDistance": self.total_distance,
            "totalElevation": self.total_elevation,
            "totalDuration": self.total_duration,
            "byDifficulty": dict(self.by_difficulty),
            "byStatus": dict(self.by_status),
        }


@dataclass(frozen=True)
class StreakInfo:
    current_streak: int = 0
    longest_streak: int = 0

    def to_document(self) -> dict[str, Any]:
        return {
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
        }


@dataclass(frozen=True)
class MonthlyActivity:
    """One calendar month bucket ("YYYY-MM")."""

    month: str
    hikes: int
    distance: float

    def to_document(self) -> dict[str, Any]:
        return {"month": self.month, "hikes": self.hikes, "distance": self.distance}


@dataclass(frozen=True)
class Badge:
    """Achievement derived from stats at evaluation time."""

    name: str
    description: str
    earned_at: datetime

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "earnedAt": self.earned_at,
        }


@dataclass(frozen=True)
class LogbookSummary:
    """Every derived view of a hike collection, computed together."""

    stats: StatsSummary
    streaks: StreakInfo
    monthly: list[MonthlyActivity]
    badges: list[Badge]

    def to_document(self) -> dict[str, Any]:
        return {
            "stats": self.stats.to_document(),
            "streaks": self.streaks.to_document(),
            "monthly": [m.to_document() for m in self.monthly],
            "badges": [b.to_document() for b in self.badges],
        }


def _point_doc(point: GeoPoint | None) -> dict[str, Any] | None:
    return point.to_document() if point is not None else None


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}
