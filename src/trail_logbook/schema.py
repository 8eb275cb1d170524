"""Tablas de tipos por campo y conjuntos de valores permitidos."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DIFFICULTY_LEVELS: tuple[str, ...] = ("Easy", "Moderate", "Hard", "Extreme")
HIKE_STATUSES: tuple[str, ...] = ("active", "paused", "completed", "draft")
# Display order for messages.
GOAL_CATEGORY_ORDER: tuple[str, ...] = (
    "distance",
    "time",
    "elevation",
    "hikes",
    "streak",
    "custom",
)
GOAL_CATEGORIES: frozenset[str] = frozenset(GOAL_CATEGORY_ORDER)

HIKE_SCHEMA: Mapping[str, str] = MappingProxyType(
    {
        "title": "string",
        "location": "string",
        "route": "string",
        "date": "timestamp",
        "startTime": "timestamp",
        "endTime": "timestamp",
        "duration": "number",
        "distance": "number",
        "elevation": "number",
        "difficulty": "string",
        "weather": "string",
        "notes": "string",
        "photos": "number",
        "waypoints": "array",
        "startLocation": "object",
        "endLocation": "object",
        "routeMap": "string",
        "gpsTrack": "array",
        "createdAt": "timestamp",
        "updatedAt": "timestamp",
        "userId": "string",
        "status": "string",
        "pinned": "boolean",
        "shared": "boolean",
        "accomplishments": "array",
    }
)

WAYPOINT_SCHEMA: Mapping[str, str] = MappingProxyType(
    {
        "latitude": "number",
        "longitude": "number",
        "elevation": "number",
        "timestamp": "timestamp",
        "description": "string",
        "type": "string",
    }
)

LOCATION_SCHEMA: Mapping[str, str] = MappingProxyType(
    {
        "latitude": "number",
        "longitude": "number",
        "elevation": "number",
        "accuracy": "number",
        "timestamp": "timestamp",
    }
)

LATITUDE_RANGE: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: tuple[float, float] = (-180.0, 180.0)

MIN_PASSWORD_LENGTH = 6
MIN_REALISTIC_ELEVATION = -500
