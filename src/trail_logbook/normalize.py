"""Construcción de registros canónicos de caminata y usuario."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from trail_logbook.model import (
    GeoPoint,
    HikeRecord,
    Preferences,
    UserRecord,
    UserStats,
    Waypoint,
)
from trail_logbook.parsers import (
    coerce_datetime,
    parse_distance,
    parse_duration,
    parse_elevation,
)
from trail_logbook.validators import as_document

DEFAULT_DIFFICULTY = "Easy"
DEFAULT_STATUS = "completed"


def process_hike_data(raw: Any, *, now: datetime | None = None) -> HikeRecord:
    """Build a canonical hike from arbitrary input.

    Never raises: missing fields take defaults, numbers go through the
    tolerant parsers. ``created_at`` is kept when supplied; ``updated_at``
    is always stamped with ``now``.

    Args:
        raw: Mapping in the hike document shape, a HikeRecord, or anything.
        now: Current time (defaults to UTC now).

    Returns:
        Canonical HikeRecord.
    """
    stamp = now or datetime.now(tz=timezone.utc)
    doc = as_document(raw)
    if doc is None:
        return HikeRecord(
            title="",
            location="",
            distance=0,
            elevation=0,
            difficulty=DEFAULT_DIFFICULTY,
            status=DEFAULT_STATUS,
            created_at=stamp,
            updated_at=stamp,
        )

    return HikeRecord(
        title=_text(doc.get("title")),
        location=_text(doc.get("location")),
        route=_text(doc.get("route")),
        date=coerce_datetime(doc.get("date")),
        start_time=coerce_datetime(doc.get("startTime")),
        end_time=coerce_datetime(doc.get("endTime")),
        duration=parse_duration(doc.get("duration")),
        distance=parse_distance(doc.get("distance")),
        elevation=parse_elevation(doc.get("elevation")),
        difficulty=doc.get("difficulty") or DEFAULT_DIFFICULTY,
        weather=_text(doc.get("weather")),
        notes=_text(doc.get("notes")),
        waypoints=tuple(_points(doc.get("waypoints"), _waypoint)),
        start_location=_geo_point(doc.get("startLocation")),
        end_location=_geo_point(doc.get("endLocation")),
        route_map=_text(doc.get("routeMap")),
        gps_track=tuple(_points(doc.get("gpsTrack"), _geo_point)),
        status=doc.get("status") or DEFAULT_STATUS,
        pinned=bool(doc.get("pinned")),
        shared=bool(doc.get("shared")),
        accomplishments=_accomplishments(doc.get("accomplishments")),
        created_at=doc.get("createdAt") or stamp,
        updated_at=stamp,
        user_id=doc.get("userId") or None,
    )


def process_user_data(raw: Any, *, now: datetime | None = None) -> UserRecord:
    """Build a canonical user profile with per-key preference defaults."""
    stamp = now or datetime.now(tz=timezone.utc)
    doc = as_document(raw)
    if doc is None:
        return UserRecord(
            email="",
            display_name="",
            created_at=stamp,
            updated_at=stamp,
        )

    prefs = doc.get("preferences")
    if not isinstance(prefs, Mapping):
        prefs = {}
    defaults = Preferences()
    return UserRecord(
        email=_text(doc.get("email")),
        display_name=_text(doc.get("displayName")),
        bio=_text(doc.get("bio")),
        location=doc.get("location") or None,
        photo_url=_text(doc.get("photoURL")),
        preferences=Preferences(
            difficulty=prefs.get("difficulty") or defaults.difficulty,
            terrain=prefs.get("terrain") or defaults.terrain,
            distance=prefs.get("distance") or defaults.distance,
            units=prefs.get("units") or defaults.units,
            privacy=prefs.get("privacy") or defaults.privacy,
        ),
        # Stats are owned by the aggregator; a fresh profile starts at zero.
        stats=UserStats(),
        created_at=doc.get("createdAt") or stamp,
        updated_at=stamp,
    )


def _text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def _accomplishments(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value else ()
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(a) for a in value if a is not None)


def _points(items: Any, build: Any) -> list[Any]:
    if not isinstance(items, (list, tuple)):
        return []
    out = []
    for item in items:
        point = build(item)
        if point is not None:
            out.append(point)
    return out


def _coordinates(item: Any) -> tuple[Mapping[str, Any], float, float] | None:
    doc = as_document(item)
    if doc is None:
        return None
    lat, lon = doc.get("latitude"), doc.get("longitude")
    if not _is_number(lat) or not _is_number(lon):
        return None
    return doc, float(lat), float(lon)


def _waypoint(item: Any) -> Waypoint | None:
    found = _coordinates(item)
    if found is None:
        return None
    doc, lat, lon = found
    return Waypoint(
        latitude=lat,
        longitude=lon,
        elevation=_optional_number(doc.get("elevation")),
        timestamp=coerce_datetime(doc.get("timestamp")),
        description=_text(doc.get("description")),
        type=_text(doc.get("type")),
    )


def _geo_point(item: Any) -> GeoPoint | None:
    found = _coordinates(item)
    if found is None:
        return None
    doc, lat, lon = found
    return GeoPoint(
        latitude=lat,
        longitude=lon,
        elevation=_optional_number(doc.get("elevation")),
        accuracy=_optional_number(doc.get("accuracy")),
        timestamp=coerce_datetime(doc.get("timestamp")),
    )


def _optional_number(value: Any) -> float | None:
    return float(value) if _is_number(value) else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
