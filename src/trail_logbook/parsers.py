"""Conversión tolerante de valores crudos (números con unidades, fechas)."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as date_parser

_UNSIGNED_JUNK = re.compile(r"[^\d.]")
_SIGNED_JUNK = re.compile(r"[^\d.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_distance(value: Any) -> float:
    """Parse a distance in km ("5.5 km", "Distance: 15.3 kilometers") or 0."""
    return _parse_number(value, _UNSIGNED_JUNK)


def parse_elevation(value: Any) -> float:
    """Parse an elevation in meters keeping its sign ("-50m" -> -50) or 0."""
    return _parse_number(value, _SIGNED_JUNK)


def parse_duration(value: Any) -> float:
    """Parse a duration (hours or minutes, unit not enforced) or 0."""
    return _parse_number(value, _UNSIGNED_JUNK)


def _parse_number(value: Any, junk: re.Pattern[str]) -> float:
    """Coerce any scalar to a finite number; unparsable input gives 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    residual = junk.sub("", str(value))
    # Like a float prefix scan: "5.5.3" -> 5.5, "10-20" -> 10.
    match = _LEADING_NUMBER.match(residual)
    if not match:
        return 0
    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else 0


def coerce_datetime(value: Any) -> datetime | None:
    """Resolve a timestamp-like value to an aware datetime, or None.

    Accepts datetime/date instances, parseable date text and epoch
    milliseconds. Naive values are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return _as_utc(date_parser.parse(text))
        except (ValueError, OverflowError):
            return None
    return None


def is_timestamp_like(value: Any) -> bool:
    """True for date/datetime instances and any text (format not enforced)."""
    return isinstance(value, (date, str))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
