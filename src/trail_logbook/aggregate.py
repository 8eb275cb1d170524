"""Estadísticas, rachas y actividad mensual a partir de caminatas."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

import pandas as pd

from trail_logbook.badges import evaluate_badges
from trail_logbook.model import LogbookSummary, MonthlyActivity, StatsSummary, StreakInfo
from trail_logbook.parsers import (
    coerce_datetime,
    parse_distance,
    parse_duration,
    parse_elevation,
)
from trail_logbook.schema import DIFFICULTY_LEVELS

logger = logging.getLogger(__name__)

# Statuses with their own counter; "draft" is deliberately not counted.
COUNTED_STATUSES: tuple[str, ...] = ("completed", "active", "paused")
# The last completed hike must be this recent for a streak to be current.
CURRENT_STREAK_MAX_AGE_DAYS = 7
# Largest gap between consecutive completed hikes that keeps a streak going.
STREAK_MAX_GAP_DAYS = 14

_ONE_DAY = timedelta(days=1)


def calculate_hike_stats(hikes: Any) -> StatsSummary:
    """Totals and per-difficulty/per-status counts over a hike collection.

    Non-list input counts as an empty collection. Garbage numbers add 0.
    """
    items = _as_list(hikes)
    by_difficulty = {level: 0 for level in DIFFICULTY_LEVELS}
    by_status = {status: 0 for status in COUNTED_STATUSES}
    for hike in items:
        difficulty = _field(hike, "difficulty")
        if isinstance(difficulty, str) and difficulty in by_difficulty:
            by_difficulty[difficulty] += 1
        status = _field(hike, "status")
        if isinstance(status, str) and status in by_status:
            by_status[status] += 1

    return StatsSummary(
        total_hikes=len(items),
        total_distance=sum(parse_distance(_field(h, "distance")) for h in items),
        total_elevation=sum(parse_elevation(_field(h, "elevation")) for h in items),
        total_duration=sum(parse_duration(_field(h, "duration")) for h in items),
        by_difficulty=by_difficulty,
        by_status=by_status,
    )


def calculate_streaks(hikes: Any, *, now: datetime | None = None) -> StreakInfo:
    """Current and longest streak over completed hikes.

    Consecutive completed hikes (most recent first) continue a streak while
    they are at most STREAK_MAX_GAP_DAYS apart. The current streak only
    counts when the latest completed hike is CURRENT_STREAK_MAX_AGE_DAYS old
    or newer. Day gaps are floored.
    """
    dates: list[datetime] = []
    for hike in _as_list(hikes):
        if _field(hike, "status") != "completed":
            continue
        parsed = _hike_date(hike)
        if parsed is not None:
            dates.append(parsed)
    dates.sort(reverse=True)
    if not dates:
        return StreakInfo(0, 0)

    today = now or datetime.now(tz=timezone.utc)
    gaps = [_days_between(newer, older) for newer, older in zip(dates, dates[1:])]

    current = 0
    if _days_between(_as_aware(today), dates[0]) <= CURRENT_STREAK_MAX_AGE_DAYS:
        current = 1
        for gap in gaps:
            if gap > STREAK_MAX_GAP_DAYS:
                break
            current += 1

    longest = 0
    run = 1
    for gap in gaps:
        if gap <= STREAK_MAX_GAP_DAYS:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return StreakInfo(current_streak=current, longest_streak=longest)


def generate_monthly_activity(hikes: Any) -> list[MonthlyActivity]:
    """Hike count and distance per "YYYY-MM", ascending by month.

    Hikes without a parseable date are skipped.
    """
    rows: list[dict[str, object]] = []
    for hike in _as_list(hikes):
        parsed = _hike_date(hike)
        if parsed is None:
            if _field(hike, "date"):
                logger.debug("Skipping hike with invalid date: %r", _field(hike, "date"))
            continue
        rows.append(
            {
                "month": f"{parsed.year:04d}-{parsed.month:02d}",
                "distance": parse_distance(_field(hike, "distance")),
            }
        )
    if not rows:
        return []

    df = pd.DataFrame(rows)
    monthly = (
        df.groupby("month", as_index=False)
        .agg(hikes=("distance", "size"), distance=("distance", "sum"))
        .sort_values("month")
    )
    return [
        MonthlyActivity(month=str(row.month), hikes=int(row.hikes), distance=float(row.distance))
        for row in monthly.itertuples(index=False)
    ]


def summarize_logbook(hikes: Any, *, now: datetime | None = None) -> LogbookSummary:
    """Compute stats, streaks, monthly activity and badges in one go."""
    stamp = now or datetime.now(tz=timezone.utc)
    stats = calculate_hike_stats(hikes)
    streaks = calculate_streaks(hikes, now=stamp)
    badge_input = {
        "total_hikes": stats.total_hikes,
        "total_distance": stats.total_distance,
        "total_elevation": stats.total_elevation,
        "current_streak": streaks.current_streak,
    }
    return LogbookSummary(
        stats=stats,
        streaks=streaks,
        monthly=generate_monthly_activity(hikes),
        badges=evaluate_badges(badge_input, now=stamp),
    )


def _as_list(hikes: Any) -> list[Any]:
    if isinstance(hikes, (list, tuple)):
        return list(hikes)
    return []


def _field(hike: Any, name: str) -> Any:
    if isinstance(hike, Mapping):
        return hike.get(name)
    return getattr(hike, name, None)


def _hike_date(hike: Any) -> datetime | None:
    value = _field(hike, "date")
    if not value:
        return None
    return coerce_datetime(value)


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _days_between(later: datetime, earlier: datetime) -> int:
    return (later - earlier) // _ONE_DAY
