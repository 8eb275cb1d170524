"""Validación y normalización de metas de usuario."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from trail_logbook.errors import ValidationError
from trail_logbook.model import GoalRecord
from trail_logbook.parsers import coerce_datetime
from trail_logbook.schema import GOAL_CATEGORIES, GOAL_CATEGORY_ORDER

_CATEGORY_MESSAGE = f"category must be one of: {', '.join(GOAL_CATEGORY_ORDER)}"
_TARGET_MESSAGE = "targetValue must be a non-negative number"


def validate_goal_payload(
    payload: Any, require_all: bool = True
) -> str | None:
    """Return the first problem with a goal payload, or None when valid.

    Args:
        payload: Goal fields as sent by the client.
        require_all: Full validation (create) when True; otherwise only
            the fields present are checked (update).
    """
    if not isinstance(payload, Mapping):
        return "Goal payload must be an object"
    if require_all:
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            return "title is required"
        if not _is_category(payload.get("category")):
            return _CATEGORY_MESSAGE
        if not _is_target_value(payload.get("targetValue")):
            return _TARGET_MESSAGE
        unit = payload.get("unit")
        if not unit or not isinstance(unit, str):
            return "unit is required"
        return None

    category = payload.get("category")
    if category and not _is_category(category):
        return _CATEGORY_MESSAGE
    if "targetValue" in payload and not _is_target_value(payload["targetValue"]):
        return _TARGET_MESSAGE
    return None


def normalize_goal_payload(payload: Any) -> GoalRecord:
    """Normalize a goal payload (trimmed title, numeric target, date or None)."""
    if not isinstance(payload, Mapping):
        payload = {}
    title = payload.get("title")
    # A missing targetValue is NaN; an explicit None coerces to 0.
    target = payload["targetValue"] if "targetValue" in payload else math.nan
    return GoalRecord(
        title=title.strip() if isinstance(title, str) else None,
        description=payload.get("description") or "",
        category=payload.get("category"),
        target_value=_to_number(target),
        unit=payload.get("unit") or "",
        target_date=_target_date(payload.get("targetDate")),
    )


def build_goal(
    payload: Mapping[str, Any], user_id: str, *, now: datetime | None = None
) -> GoalRecord:
    """Validate and normalize a new goal, ready to be stored.

    Raises:
        ValidationError: If the payload fails full validation.
    """
    error = validate_goal_payload(payload, True)
    if error:
        raise ValidationError(error)
    stamp = now or datetime.now(tz=timezone.utc)
    return replace(
        normalize_goal_payload(payload),
        user_id=user_id,
        current_progress=0,
        status="active",
        created_at=stamp,
        updated_at=stamp,
    )


def apply_goal_update(
    goal: GoalRecord, updates: Mapping[str, Any], *, now: datetime | None = None
) -> GoalRecord:
    """Return a copy of goal with the present update fields applied.

    Raises:
        ValidationError: If a present field is invalid.
    """
    error = validate_goal_payload(updates, False)
    if error:
        raise ValidationError(error)

    changes: dict[str, Any] = {}
    if "title" in updates and isinstance(updates["title"], str):
        changes["title"] = updates["title"].strip()
    if "description" in updates:
        changes["description"] = updates["description"] or ""
    if "category" in updates:
        changes["category"] = updates["category"]
    if "targetValue" in updates:
        changes["target_value"] = updates["targetValue"]
    if "unit" in updates:
        changes["unit"] = updates["unit"] or ""
    if "targetDate" in updates:
        changes["target_date"] = _target_date(updates["targetDate"])
    if "currentProgress" in updates:
        changes["current_progress"] = _to_number(updates["currentProgress"])
    if "status" in updates:
        changes["status"] = updates["status"]
    changes["updated_at"] = now or datetime.now(tz=timezone.utc)
    return replace(goal, **changes)


def _is_category(value: Any) -> bool:
    return isinstance(value, str) and value in GOAL_CATEGORIES


def _is_target_value(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value) and value >= 0


def _to_number(value: Any) -> float:
    """Plain numeric coercion (no unit stripping); explicit None is 0, NaN when not numeric."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str) and not value.strip():
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _target_date(value: Any) -> datetime | None:
    if not value:
        return None
    return coerce_datetime(value)
