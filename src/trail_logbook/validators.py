"""Validación estructural (tipos por campo) y reglas de negocio."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from trail_logbook.model import ValidationResult
from trail_logbook.parsers import is_timestamp_like, parse_distance, parse_elevation
from trail_logbook.schema import (
    DIFFICULTY_LEVELS,
    HIKE_SCHEMA,
    HIKE_STATUSES,
    LATITUDE_RANGE,
    LOCATION_SCHEMA,
    LONGITUDE_RANGE,
    MIN_PASSWORD_LENGTH,
    MIN_REALISTIC_ELEVATION,
    WAYPOINT_SCHEMA,
)


def check_field_type(value: Any, expected: str) -> bool:
    """Return True when value matches a schema field type."""
    if expected == "string":
        return isinstance(value, str)
    if expected == "number":
        return _is_number(value)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "array":
        return isinstance(value, (list, tuple))
    if expected == "object":
        return isinstance(value, Mapping)
    if expected == "timestamp":
        return is_timestamp_like(value)
    return False


def validate_against_schema(
    data: Any, schema: Mapping[str, str], *, label: str = "Data"
) -> ValidationResult:
    """Type-check every declared field present in data.

    Absent fields (and fields set to None) are never errors here;
    required fields are enforced by the business-rule validators.
    """
    doc = as_document(data)
    if doc is None:
        return ValidationResult(False, [f"{label} must be an object"])
    errors = _type_errors(doc, schema)
    return ValidationResult(not errors, errors)


def validate_hike_schema(data: Any) -> ValidationResult:
    """Schema validation for a hike plus difficulty/status enums."""
    doc = as_document(data)
    if doc is None:
        return ValidationResult(False, ["Hike data must be an object"])
    errors = _type_errors(doc, HIKE_SCHEMA)

    difficulty = doc.get("difficulty")
    if isinstance(difficulty, str) and difficulty not in DIFFICULTY_LEVELS:
        errors.append(
            f"Invalid difficulty: {difficulty}. "
            f"Must be one of: {', '.join(DIFFICULTY_LEVELS)}"
        )
    status = doc.get("status")
    if isinstance(status, str) and status not in HIKE_STATUSES:
        errors.append(
            f"Invalid status: {status}. Must be one of: {', '.join(HIKE_STATUSES)}"
        )
    return ValidationResult(not errors, errors)


def validate_hike_data(data: Any) -> ValidationResult:
    """Business rules for a hike entry (required text, sane numbers)."""
    doc = as_document(data)
    if doc is None:
        return ValidationResult(False, ["Hike data is required"])

    errors: list[str] = []
    if _is_blank(doc.get("title")):
        errors.append("Title is required")
    if _is_blank(doc.get("location")):
        errors.append("Location is required")

    # `< 0`: zero distance is accepted.
    if doc.get("distance") is not None and parse_distance(doc["distance"]) < 0:
        errors.append("Distance must be positive")
    if (
        doc.get("elevation") is not None
        and parse_elevation(doc["elevation"]) < MIN_REALISTIC_ELEVATION
    ):
        errors.append("Elevation seems unrealistic")

    difficulty = doc.get("difficulty")
    if difficulty and difficulty not in DIFFICULTY_LEVELS:
        errors.append("Invalid difficulty level")

    return ValidationResult(not errors, errors)


def validate_user_data(data: Any) -> ValidationResult:
    """Business rules for a user profile (and registration password)."""
    doc = as_document(data)
    if doc is None:
        return ValidationResult(False, ["User data is required"])

    errors: list[str] = []
    email = doc.get("email")
    if _is_blank(email):
        errors.append("Email is required")
    elif "@" not in email:
        errors.append("Invalid email format")

    if _is_blank(doc.get("displayName")):
        errors.append("Display name is required")

    password = doc.get("password")
    if password and len(str(password)) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    return ValidationResult(not errors, errors)


def validate_waypoint(data: Any) -> ValidationResult:
    """Validate a GPS waypoint (coordinates required and range-checked)."""
    return _validate_point(data, WAYPOINT_SCHEMA, label="Waypoint")


def validate_location(data: Any) -> ValidationResult:
    """Validate a GPS location; accuracy, when numeric, must be >= 0."""
    result = _validate_point(data, LOCATION_SCHEMA, label="Location")
    doc = as_document(data)
    if doc is None or not _has_coordinates(doc):
        return result

    errors = list(result.errors)
    accuracy = doc.get("accuracy")
    if _is_number(accuracy) and accuracy < 0:
        errors.append("Accuracy must be a non-negative number")
    return ValidationResult(not errors, errors)


def as_document(data: Any) -> Mapping[str, Any] | None:
    """Return the mapping view of a record, or None for non-objects."""
    if isinstance(data, Mapping):
        return data
    to_document = getattr(data, "to_document", None)
    if callable(to_document):
        return to_document()
    return None


def _validate_point(
    data: Any, schema: Mapping[str, str], *, label: str
) -> ValidationResult:
    doc = as_document(data)
    if doc is None:
        return ValidationResult(False, [f"{label} data must be an object"])
    if not _has_coordinates(doc):
        return ValidationResult(False, ["Latitude and longitude are required"])

    errors = _type_errors(doc, schema)
    errors.extend(_range_errors(doc["latitude"], "Latitude", LATITUDE_RANGE))
    errors.extend(_range_errors(doc["longitude"], "Longitude", LONGITUDE_RANGE))
    return ValidationResult(not errors, errors)


def _has_coordinates(doc: Mapping[str, Any]) -> bool:
    return doc.get("latitude") is not None and doc.get("longitude") is not None


def _range_errors(
    value: Any, name: str, bounds: tuple[float, float]
) -> list[str]:
    low, high = bounds
    if _is_number(value) and not low <= value <= high:
        return [f"{name} must be between {low:g} and {high:g}"]
    return []


def _type_errors(doc: Mapping[str, Any], schema: Mapping[str, str]) -> list[str]:
    errors: list[str] = []
    for name, expected in schema.items():
        value = doc.get(name)
        if value is None:
            continue
        if not check_field_type(value, expected):
            errors.append(f"Field '{name}' must be of type {expected}")
    return errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()
