"""Tests for schema and business-rule validators."""

from __future__ import annotations

from datetime import datetime

from trail_logbook.model import ValidationResult
from trail_logbook.normalize import process_hike_data
from trail_logbook.schema import HIKE_SCHEMA, LOCATION_SCHEMA, WAYPOINT_SCHEMA
from trail_logbook.validators import (
    check_field_type,
    validate_against_schema,
    validate_hike_data,
    validate_hike_schema,
    validate_location,
    validate_user_data,
    validate_waypoint,
)


def test_validation_result_aliases() -> None:
    result = ValidationResult(False, ["x"])
    assert result.is_valid is False
    assert result.to_document() == {"valid": False, "isValid": False, "errors": ["x"]}


def test_check_field_type() -> None:
    assert check_field_type("a", "string")
    assert check_field_type(1.5, "number")
    assert not check_field_type(True, "number")
    assert check_field_type(False, "boolean")
    assert check_field_type([], "array")
    assert check_field_type({}, "object")
    assert not check_field_type([], "object")
    assert check_field_type(datetime.now(), "timestamp")
    assert check_field_type("2024-01-01", "timestamp")
    assert not check_field_type(123, "timestamp")


def test_schemas_share_coordinate_types() -> None:
    for name in ("latitude", "longitude", "elevation", "timestamp"):
        assert WAYPOINT_SCHEMA[name] == LOCATION_SCHEMA[name]
    assert HIKE_SCHEMA["waypoints"] == "array"
    assert HIKE_SCHEMA["startLocation"] == "object"


def test_validate_against_schema_rejects_non_objects() -> None:
    result = validate_against_schema(None, HIKE_SCHEMA)
    assert not result.valid
    assert len(result.errors) == 1


def test_hike_schema_complete_record_is_valid() -> None:
    now = datetime.now()
    hike = {
        "title": "Mountain Trail Hike",
        "location": "Rocky Mountain National Park",
        "route": "Bear Lake Trail",
        "date": now,
        "startTime": now,
        "endTime": now,
        "duration": 3.5,
        "distance": 8.2,
        "elevation": 500,
        "difficulty": "Moderate",
        "weather": "Sunny",
        "notes": "Beautiful views",
        "waypoints": [],
        "startLocation": {"latitude": 40.3428, "longitude": -105.6836},
        "endLocation": {"latitude": 40.3428, "longitude": -105.6836},
        "routeMap": "map-data-string",
        "gpsTrack": [],
        "createdAt": now,
        "updatedAt": now,
        "userId": "user123",
        "status": "completed",
        "pinned": False,
        "shared": True,
    }
    result = validate_hike_schema(hike)
    assert result.valid
    assert result.errors == []


def test_hike_schema_wrong_types() -> None:
    result = validate_hike_schema({"title": 123, "distance": "not-a-number", "pinned": "yes"})
    assert not result.valid
    assert len(result.errors) == 3


def test_hike_schema_empty_and_missing() -> None:
    assert validate_hike_schema({}).valid
    assert not validate_hike_schema(None).valid
    assert not validate_hike_schema("hike").valid


def test_hike_schema_enums() -> None:
    for difficulty in ("Easy", "Moderate", "Hard", "Extreme"):
        assert validate_hike_schema({"title": "T", "difficulty": difficulty}).valid
    bad = validate_hike_schema({"title": "T", "difficulty": "VeryHard"})
    assert not bad.valid
    assert "Easy, Moderate, Hard, Extreme" in bad.errors[0]

    for status in ("active", "paused", "completed", "draft"):
        assert validate_hike_schema({"title": "T", "status": status}).valid
    assert not validate_hike_schema({"title": "T", "status": "cancelled"}).valid


def test_hike_schema_accepts_normalized_record() -> None:
    record = process_hike_data({"title": "Loop", "location": "Park", "date": "2024-05-01"})
    assert validate_hike_schema(record).valid


def test_validate_hike_data_required_fields() -> None:
    result = validate_hike_data({"title": "", "location": ""})
    assert result.is_valid is False
    assert "Title is required" in result.errors
    assert "Location is required" in result.errors


def test_validate_hike_data_numbers() -> None:
    ok = validate_hike_data({"title": "A", "location": "B", "distance": 0, "elevation": -500})
    assert ok.is_valid

    bad = validate_hike_data({"title": "A", "location": "B", "distance": -1, "elevation": "-501 m"})
    assert bad.errors == ["Distance must be positive", "Elevation seems unrealistic"]


def test_validate_hike_data_difficulty_and_shape() -> None:
    result = validate_hike_data({"title": "A", "location": "B", "difficulty": "Brutal"})
    assert result.errors == ["Invalid difficulty level"]
    assert validate_hike_data(None).errors == ["Hike data is required"]
    assert validate_hike_data({"title": 12, "location": "B"}).errors == ["Title is required"]


def test_validate_user_data() -> None:
    assert validate_user_data({"email": "a@b.c", "displayName": "Ana"}).is_valid
    result = validate_user_data({"email": "nope", "displayName": " ", "password": "123"})
    assert result.errors == [
        "Invalid email format",
        "Display name is required",
        "Password must be at least 6 characters",
    ]
    assert validate_user_data({}).errors[0] == "Email is required"
    assert not validate_user_data(None).is_valid


def test_validate_waypoint_ranges() -> None:
    assert validate_waypoint({"latitude": 0, "longitude": 0}).valid
    assert validate_waypoint({"latitude": 90, "longitude": 180}).valid
    assert validate_waypoint({"latitude": -90, "longitude": -180}).valid
    assert validate_waypoint({"latitude": 89.9999, "longitude": 179.9999, "elevation": 8848}).valid
    assert not validate_waypoint({"latitude": 91, "longitude": 0}).valid
    assert not validate_waypoint({"latitude": 0, "longitude": 181}).valid
    assert not validate_waypoint({"latitude": -91, "longitude": 0}).valid
    assert not validate_waypoint({"latitude": 0, "longitude": -181}).valid


def test_validate_waypoint_missing_or_bad_coordinates() -> None:
    assert validate_waypoint({}).errors == ["Latitude and longitude are required"]
    assert validate_waypoint({"latitude": 10}).errors == ["Latitude and longitude are required"]
    assert not validate_waypoint(None).valid
    result = validate_waypoint({"latitude": "not-a-number", "longitude": 200})
    assert not result.valid
    assert len(result.errors) == 2


def test_validate_location_accuracy() -> None:
    assert validate_location({"latitude": 0, "longitude": 0, "accuracy": 0}).valid
    assert validate_location({"latitude": 0, "longitude": 0, "accuracy": 100}).valid
    result = validate_location({"latitude": 0, "longitude": 0, "accuracy": -1})
    assert result.errors == ["Accuracy must be a non-negative number"]
    assert not validate_location({"latitude": "invalid", "longitude": 200, "accuracy": -1}).valid
    assert not validate_location({}).valid
