from __future__ import annotations

import math
from datetime import date, datetime, timezone

import pytest

from trail_logbook.parsers import (
    coerce_datetime,
    is_timestamp_like,
    parse_distance,
    parse_duration,
    parse_elevation,
)


def test_parse_distance_units_and_labels() -> None:
    assert parse_distance("10.2 km") == pytest.approx(10.2)
    assert parse_distance("5.5 km") == pytest.approx(5.5)
    assert parse_distance("Distance: 15.3 kilometers") == pytest.approx(15.3)
    assert parse_distance("1,234 m") == 1234


def test_parse_distance_missing_and_garbage_is_zero() -> None:
    assert parse_distance(None) == 0
    assert parse_distance("") == 0
    assert parse_distance("invalid") == 0
    assert parse_distance("...") == 0


def test_numeric_input_is_returned_unchanged() -> None:
    assert parse_distance(0) == 0
    assert parse_distance(7.25) == 7.25
    assert parse_distance(-3) == -3
    assert parse_elevation(-120) == -120
    assert parse_duration(2) == 2


def test_parse_elevation_keeps_sign() -> None:
    assert parse_elevation("-50m") == -50
    assert parse_elevation("+300 m gain") == 300


def test_parse_distance_drops_sign() -> None:
    assert parse_distance("-5 km") == 5


def test_parse_uses_leading_number_of_residual() -> None:
    assert parse_distance("5.5.3") == pytest.approx(5.5)
    assert parse_elevation("10-20") == 10


def test_parse_duration_strings() -> None:
    assert parse_duration("2.5 hours") == pytest.approx(2.5)
    assert parse_duration("n/a") == 0


@pytest.mark.parametrize(
    "value",
    [None, "", "abc", "NaN", "inf", float("nan"), float("inf"), True, [], {}, "-", "."],
)
def test_parsers_always_return_finite_numbers(value: object) -> None:
    for parse in (parse_distance, parse_elevation, parse_duration):
        result = parse(value)
        assert isinstance(result, (int, float))
        assert math.isfinite(result)


def test_coerce_datetime_variants() -> None:
    aware = datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc)
    assert coerce_datetime(aware) == aware
    assert coerce_datetime(datetime(2024, 1, 15, 8, 0)) == aware
    assert coerce_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert coerce_datetime("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert coerce_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_coerce_datetime_rejects_garbage() -> None:
    assert coerce_datetime(None) is None
    assert coerce_datetime("") is None
    assert coerce_datetime("not a date") is None
    assert coerce_datetime(True) is None
    assert coerce_datetime({"seconds": 1}) is None


def test_is_timestamp_like() -> None:
    assert is_timestamp_like(datetime.now())
    assert is_timestamp_like(date.today())
    assert is_timestamp_like("whenever")
    assert not is_timestamp_like(12345)
