from __future__ import annotations

from datetime import datetime

from trail_logbook.errors import (
    ForbiddenError,
    LogbookError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from trail_logbook.model import StreakInfo
from trail_logbook.responses import format_error_response, format_success_response


def _is_iso(text: str) -> bool:
    return datetime.fromisoformat(text.replace("Z", "+00:00")) is not None


def test_format_success_response() -> None:
    out = format_success_response({"id": 1})
    assert out["success"] is True
    assert out["data"] == {"id": 1}
    assert out["message"] == "Success"
    assert out["timestamp"].endswith("Z")
    assert _is_iso(out["timestamp"])


def test_format_success_response_converts_records() -> None:
    out = format_success_response([StreakInfo(2, 3)], message="Streaks")
    assert out["message"] == "Streaks"
    assert out["data"] == [{"currentStreak": 2, "longestStreak": 3}]


def test_format_error_response_from_exception_and_text() -> None:
    out = format_error_response(RuntimeError("boom"))
    assert out == {
        "success": False,
        "error": "boom",
        "statusCode": 500,
        "timestamp": out["timestamp"],
    }
    assert format_error_response("plain", 422)["error"] == "plain"
    assert format_error_response({"message": "from dict"})["error"] == "from dict"


def test_format_error_response_fallbacks() -> None:
    assert format_error_response(None)["error"] == "An error occurred"
    assert format_error_response("")["error"] == "An error occurred"
    assert format_error_response(ValueError())["error"] == "An error occurred"


def test_format_error_response_uses_error_status() -> None:
    assert format_error_response(ValidationError("bad"))["statusCode"] == 400
    assert format_error_response(NotFoundError("Goal not found"))["statusCode"] == 404
    assert format_error_response(NotFoundError("x"), 410)["statusCode"] == 410


def test_error_taxonomy_status_codes() -> None:
    for error, code in (
        (ValidationError("a"), 400),
        (UnauthorizedError("b"), 401),
        (ForbiddenError("c"), 403),
        (NotFoundError("d"), 404),
        (LogbookError("e"), 500),
        (LogbookError("f", status_code=409), 409),
    ):
        assert format_error_response(error)["statusCode"] == code
