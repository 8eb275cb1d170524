"""Sobres uniformes de éxito/error para quien llame a la librería."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from trail_logbook.errors import LogbookError

DEFAULT_ERROR_MESSAGE = "An error occurred"


def format_success_response(data: Any, message: str = "Success") -> dict[str, Any]:
    """Wrap data in a success envelope."""
    return {
        "success": True,
        "data": _plain(data),
        "message": message,
        "timestamp": _iso_now(),
    }


def format_error_response(error: Any, status_code: int | None = None) -> dict[str, Any]:
    """Wrap an exception, message or any value in an error envelope.

    Never raises. Without an explicit status_code, a LogbookError keeps its
    own code and anything else maps to 500.
    """
    if status_code is None:
        status_code = error.status_code if isinstance(error, LogbookError) else 500
    return {
        "success": False,
        "error": _error_message(error),
        "statusCode": status_code,
        "timestamp": _iso_now(),
    }


def _error_message(error: Any) -> Any:
    if isinstance(error, Mapping):
        message = error.get("message")
    else:
        message = getattr(error, "message", None)
    if message:
        return message
    if isinstance(error, BaseException):
        text = str(error)
        return text or DEFAULT_ERROR_MESSAGE
    return error or DEFAULT_ERROR_MESSAGE


def _plain(data: Any) -> Any:
    """Records become their document mappings; lists are mapped item-wise."""
    if isinstance(data, list):
        return [_plain(item) for item in data]
    to_document = getattr(data, "to_document", None)
    if callable(to_document):
        return to_document()
    return data


def _iso_now() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
