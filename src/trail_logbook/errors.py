"""Taxonomía de errores con código de estado HTTP asociado."""

from __future__ import annotations


class LogbookError(Exception):
    """Base error carrying the status code a caller should answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(LogbookError):
    status_code = 400


class UnauthorizedError(LogbookError):
    status_code = 401


class ForbiddenError(LogbookError):
    status_code = 403


class NotFoundError(LogbookError):
    status_code = 404
