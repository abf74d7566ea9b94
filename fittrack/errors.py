# -*- coding: utf-8 -*-
"""Domain errors.

Every error the API reports on purpose is a ``FitTrackError``. The app turns
them into ``{"message": ...}`` responses with the status code carried by the
class; anything else becomes a generic 500.
"""

from __future__ import annotations


class FitTrackError(Exception):
    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class AlreadyExists(FitTrackError):
    status_code = 400
    message = "User already exists"


class InvalidCredentials(FitTrackError):
    status_code = 400
    message = "Invalid credentials"


class NotFound(FitTrackError):
    status_code = 404
    message = "User not found"


class Unauthenticated(FitTrackError):
    status_code = 401
    message = "Token is not valid"


class StorageCorrupt(FitTrackError):
    """The persisted collection exists but cannot be read or parsed."""

    status_code = 500
