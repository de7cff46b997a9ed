"""
Application exceptions.

Each exception carries the HTTP status it is translated to by the handler
registered in ``trip_tracker.main``. Route code raises these instead of
building ``HTTPException`` objects so that the repository and the
authorization helpers stay free of HTTP concerns.

Usage:
    from trip_tracker.core.errors import NotFoundError

    raise NotFoundError("Trip not found")
"""
from fastapi import status


class TripTrackerError(Exception):
    """Base exception for all Trip Tracker errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(TripTrackerError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ForbiddenError(TripTrackerError):
    """Requester is authenticated but not allowed to act on the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class ValidationError(TripTrackerError):
    """Stored data would violate a required field or constraint."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid data"


class UnauthenticatedError(TripTrackerError):
    """Bearer credential is missing or invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class StorageError(TripTrackerError):
    """Underlying persistence failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
