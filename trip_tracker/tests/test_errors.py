"""
Tests for application error types.
"""
from trip_tracker.core.errors import (
    ForbiddenError,
    NotFoundError,
    StorageError,
    TripTrackerError,
    UnauthenticatedError,
    ValidationError,
)


def test_status_codes():
    assert NotFoundError().status_code == 404
    assert ForbiddenError().status_code == 403
    assert ValidationError().status_code == 422
    assert UnauthenticatedError().status_code == 401
    assert StorageError().status_code == 500


def test_all_errors_share_base():
    for cls in (NotFoundError, ForbiddenError, ValidationError, UnauthenticatedError, StorageError):
        assert issubclass(cls, TripTrackerError)


def test_default_and_custom_messages():
    assert NotFoundError().message == "Not found"
    err = NotFoundError("Trip not found")
    assert err.message == "Trip not found"
    assert str(err) == "Trip not found"
