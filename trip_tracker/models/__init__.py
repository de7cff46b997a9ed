"""Models package - Import all models for SQLAlchemy registration."""
from trip_tracker.models.user import User
from trip_tracker.models.trip import Trip, TripAttendee

__all__ = [
    "User",
    "Trip",
    "TripAttendee",
]
