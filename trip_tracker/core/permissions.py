"""
Authorization helpers for trip routes.

Mutation routes call ``require_found`` right after the lookup and only then
``require_ownership``, so a missing trip is always reported as 404 before
ownership is evaluated.
"""
import logging
from typing import Optional, TypeVar
from trip_tracker.core.errors import NotFoundError, ForbiddenError
from trip_tracker.models.trip import Trip

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_found(result: Optional[T], detail: str = "Trip not found") -> T:
    """Return the looked-up entity, or raise NotFoundError if it is missing."""
    if result is None:
        raise NotFoundError(detail)
    return result


def require_ownership(requester_id: int, trip: Trip) -> None:
    """Raise ForbiddenError unless the requester owns the trip."""
    if trip.owner_id != requester_id:
        logger.warning(f"User {requester_id} denied write access to trip {trip.id}")
        raise ForbiddenError("Only the trip owner can modify this trip")
