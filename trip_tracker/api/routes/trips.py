"""
Trip management routes.

Edit and delete are restricted to the trip owner. RSVP and un-RSVP only
need the trip to exist: any authenticated user may add or remove
themselves, never anyone else.
"""
import logging
from fastapi import APIRouter, Depends, Response, status
from trip_tracker.models.user import User
from trip_tracker.schemas.trip import (
    TripCreateRequest, TripUpdateRequest, TripEnvelope, TripListResponse
)
from trip_tracker.core.permissions import require_found, require_ownership
from trip_tracker.services.trip_repository import TripRepository
from trip_tracker.api.dependencies import get_current_user, get_trip_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


# Static paths are registered before /{trip_id} so they are not captured by it

@router.get("/owned", response_model=TripListResponse)
async def list_owned_trips(
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """List trips owned by the current user."""
    return {"trips": trips.find_owned_by(current_user.id)}


@router.get("/openall", response_model=TripListResponse)
async def list_all_trips_public(trips: TripRepository = Depends(get_trip_repository)):
    """List every trip without authentication.

    Same result as GET /trips minus the token requirement; both are part of
    the public contract.
    """
    return {"trips": trips.find_all()}


@router.get("/{trip_id}", response_model=TripEnvelope)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Get a single trip. Any authenticated user may view any trip."""
    trip = require_found(trips.find_by_id(trip_id))
    return {"trip": trip}


@router.get("", response_model=TripListResponse)
async def list_trips(
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """List every trip."""
    return {"trips": trips.find_all()}


@router.post("", response_model=TripEnvelope, status_code=status.HTTP_201_CREATED)
async def create_trip(
    body: TripCreateRequest,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Create a trip owned by the current user."""
    trip = trips.create(body.trip.model_dump(), owner_id=current_user.id)
    logger.info(f"User {current_user.id} created trip {trip.id}")
    return {"trip": trip}


@router.patch("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_trip(
    trip_id: int,
    body: TripUpdateRequest,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Update the fields present in the request; owner only."""
    # Only fields the client actually sent, after blank removal
    patch = body.trip.model_dump(exclude_unset=True)
    patch.pop("owner", None)

    trip = require_found(trips.find_by_id(trip_id))
    require_ownership(current_user.id, trip)

    trips.apply_partial_update(trip_id, patch)
    logger.info(f"User {current_user.id} updated trip {trip_id}: {sorted(patch)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/rsvp/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def rsvp_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Add the current user to the trip's attendees."""
    require_found(trips.find_by_id(trip_id))
    trips.add_attendee(trip_id, current_user.id)
    logger.info(f"User {current_user.id} joined trip {trip_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/unrsvp/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unrsvp_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Remove the current user from the trip's attendees."""
    require_found(trips.find_by_id(trip_id))
    trips.remove_attendee(trip_id, current_user.id)
    logger.info(f"User {current_user.id} left trip {trip_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    trips: TripRepository = Depends(get_trip_repository)
):
    """Delete a trip; owner only."""
    trip = require_found(trips.find_by_id(trip_id))
    require_ownership(current_user.id, trip)

    trips.delete(trip_id)
    logger.info(f"User {current_user.id} deleted trip {trip_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
