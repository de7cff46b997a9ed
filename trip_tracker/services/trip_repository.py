"""
Trip persistence.

Every operation is one transaction of single statements. RSVP changes are
set operations against the unique (trip_id, user_id) constraint and partial
updates are one UPDATE, so concurrent requests never lose writes to a
read-modify-write in Python. Every write to a trip, RSVPs included, moves
its updated_at forward.
"""
import logging
from datetime import datetime
from contextlib import contextmanager
from typing import Any, Dict, List, Optional
from sqlalchemy import DateTime, Integer, delete, insert, literal, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from trip_tracker.core.errors import StorageError, ValidationError
from trip_tracker.models.trip import Trip, TripAttendee
from trip_tracker.db.base import utcnow

logger = logging.getLogger(__name__)

# Columns a client patch may touch
UPDATABLE_FIELDS = frozenset({"date", "country", "city", "description"})


class TripRepository:
    """SQLAlchemy-backed store of trips and their attendee sets."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self):
        """Roll back and translate SQLAlchemy failures into app errors."""
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Trip write rejected by constraint: {e.orig}")
            raise ValidationError("Trip violates a required field or constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError() from e

    def create(self, attrs: Dict[str, Any], owner_id: int) -> Trip:
        """Persist a new trip owned by ``owner_id``."""
        values = {key: value for key, value in attrs.items() if key in UPDATABLE_FIELDS}
        trip = Trip(**values, owner_id=owner_id)
        with self._storage_errors():
            self.db.add(trip)
            self.db.commit()
            self.db.refresh(trip)
        return trip

    def find_all(self) -> List[Trip]:
        with self._storage_errors():
            return (
                self.db.query(Trip)
                .options(selectinload(Trip.attendees))
                .order_by(Trip.id)
                .all()
            )

    def find_owned_by(self, user_id: int) -> List[Trip]:
        with self._storage_errors():
            return (
                self.db.query(Trip)
                .options(selectinload(Trip.attendees))
                .filter(Trip.owner_id == user_id)
                .order_by(Trip.id)
                .all()
            )

    def find_by_id(self, trip_id: int) -> Optional[Trip]:
        with self._storage_errors():
            return self.db.query(Trip).filter(Trip.id == trip_id).first()

    def apply_partial_update(self, trip_id: int, patch: Dict[str, Any]) -> None:
        """Merge the given fields into the stored trip; other fields are untouched."""
        if "owner" in patch or "owner_id" in patch:
            raise ValueError("owner cannot be changed")
        values = {key: value for key, value in patch.items() if key in UPDATABLE_FIELDS}
        if not values:
            return
        with self._storage_errors():
            self.db.query(Trip).filter(Trip.id == trip_id).update(
                values, synchronize_session=False
            )
            self.db.commit()

    def add_attendee(self, trip_id: int, user_id: int) -> None:
        """Add a user to the trip's RSVP set. No-op if already present.

        The row is only inserted while the trip exists, so a concurrent
        delete cannot leave an orphan attendee behind.
        """
        now = utcnow()
        trip_exists = select(Trip.id).where(Trip.id == trip_id).exists()
        stmt = (
            insert(TripAttendee.__table__)
            .from_select(
                ["trip_id", "user_id", "created_at", "updated_at"],
                select(
                    literal(trip_id, Integer),
                    literal(user_id, Integer),
                    literal(now, DateTime),
                    literal(now, DateTime)
                ).where(trip_exists)
            )
            .prefix_with("OR IGNORE", dialect="sqlite")
            .prefix_with("IGNORE", dialect="mysql")
        )
        with self._storage_errors():
            self.db.execute(stmt)
            self._touch(trip_id, now)
            self.db.commit()

    def remove_attendee(self, trip_id: int, user_id: int) -> None:
        """Remove a user from the trip's RSVP set. No-op if absent."""
        stmt = delete(TripAttendee).where(
            TripAttendee.trip_id == trip_id,
            TripAttendee.user_id == user_id
        )
        with self._storage_errors():
            self.db.execute(stmt)
            self._touch(trip_id, utcnow())
            self.db.commit()

    def _touch(self, trip_id: int, now: datetime) -> None:
        """Bump updated_at for writes that only change the RSVP set."""
        self.db.query(Trip).filter(Trip.id == trip_id).update(
            {"updated_at": now}, synchronize_session=False
        )

    def delete(self, trip_id: int) -> None:
        """Permanently remove the trip and its RSVP rows."""
        with self._storage_errors():
            self.db.execute(delete(TripAttendee).where(TripAttendee.trip_id == trip_id))
            self.db.execute(delete(Trip).where(Trip.id == trip_id))
            self.db.commit()
