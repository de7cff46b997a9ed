"""
Trip model and its attendee (RSVP) set.
"""
from sqlalchemy import Column, String, Date, Text, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from trip_tracker.db.base import BaseModel


class Trip(BaseModel):
    """Trip owned by the user who created it."""
    __tablename__ = "trips"

    date = Column(Date, nullable=True, index=True)
    country = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", back_populates="owned_trips")
    attendees = relationship(
        "TripAttendee",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripAttendee.id"
    )

    @property
    def users(self):
        """Ids of users who RSVP'd to this trip."""
        return [attendee.user_id for attendee in self.attendees]


class TripAttendee(BaseModel):
    """Junction table for the Trip/User RSVP set."""
    __tablename__ = "trip_attendees"
    __table_args__ = (
        UniqueConstraint("trip_id", "user_id", name="uq_trip_attendee"),
    )

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    trip = relationship("Trip", back_populates="attendees")
    user = relationship("User", back_populates="rsvps")
