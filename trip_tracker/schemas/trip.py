"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
import datetime as dt
from trip_tracker.core.utils import strip_blank_fields


class TripBase(BaseModel):
    """Client-editable trip fields. Anything else in the payload is ignored."""
    date: Optional[dt.date] = None
    country: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None

    class Config:
        extra = "ignore"


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class TripUpdate(TripBase):
    """Schema for partial trip update."""
    pass


class TripFormRequest(BaseModel):
    """Trip request body with blank strings removed before validation.

    A half-filled form leaves the blank fields unset: null on create,
    untouched on update.
    """

    @model_validator(mode="before")
    @classmethod
    def remove_blank_fields(cls, data):
        if isinstance(data, dict):
            return strip_blank_fields(data)
        return data


class TripCreateRequest(TripFormRequest):
    """Request body for POST /trips."""
    trip: TripCreate


class TripUpdateRequest(TripFormRequest):
    """Request body for PATCH /trips/{trip_id}."""
    trip: TripUpdate


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    owner: int = Field(validation_alias="owner_id")
    users: List[int] = []
    created_at: dt.datetime = Field(serialization_alias="createdAt")
    updated_at: dt.datetime = Field(serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class TripEnvelope(BaseModel):
    """Single trip wrapped as {"trip": {...}}."""
    trip: TripResponse


class TripListResponse(BaseModel):
    """Trip list wrapped as {"trips": [...]}."""
    trips: List[TripResponse]
