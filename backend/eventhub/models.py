"""Pydantic models for documents in the events and bookings collections."""

from datetime import datetime, timezone
from typing import Any, Literal

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

EventMode = Literal["online", "offline", "hybrid"]
EVENT_MODES: tuple[str, ...] = ("online", "offline", "hybrid")


def _object_id_to_str(v: Any) -> Any:
    if isinstance(v, ObjectId):
        return str(v)
    return v


def _as_utc(v: Any) -> Any:
    # Documents read back without tz_aware come out naive, in UTC
    if isinstance(v, datetime) and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class MongoDocument(BaseModel):
    """Base for models loaded from MongoDB documents."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        return _object_id_to_str(v)

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @classmethod
    def from_document(cls, document: dict[str, Any]):
        return cls.model_validate(document)

    def to_api(self) -> dict[str, Any]:
        """JSON-ready dict using the stored (camelCase) field names."""
        return self.model_dump(by_alias=True, mode="json")


class Event(MongoDocument):
    """A schedulable public gathering."""

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24-hour
    mode: EventMode
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]


class Booking(MongoDocument):
    """One attendee's registration for one event."""

    event_id: str = Field(alias="eventId")
    email: str

    @field_validator("event_id", mode="before")
    @classmethod
    def stringify_event_id(cls, v: Any) -> Any:
        return _object_id_to_str(v)
