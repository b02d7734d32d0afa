"""Bookings API routes."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from eventhub.actions import create_booking
from eventhub.api.dependencies import get_booking_store
from eventhub.storage.bookings import BookingStore

router = APIRouter(prefix="/bookings", tags=["Bookings"])


class BookingRequest(BaseModel):
    # Untyped on purpose: the store validates these, and the route only
    # ever answers with {"success": bool}.
    model_config = ConfigDict(populate_by_name=True)

    event_id: Any = Field(default=None, alias="eventId")
    slug: Any = ""
    email: Any = None


@router.post("")
async def post_booking(
    body: BookingRequest,
    bookings: BookingStore = Depends(get_booking_store),
):
    """Book an event. Failures are reported only as success=false."""
    outcome = await create_booking(bookings, body.event_id, body.slug, body.email)
    return {"success": outcome.success}
