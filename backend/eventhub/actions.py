"""
Server-side actions called by the UI layer.

These are boundary functions: they never raise. Booking failures collapse to
success=False (details go to the log only); the similar-events read returns a
Result so the caller decides what an error means for the page.
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from eventhub.models import Event
from eventhub.queries import EventQueries
from eventhub.storage.bookings import BookingStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the error that prevented computing it."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        return self.value if self.ok else default


@dataclass(frozen=True)
class BookingOutcome:
    success: bool


async def create_booking(
    bookings: BookingStore,
    event_id: str,
    slug: str,
    email: str,
) -> BookingOutcome:
    """Book an event for an email address.

    slug is accepted for the caller's convenience and is not used by the write.
    """
    try:
        await bookings.create_booking(event_id, email)
        return BookingOutcome(success=True)
    except Exception as e:
        logger.error(f"create booking failed (event={event_id}, slug={slug}): {e}", exc_info=True)
        return BookingOutcome(success=False)


async def get_similar_events_by_slug(
    queries: EventQueries, slug: str
) -> Result[list[Event]]:
    try:
        events = await queries.fetch_similar_events(slug)
        return Result(value=events)
    except Exception as e:
        logger.error(f"Failed to load similar events for '{slug}': {e}", exc_info=True)
        return Result(error=e)
