"""Read operations used by the API and the server-side actions."""

import logging

from bson import ObjectId

from eventhub.exceptions import ValidationError
from eventhub.models import Event
from eventhub.storage.events import EventStore

logger = logging.getLogger(__name__)


class EventQueries:
    def __init__(self, events: EventStore):
        self.events = events

    async def fetch_event_by_slug(self, slug: str | None) -> Event | None:
        """Look up one event by slug. Returns None when no event matches.

        Raises:
            ValidationError: The slug is missing or blank (checked before any
                database access)
        """
        if not isinstance(slug, str) or not slug.strip():
            raise ValidationError("slug", "Invalid or missing slug parameter")

        return await self.events.find_by_slug(slug.strip().lower())

    async def fetch_similar_events(self, slug: str) -> list[Event]:
        """Events sharing at least one tag with the anchor event.

        The anchor itself is never included. A missing anchor yields an empty
        list rather than an error. No ordering is guaranteed.
        """
        anchor = await self.events.find_by_slug(slug)
        if anchor is None:
            logger.debug(f"No anchor event for slug '{slug}'")
            return []

        return await self.events.find_where(
            {
                "_id": {"$ne": ObjectId(anchor.id)},
                "tags": {"$in": anchor.tags},
            }
        )
