"""
BookingStore

MongoDB operations for the 'bookings' collection.

Bookings reference events by id. The store checks that the event exists
right before inserting; there is no database-level foreign key and the
check and the insert are not in one transaction. With no event deletion
path that window cannot be hit today.
"""

import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from eventhub.database.connection import ConnectionManager
from eventhub.exceptions import ReferenceIntegrityError
from eventhub.models import Booking
from eventhub.storage.events import EventStore
from eventhub.validation import normalize_email, parse_object_id

logger = logging.getLogger(__name__)


class BookingStore:
    def __init__(self, connections: ConnectionManager, events: EventStore):
        self.connections = connections
        self.events = events

    async def _collection(self) -> AsyncIOMotorCollection:
        database = await self.connections.connect()
        return database[self.connections.settings.database.bookings_collection]

    async def create_booking(self, event_id: str | ObjectId, email: str) -> Booking:
        """Record a booking for an existing event.

        Raises:
            ValidationError: Malformed email or event id
            ReferenceIntegrityError: No event with this id exists
        """
        email = normalize_email(email)
        event_oid = parse_object_id(event_id, "eventId")

        if not await self.events.exists(event_oid):
            logger.warning(f"Rejected booking for missing event {event_oid}")
            raise ReferenceIntegrityError("eventId", str(event_oid))

        now = datetime.now(timezone.utc)
        document = {
            "eventId": event_oid,
            "email": email,
            "createdAt": now,
            "updatedAt": now,
        }

        collection = await self._collection()
        result = await collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(f"Created booking {result.inserted_id} for event {event_oid}")
        return Booking.from_document(document)

    async def find_by_event(self, event_id: str | ObjectId) -> list[Booking]:
        event_oid = parse_object_id(event_id, "eventId")
        collection = await self._collection()
        cursor = collection.find({"eventId": event_oid})
        return [Booking.from_document(document) async for document in cursor]

    async def count_for_event(self, event_id: str | ObjectId) -> int:
        event_oid = parse_object_id(event_id, "eventId")
        collection = await self._collection()
        return await collection.count_documents({"eventId": event_oid})
