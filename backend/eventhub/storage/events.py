"""
EventStore

MongoDB operations for the 'events' collection.

Methods:
- create_event(fields): Validate, normalize and insert
- update_event(event_id, changes): Partial update, re-normalizing changed fields
- find_by_slug(slug) / find_by_id(event_id): Single lookups
- find_where(criteria): Raw filter query
- exists(event_id): Existence check used by the booking store
- list_events(limit): Newest first
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from eventhub.database.connection import ConnectionManager
from eventhub.exceptions import DuplicateSlugError, ValidationError
from eventhub.models import Event
from eventhub.validation import normalize_event, parse_object_id, validate_event

logger = logging.getLogger(__name__)


class EventStore:
    def __init__(self, connections: ConnectionManager):
        self.connections = connections

    async def _collection(self) -> AsyncIOMotorCollection:
        database = await self.connections.connect()
        return database[self.connections.settings.database.events_collection]

    async def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Insert a new event after validation and normalization.

        Raises:
            ValidationError: A field is missing or malformed
            DuplicateSlugError: Another event already derives the same slug
        """
        document = normalize_event(validate_event(fields))
        now = datetime.now(timezone.utc)
        document["createdAt"] = now
        document["updatedAt"] = now

        collection = await self._collection()
        try:
            result = await collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateSlugError(document["slug"]) from e

        document["_id"] = result.inserted_id
        logger.info(f"Created event '{document['slug']}' ({result.inserted_id})")
        return Event.from_document(document)

    async def update_event(
        self, event_id: str | ObjectId, changes: Mapping[str, Any]
    ) -> Event | None:
        """Apply a partial update. Returns None if the event does not exist."""
        oid = parse_object_id(event_id, "id")

        updates = normalize_event(validate_event(changes, partial=True))
        if not updates:
            raise ValidationError("changes", "No fields to update")
        updates["updatedAt"] = datetime.now(timezone.utc)

        collection = await self._collection()
        try:
            document = await collection.find_one_and_update(
                {"_id": oid},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateSlugError(updates["slug"]) from e

        if document is None:
            return None

        logger.info(f"Updated event {oid}: {sorted(changes)}")
        return Event.from_document(document)

    async def find_by_slug(self, slug: str) -> Event | None:
        collection = await self._collection()
        document = await collection.find_one({"slug": slug})
        return Event.from_document(document) if document else None

    async def find_by_id(self, event_id: str | ObjectId) -> Event | None:
        oid = parse_object_id(event_id, "id")
        collection = await self._collection()
        document = await collection.find_one({"_id": oid})
        return Event.from_document(document) if document else None

    async def find_where(
        self, criteria: Mapping[str, Any], limit: int | None = None
    ) -> list[Event]:
        collection = await self._collection()
        cursor = collection.find(dict(criteria), limit=limit or 0)
        return [Event.from_document(document) async for document in cursor]

    async def exists(self, event_id: str | ObjectId) -> bool:
        oid = parse_object_id(event_id, "id")
        collection = await self._collection()
        document = await collection.find_one({"_id": oid}, projection={"_id": 1})
        return document is not None

    async def list_events(self, limit: int | None = None) -> list[Event]:
        collection = await self._collection()
        cursor = collection.find(
            {}, sort=[("createdAt", DESCENDING)], limit=limit or 0
        )
        return [Event.from_document(document) async for document in cursor]
