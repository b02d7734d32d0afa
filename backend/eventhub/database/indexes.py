"""
MongoDB Index Definitions

Creates all required indexes when the connection is first opened.

Indexes by Collection:
- events: slug (unique), tags, createdAt
- bookings: eventId

create_index is idempotent, so this is safe to run on every cold start.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from eventhub.config import DatabaseConfig

logger = logging.getLogger(__name__)


async def ensure_indexes(database: AsyncIOMotorDatabase, config: DatabaseConfig) -> None:
    events = database[config.events_collection]
    await events.create_index([("slug", ASCENDING)], unique=True, name="slug_unique")
    await events.create_index([("tags", ASCENDING)], name="tags")
    await events.create_index([("createdAt", DESCENDING)], name="created_at")

    bookings = database[config.bookings_collection]
    await bookings.create_index([("eventId", ASCENDING)], name="event_id")

    logger.debug(
        f"Ensured indexes on {config.events_collection}, {config.bookings_collection}"
    )
