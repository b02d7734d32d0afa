"""Wiring for the shared connection and the stores built on it."""

from dataclasses import dataclass

from eventhub.config import Settings
from eventhub.database.connection import ConnectionManager
from eventhub.queries import EventQueries
from eventhub.storage.bookings import BookingStore
from eventhub.storage.events import EventStore


@dataclass
class Services:
    connections: ConnectionManager
    events: EventStore
    bookings: BookingStore
    queries: EventQueries


def build_services(
    settings: Settings, connections: ConnectionManager | None = None
) -> Services:
    """Create one ConnectionManager and hand it to every store."""
    connections = connections or ConnectionManager(settings)
    events = EventStore(connections)
    return Services(
        connections=connections,
        events=events,
        bookings=BookingStore(connections, events),
        queries=EventQueries(events),
    )
