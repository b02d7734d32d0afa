"""Storage layer for EventHub - MongoDB-backed entity stores.

This package provides:
- EventStore: validated, normalized event documents
- BookingStore: bookings with an event existence check before insert

Both stores are stateless and share the injected ConnectionManager.
"""

from .bookings import BookingStore
from .events import EventStore

__all__ = [
    "BookingStore",
    "EventStore",
]
