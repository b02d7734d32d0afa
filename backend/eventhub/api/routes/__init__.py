"""API routes module."""

from eventhub.api.routes.bookings import router as bookings_router
from eventhub.api.routes.events import router as events_router
from eventhub.api.routes.health import router as health_router

__all__ = [
    "bookings_router",
    "events_router",
    "health_router",
]
