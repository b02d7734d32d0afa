"""
FastAPI dependency injection for the shared services.
The services are built once in create_app() and kept on app.state.
"""

from fastapi import Request

from eventhub.config import Settings
from eventhub.queries import EventQueries
from eventhub.services import Services
from eventhub.storage.bookings import BookingStore
from eventhub.storage.events import EventStore


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_event_store(request: Request) -> EventStore:
    return get_services(request).events


def get_booking_store(request: Request) -> BookingStore:
    return get_services(request).bookings


def get_event_queries(request: Request) -> EventQueries:
    return get_services(request).queries
