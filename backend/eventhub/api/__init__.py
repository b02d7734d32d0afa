"""HTTP API for EventHub."""

from eventhub.api.server import create_app

__all__ = ["create_app"]
