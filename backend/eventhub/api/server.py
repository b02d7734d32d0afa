"""
FastAPI application for EventHub.

This module:
- Builds the shared services once per app and keeps them on app.state
- Configures CORS for the frontend
- Closes the MongoDB client on shutdown

The database connection is opened lazily by the first request that needs it,
so a missing MONGODB_URI surfaces at first use, not at startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventhub import __version__
from eventhub.api.routes import bookings_router, events_router, health_router
from eventhub.config import Settings, get_settings
from eventhub.database.connection import ConnectionManager
from eventhub.services import build_services

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    connections: ConnectionManager | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    services = build_services(settings, connections)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting EventHub API Server (environment={settings.environment})")
        yield
        logger.info("Shutting down EventHub API Server")
        await services.connections.close()

    app = FastAPI(
        title="EventHub API",
        description="Event catalog and booking API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(events_router, prefix="/api")
    app.include_router(bookings_router, prefix="/api")

    return app
