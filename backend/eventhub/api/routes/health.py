"""Health check route."""

import logging

from fastapi import APIRouter, Depends

from eventhub import __version__
from eventhub.api.dependencies import get_services
from eventhub.exceptions import EventHubError
from eventhub.services import Services

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(services: Services = Depends(get_services)) -> dict:
    """
    Health check endpoint for load balancers and monitoring.

    Opens the connection if this is the first request.
    """
    connections = services.connections
    try:
        await connections.connect()
        db_connected = await connections.ping()
    except EventHubError as e:
        logger.warning(f"Health check could not reach MongoDB: {e}")
        db_connected = False

    info = connections.info()
    return {
        "status": "healthy" if db_connected else "degraded",
        "service": "eventhub-api",
        "version": __version__,
        "database": "connected" if db_connected else "disconnected",
        "url": info["url"],
        "environment": info["environment"],
    }
