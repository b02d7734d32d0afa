"""Events API routes."""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from eventhub.actions import get_similar_events_by_slug
from eventhub.api.dependencies import get_app_settings, get_event_queries, get_event_store
from eventhub.config import Settings
from eventhub.exceptions import ValidationError
from eventhub.queries import EventQueries
from eventhub.storage.events import EventStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("")
async def list_events(
    limit: int | None = Query(None, ge=1, le=500),
    events: EventStore = Depends(get_event_store),
    settings: Settings = Depends(get_app_settings),
):
    """List events, newest first."""
    results = await events.list_events(limit=limit or settings.api.default_page_size)
    return {"events": [event.to_api() for event in results]}


@router.get("/{slug}")
async def get_event_by_slug(
    slug: str,
    queries: EventQueries = Depends(get_event_queries),
):
    """Fetch a single event by its slug."""
    try:
        event = await queries.fetch_event_by_slug(slug)
    except ValidationError as e:
        return JSONResponse({"message": e.message}, status_code=400)
    except Exception as e:
        logger.error(f"Error fetching event by slug '{slug}': {e}", exc_info=True)
        return JSONResponse(
            {"message": "Failed to fetch event", "error": str(e) or "Unknown error"},
            status_code=500,
        )

    if event is None:
        sanitized = slug.strip().lower()
        return JSONResponse(
            {"message": f"Event with slug '{sanitized}' not found"},
            status_code=404,
        )

    return {"message": "Event fetched successfully", "event": event.to_api()}


@router.get("/{slug}/similar")
async def get_similar_events(
    slug: str,
    queries: EventQueries = Depends(get_event_queries),
):
    """Events sharing a tag with this one. Empty on any failure."""
    result = await get_similar_events_by_slug(queries, slug)
    return {"events": [event.to_api() for event in result.unwrap_or([])]}
