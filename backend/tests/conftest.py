"""Shared fixtures: in-memory MongoDB via mongomock-motor."""

import asyncio
from typing import Any

import pytest
from mongomock_motor import AsyncMongoMockClient

from eventhub.config import Settings
from eventhub.database.indexes import ensure_indexes
from eventhub.services import Services, build_services


class StaticConnections:
    """Stands in for ConnectionManager with an already-open database."""

    def __init__(self, database: Any, settings: Settings):
        self.settings = settings
        self.database = database
        self.connect_calls = 0

    @property
    def is_connected(self) -> bool:
        return True

    async def connect(self) -> Any:
        self.connect_calls += 1
        return self.database

    async def close(self) -> None:
        pass

    async def ping(self) -> bool:
        return True

    def info(self) -> dict:
        return {
            "status": "connected",
            "url": "mongodb://localhost:27017",
            "database": self.settings.mongodb_database,
            "environment": self.settings.environment,
        }


def make_event_fields(**overrides: Any) -> dict[str, Any]:
    fields = {
        "title": "React Summit: 2026!",
        "description": "The biggest React conference.",
        "overview": "Two days of talks and workshops.",
        "image": "/images/react-summit.png",
        "venue": "Kromhouthal",
        "location": "Amsterdam, NL",
        "date": "2026-05-12",
        "time": "09:00",
        "mode": "hybrid",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "Workshops"],
        "organizer": "GitNation",
        "tags": ["react", "javascript"],
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        mongodb_uri="mongodb://localhost:27017",
        mongodb_database="eventhub_test",
    )


@pytest.fixture
def connections(settings: Settings) -> StaticConnections:
    database = AsyncMongoMockClient()[settings.mongodb_database]
    asyncio.run(ensure_indexes(database, settings.database))
    return StaticConnections(database, settings)


@pytest.fixture
def services(settings: Settings, connections: StaticConnections) -> Services:
    return build_services(settings, connections)
