"""
MongoDB connection management.

This module provides:
- ConnectionManager: lazily opens one Motor client per process and shares it
- Single-flight connect so concurrent cold-start callers share one attempt
- Health check and info utilities
"""

import asyncio
import logging
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import PyMongoError

from eventhub.config import Settings
from eventhub.database.indexes import ensure_indexes
from eventhub.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    DatabaseNotConnectedError,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Any]


class ConnectionManager:
    """
    Owns the single shared MongoDB client.

    Construct one per process and hand it to every store that needs
    database access. State is the (database, pending attempt) pair; the
    pending attempt is an asyncio.Task so every concurrent caller awaits
    the same connect.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory = AsyncIOMotorClient,
    ):
        self.settings = settings
        self._client_factory = client_factory
        self._client: Any = None
        self._database: AsyncIOMotorDatabase | None = None
        self._pending: asyncio.Task | None = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """
        Get the connected database, raising instead of queueing work.

        Stores always go through connect(). This accessor is for callers
        outside them, such as scripts and tests, that must not trigger a
        connect of their own.
        """
        if self._database is None:
            raise DatabaseNotConnectedError(
                "Database not connected. Await connect() first."
            )
        return self._database

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Return the shared database handle, opening it on first use.

        Raises:
            ConfigurationError: No MongoDB URI configured, or the URI is invalid
            DatabaseConnectionError: The server could not be reached
        """
        if self._database is not None:
            return self._database

        if not self.settings.mongodb_uri:
            raise ConfigurationError(
                "Please define the MONGODB_URI environment variable"
            )

        # No await between the check and the assignment, so only the first
        # caller on the loop starts an attempt.
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._open())

        return await asyncio.shield(self._pending)

    async def _open(self) -> AsyncIOMotorDatabase:
        client = None
        try:
            client = self._client_factory(
                self.settings.mongodb_uri,
                serverSelectionTimeoutMS=self.settings.database.server_selection_timeout_ms,
                maxPoolSize=self.settings.database.max_pool_size,
                tz_aware=True,
            )
            database = client[self.settings.mongodb_database]
            await database.command("ping")
            await ensure_indexes(database, self.settings.database)

        except PyMongoConfigurationError as e:
            self._clear_pending()
            self._close_quietly(client)
            logger.error(f"Invalid MongoDB configuration: {e}")
            raise ConfigurationError(f"Invalid MongoDB configuration: {e}") from e

        except PyMongoError as e:
            self._clear_pending()
            self._close_quietly(client)
            logger.error(f"MongoDB connection error: {e}")
            raise DatabaseConnectionError(f"Failed to connect to MongoDB: {e}") from e

        except BaseException:
            self._clear_pending()
            self._close_quietly(client)
            raise

        self._client = client
        self._database = database
        self._clear_pending()
        logger.info(
            f"MongoDB connected successfully (database={self.settings.mongodb_database})"
        )
        return database

    def _clear_pending(self) -> None:
        # close() may already have replaced the slot
        if self._pending is asyncio.current_task():
            self._pending = None

    @staticmethod
    def _close_quietly(client: Any) -> None:
        if client is not None:
            client.close()

    async def close(self) -> None:
        """Close the MongoDB client and forget the cached handle."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        if self._client is not None:
            self._client.close()
            logger.info("Closed MongoDB client")

        self._client = None
        self._database = None

    async def ping(self) -> bool:
        """Check if the MongoDB connection is healthy."""
        if self._database is None:
            return False

        try:
            await self._database.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def info(self) -> dict:
        """Get database connection information and status."""
        return {
            "status": "connected" if self.is_connected else "disconnected",
            "url": _sanitize_mongodb_url(self.settings.mongodb_uri),
            "database": self.settings.mongodb_database,
            "environment": self.settings.environment,
        }


def _sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"
    return url
