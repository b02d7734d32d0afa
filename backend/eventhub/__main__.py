"""EventHub CLI entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from eventhub import __version__
from eventhub.config import get_settings
from eventhub.database.connection import ConnectionManager
from eventhub.exceptions import EventHubError
from eventhub.observability import configure_logging, initialize_logfire

logger = logging.getLogger(__name__)


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== EventHub Configuration ===\n")
        print(f"Environment: {settings.environment}")
        print(f"Log Level: {settings.log_level}\n")

        print("Database:")
        info = ConnectionManager(settings).info()
        print(f"  URI: {info['url'] or '✗ Not set'}")
        print(f"  Database: {settings.mongodb_database}")
        print(f"  Events Collection: {settings.database.events_collection}")
        print(f"  Bookings Collection: {settings.database.bookings_collection}")
        print(f"  Server Selection Timeout: {settings.database.server_selection_timeout_ms}ms")
        print(f"  Max Pool Size: {settings.database.max_pool_size}\n")

        print("API:")
        print(f"  Bind: {settings.api.host}:{settings.api.port}")
        print(f"  Allowed Origins: {', '.join(settings.api.allowed_origins)}")
        print(f"  Default Page Size: {settings.api.default_page_size}\n")

        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1


async def _connect_and_report(connections: ConnectionManager) -> bool:
    try:
        await connections.connect()
        return await connections.ping()
    finally:
        await connections.close()


def cmd_check_db(args: argparse.Namespace) -> int:
    """Connect to MongoDB, create indexes and report status."""
    settings = get_settings()
    connections = ConnectionManager(settings)

    try:
        healthy = asyncio.run(_connect_and_report(connections))
    except EventHubError as e:
        logger.error(f"Database check failed: {e}")
        print(f"\n❌ {e}\n")
        return 1

    info = connections.info()
    print(f"\n{'✓' if healthy else '❌'} MongoDB at {info['url']} ({info['database']})")
    print("  Indexes ensured on events and bookings\n")
    return 0 if healthy else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the HTTP API server."""
    import uvicorn

    settings = get_settings()
    initialize_logfire(settings)

    uvicorn.run(
        "eventhub.api.server:create_app",
        factory=True,
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="EventHub: event catalog and booking service",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"EventHub {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_check = subparsers.add_parser(
        "check-db",
        aliases=["init-db"],
        help="Connect to MongoDB, ensure indexes and report health",
    )
    parser_check.set_defaults(func=cmd_check_db)

    parser_serve = subparsers.add_parser(
        "serve",
        help="Start the HTTP API server",
    )
    parser_serve.add_argument("--host", default=None, help="Bind address")
    parser_serve.add_argument("--port", type=int, default=None, help="Bind port")
    parser_serve.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )
    parser_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    configure_logging(get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
