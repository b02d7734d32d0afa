"""Logging setup and optional Logfire cloud observability."""

import logging

import logfire

from eventhub import __version__
from eventhub.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for CLI and server processes."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from the driver's topology monitoring
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def initialize_logfire(settings: Settings) -> None:
    """
    Initialize Logfire with MongoDB instrumentation.

    Must be called once at process startup, before the first connect.
    Instruments:
    - PyMongo commands issued through Motor
    - Python logging (bridges to Logfire)

    Args:
        settings: Application settings containing the Logfire token
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="eventhub",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_pymongo()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        # Continue running - observability is optional
