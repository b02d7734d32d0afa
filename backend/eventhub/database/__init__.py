"""
Database module initialization.
Exports database components for use throughout the application.
"""

from eventhub.database.connection import ConnectionManager
from eventhub.database.indexes import ensure_indexes

__all__ = [
    "ConnectionManager",
    "ensure_indexes",
]
