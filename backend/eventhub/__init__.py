"""EventHub: event catalog and booking service backed by MongoDB."""

__version__ = "0.1.0"
__author__ = "EventHub Team"

__all__ = ["__version__", "__author__"]
