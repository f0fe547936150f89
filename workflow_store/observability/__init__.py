"""
Observability module.

Provides console logging configuration for the store.
"""

from workflow_store.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
