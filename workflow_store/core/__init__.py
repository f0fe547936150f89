"""
Core business logic module.

Contains the offload rules, identifier generation, and the exception hierarchy.
All store-specific decisions reside here; I/O lives in the boundary layer.
"""

from workflow_store.core.exceptions import (
    ConfigurationError,
    SerializationError,
    ValidationError,
    WorkflowStoreException,
)
from workflow_store.core.id_generator import IdGenerator, UuidIdGenerator

__all__ = [
    # Exceptions
    "WorkflowStoreException",
    "ValidationError",
    "SerializationError",
    "ConfigurationError",
    # Identifiers
    "IdGenerator",
    "UuidIdGenerator",
]
