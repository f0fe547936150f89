"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from workflow_store.configs.blob_storage import BlobStorageSettings
from workflow_store.configs.mongodb import MongoDBSettings
from workflow_store.configs.settings import Settings, get_settings

__all__ = ["BlobStorageSettings", "MongoDBSettings", "Settings", "get_settings"]
