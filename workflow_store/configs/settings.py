"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the store
"""

from functools import lru_cache

from workflow_store.configs.base import BaseSettings
from workflow_store.configs.blob_storage import BlobStorageSettings
from workflow_store.configs.mongodb import MongoDBSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    mongodb: MongoDBSettings = MongoDBSettings()
    blob_storage: BlobStorageSettings = BlobStorageSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for reuse across the process.
    Environment variables loaded once at first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from workflow_store.configs import get_settings
        settings = get_settings()
    """
    return Settings()
