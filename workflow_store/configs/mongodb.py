"""
MongoDB configuration settings.

Manages connection parameters for the workflow instance collection.

Dependencies: pydantic, pydantic_settings
System role: Document database configuration for the instance store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from workflow_store.configs.base import BaseSettings


class MongoDBSettings(BaseSettings):
    """MongoDB connection and collection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MONGODB_",
        case_sensitive=False,
        extra="ignore",
    )

    uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string",
    )
    database: str = Field(default="workflows", description="Database name")
    collection: str = Field(
        default="WorkflowInstances",
        description="Collection holding workflow instance documents",
    )

    server_selection_timeout_ms: int = Field(
        default=30000,
        description="Server selection timeout in milliseconds",
    )
    max_pool_size: int = Field(default=100, description="Maximum connection pool size")
    tz_aware: bool = Field(
        default=True,
        description="Return timezone-aware datetimes from the driver",
    )
