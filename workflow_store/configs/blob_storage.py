"""
Blob storage configuration settings.

Selects the backend used for offloaded payloads and holds the size
threshold that triggers offloading.

Dependencies: pydantic, pydantic_settings
System role: Blob store configuration for oversized payload fields
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from workflow_store.configs.base import BaseSettings
from workflow_store.core.offload.constants import (
    DEFAULT_OFFLOAD_THRESHOLD_BYTES,
    GRIDFS_BUCKET_SUFFIX,
)


class BlobStorageSettings(BaseSettings):
    """Settings for the blob store backing offloaded variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BLOB_STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Literal["gridfs", "s3", "memory"] = Field(
        default="gridfs",
        description="Blob store backend (gridfs, s3, memory)",
    )
    gridfs_bucket_suffix: str = Field(
        default=GRIDFS_BUCKET_SUFFIX,
        description="Suffix appended to the collection name to form the GridFS bucket",
    )
    s3_bucket: str | None = Field(
        default=None,
        description="S3 bucket for offloaded payloads (s3 backend only)",
    )
    s3_region: str = Field(
        default="ap-southeast-2",
        description="AWS region for S3 bucket",
    )
    s3_key_prefix: str = Field(
        default="",
        description="Prefix prepended to blob keys inside the S3 bucket",
    )
    offload_threshold_bytes: int = Field(
        default=DEFAULT_OFFLOAD_THRESHOLD_BYTES,
        gt=0,
        description="Variables larger than this many UTF-8 bytes are offloaded",
    )
