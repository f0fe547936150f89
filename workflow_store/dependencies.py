"""
Dependency injection container.

Factory functions wiring settings, the MongoDB connection and the selected
blob backend into a ready-to-use workflow instance store.

Dependencies: workflow_store.configs, workflow_store.boundary
System role: DI container for store construction
"""

import logging
from functools import lru_cache

from pymongo.asynchronous.database import AsyncDatabase

from workflow_store.boundary.blob import (
    BlobStore,
    GridFSBlobStore,
    InMemoryBlobStore,
    S3BlobStore,
    bucket_name_for,
)
from workflow_store.boundary.db import RawDocumentCRUD, WorkflowInstanceCRUD, get_database
from workflow_store.configs import Settings, get_settings
from workflow_store.core.exceptions import ConfigurationError
from workflow_store.core.offload import PayloadCodec

logger = logging.getLogger(__name__)


def build_blob_store(settings: Settings, database: AsyncDatabase) -> BlobStore:
    """
    Build the blob store selected by ``settings.blob_storage.backend``.

    Args:
        settings: Application settings
        database: Database hosting the GridFS bucket (gridfs backend)

    Returns:
        BlobStore: Configured blob backend

    Raises:
        ConfigurationError: If the s3 backend is selected without a bucket
    """
    blob_config = settings.blob_storage

    if blob_config.backend == "s3":
        if not blob_config.s3_bucket:
            raise ConfigurationError(
                "S3 blob backend requires a bucket", setting="s3_bucket"
            )
        return S3BlobStore(
            bucket=blob_config.s3_bucket,
            region=blob_config.s3_region,
            key_prefix=blob_config.s3_key_prefix,
        )

    if blob_config.backend == "memory":
        logger.warning(
            f"{__name__}:build_blob_store - Using in-memory blob store, "
            "offloaded variables will not survive a restart"
        )
        return InMemoryBlobStore()

    bucket_name = bucket_name_for(
        settings.mongodb.collection, blob_config.gridfs_bucket_suffix
    )
    return GridFSBlobStore(database, bucket_name)


def build_workflow_instance_store(
    settings: Settings,
    database: AsyncDatabase,
) -> WorkflowInstanceCRUD:
    """
    Build a workflow instance store from explicit settings and database.

    Args:
        settings: Application settings
        database: Database holding the instance collection

    Returns:
        WorkflowInstanceCRUD: Store wired to the configured collection and blob backend
    """
    collection = database[settings.mongodb.collection]
    return WorkflowInstanceCRUD(
        documents=RawDocumentCRUD(collection),
        blob_store=build_blob_store(settings, database),
        codec=PayloadCodec(settings.blob_storage.offload_threshold_bytes),
    )


@lru_cache
def get_workflow_instance_store() -> WorkflowInstanceCRUD:
    """
    Get workflow instance store singleton.

    Returns:
        WorkflowInstanceCRUD: Store built from environment settings

    Usage:
        from workflow_store.dependencies import get_workflow_instance_store
        store = get_workflow_instance_store()
        await store.save(instance)
    """
    return build_workflow_instance_store(get_settings(), get_database())
