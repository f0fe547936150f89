"""
Database connection management.

Provides the cached async MongoDB client and helpers returning the
configured database and instance collection.

Dependencies: pymongo, workflow_store.configs
System role: MongoDB connection lifecycle management
"""

from functools import lru_cache

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from workflow_store.configs import get_settings


@lru_cache
def get_mongo_client() -> AsyncMongoClient:
    """
    Create async MongoDB client with connection pooling.

    The client is cached so the whole process shares one connection pool.
    Connections are opened lazily on first operation.

    Returns:
        AsyncMongoClient: Configured async client

    Raises:
        ConfigurationError: If the connection string is invalid (pymongo)

    Usage:
        client = get_mongo_client()
        await client.admin.command("ping")
    """
    settings = get_settings()
    mongo_config = settings.mongodb

    return AsyncMongoClient(
        mongo_config.uri,
        serverSelectionTimeoutMS=mongo_config.server_selection_timeout_ms,
        maxPoolSize=mongo_config.max_pool_size,
        tz_aware=mongo_config.tz_aware,
    )


def get_database() -> AsyncDatabase:
    """
    Return the configured database.

    Returns:
        AsyncDatabase: Database holding the instance collection and GridFS bucket
    """
    settings = get_settings()
    return get_mongo_client()[settings.mongodb.database]


def get_collection(name: str | None = None) -> AsyncCollection:
    """
    Return a collection from the configured database.

    Args:
        name: Collection name (defaults to the configured instance collection)

    Returns:
        AsyncCollection: Collection of raw documents
    """
    settings = get_settings()
    return get_database()[name or settings.mongodb.collection]


async def close_mongo_client() -> None:
    """Close the cached client and forget it."""
    if get_mongo_client.cache_info().currsize:
        await get_mongo_client().close()
        get_mongo_client.cache_clear()
