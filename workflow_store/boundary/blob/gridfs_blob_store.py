"""
GridFS blob store.

Stores offloaded payloads in a GridFS bucket next to the instance collection,
using the blob key as the GridFS file id.

Dependencies: pymongo (gridfs)
System role: Default blob backend for the instance store
"""

import logging

from gridfs import AsyncGridFSBucket, NoFile
from pymongo.asynchronous.database import AsyncDatabase

from workflow_store.core.offload.constants import GRIDFS_BUCKET_SUFFIX, GRIDFS_FILENAME

logger = logging.getLogger(__name__)


def bucket_name_for(collection_name: str, suffix: str = GRIDFS_BUCKET_SUFFIX) -> str:
    """Return the GridFS bucket name paired with a collection."""
    return f"{collection_name}{suffix}"


class GridFSBlobStore:
    """Blob store backed by a MongoDB GridFS bucket."""

    def __init__(
        self,
        database: AsyncDatabase,
        bucket_name: str,
        filename: str = GRIDFS_FILENAME,
    ) -> None:
        """
        Initialize GridFS blob store.

        Args:
            database: Async database holding the bucket collections
            bucket_name: GridFS bucket name (e.g. "WorkflowInstances_GridFs")
            filename: File name recorded for every uploaded blob
        """
        self._bucket = AsyncGridFSBucket(database, bucket_name=bucket_name)
        self._bucket_name = bucket_name
        self._filename = filename

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    async def put(self, key: str, data: bytes) -> None:
        """
        Upload ``data`` with file id ``key``.

        GridFS file ids are unique, so an existing file under the same key is
        removed first. The replace is not atomic: if the upload fails after
        the delete, the key has no file until the next successful put.

        Args:
            key: Blob key used as the GridFS file id
            data: Raw bytes to store
        """
        await self.delete(key)
        await self._bucket.upload_from_stream_with_id(key, self._filename, data)
        logger.debug(
            f"{__name__}:put - Uploaded blob "
            f"bucket={self._bucket_name}, key={key}, size={len(data)} bytes"
        )

    async def get(self, key: str) -> bytes | None:
        """
        Download the file stored under ``key``.

        Args:
            key: Blob key used as the GridFS file id

        Returns:
            bytes | None: File content, or None if no such file exists
        """
        try:
            grid_out = await self._bucket.open_download_stream(key)
        except NoFile:
            return None
        return await grid_out.read()

    async def delete(self, key: str) -> None:
        """
        Delete the file stored under ``key`` if it exists.

        Args:
            key: Blob key used as the GridFS file id
        """
        try:
            await self._bucket.delete(key)
        except NoFile:
            logger.debug(
                f"{__name__}:delete - No blob to delete "
                f"bucket={self._bucket_name}, key={key}"
            )
