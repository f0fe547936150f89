"""
S3 blob store.

Stores offloaded payloads as S3 objects for deployments that keep large
content outside MongoDB.

Dependencies: boto3
System role: Alternative blob backend for the instance store
"""

import asyncio
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class S3BlobStore:
    """Blob store backed by an S3 bucket (sync boto3 calls run in threads)."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        key_prefix: str = "",
        s3_client: Any | None = None,
    ) -> None:
        """
        Initialize S3 blob store.

        Args:
            bucket: S3 bucket name for blob storage
            region: AWS region for S3 bucket
            key_prefix: Prefix prepended to every blob key
            s3_client: Pre-built boto3 S3 client (created from region if omitted)

        Raises:
            ValueError: If bucket not provided
        """
        if not bucket:
            raise ValueError("bucket is required")

        self._bucket = bucket
        self._region = region
        self._key_prefix = key_prefix
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    def _object_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def put(self, key: str, data: bytes) -> None:
        """
        Upload ``data`` as the object for ``key``.

        Args:
            key: Blob key
            data: Raw bytes to store

        Raises:
            ClientError: If the upload fails
        """
        await asyncio.to_thread(
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=self._object_key(key),
            Body=data,
            ContentType="application/json",
        )
        logger.debug(
            f"{__name__}:put - Uploaded blob "
            f"bucket={self._bucket}, key={key}, size={len(data)} bytes"
        )

    async def get(self, key: str) -> bytes | None:
        """
        Download the object for ``key``.

        Args:
            key: Blob key

        Returns:
            bytes | None: Object body, or None if the object does not exist

        Raises:
            ClientError: For failures other than a missing object
        """
        try:
            response = await asyncio.to_thread(
                self._s3_client.get_object,
                Bucket=self._bucket,
                Key=self._object_key(key),
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                return None
            raise
        return await asyncio.to_thread(response["Body"].read)

    async def delete(self, key: str) -> None:
        """
        Delete the object for ``key``. S3 deletes of missing keys succeed.

        Args:
            key: Blob key

        Raises:
            ClientError: If the delete request fails
        """
        await asyncio.to_thread(
            self._s3_client.delete_object,
            Bucket=self._bucket,
            Key=self._object_key(key),
        )
