"""
Blob storage boundary: backends for offloaded payloads.

Exports:
  - BlobStore: Async put/get/delete protocol
  - GridFSBlobStore, bucket_name_for(): MongoDB GridFS backend
  - S3BlobStore: AWS S3 backend
  - InMemoryBlobStore: Process-local backend for development and tests
"""

from workflow_store.boundary.blob.blob_store import BlobStore
from workflow_store.boundary.blob.gridfs_blob_store import GridFSBlobStore, bucket_name_for
from workflow_store.boundary.blob.memory_blob_store import InMemoryBlobStore
from workflow_store.boundary.blob.s3_blob_store import S3BlobStore

__all__ = [
    "BlobStore",
    "GridFSBlobStore",
    "bucket_name_for",
    "InMemoryBlobStore",
    "S3BlobStore",
]
