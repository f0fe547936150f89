"""
Blob store protocol.

Uniform async put/get/delete over a key-addressed large-object store.
Keys are opaque strings and content is raw bytes; nothing is interpreted.

Dependencies: typing (stdlib)
System role: Contract implemented by every blob backend
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Key-addressed storage for offloaded payloads."""

    async def put(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any existing content."""
        ...

    async def get(self, key: str) -> bytes | None:
        """Return the content stored under ``key``, or None if absent."""
        ...

    async def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is not an error."""
        ...
