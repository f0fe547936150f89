"""
Rehydration of offloaded Variables.

Resolves blob references in raw documents back into literal content before
they are decoded. A referenced blob that no longer exists is replaced by the
empty-variables literal and logged: the read succeeds but the stored
variables are lost.

Dependencies: workflow_store.boundary.blob
System role: Read-side counterpart of the payload codec's offload step
"""

import logging
from typing import TYPE_CHECKING, Any

from workflow_store.core.exceptions import SerializationError
from workflow_store.core.offload.constants import (
    MISSING_BLOB_FALLBACK,
    VARIABLES_FIELD,
    is_blob_reference,
)

if TYPE_CHECKING:
    from workflow_store.boundary.blob.blob_store import BlobStore

logger = logging.getLogger(__name__)


class Rehydrator:
    """Restore offloaded Variables content from the blob store."""

    def __init__(self, blob_store: "BlobStore") -> None:
        self._blob_store = blob_store

    async def rehydrate(self, document: dict[str, Any] | None) -> dict[str, Any] | None:
        """
        Replace a blob reference in ``document`` with its literal content.

        The document is modified in place and returned. Documents without a
        reference are returned unchanged.

        Args:
            document: Raw document as read from MongoDB, or None

        Returns:
            The same document with literal Variables, or None

        Raises:
            SerializationError: If the blob content is not valid UTF-8
        """
        if document is None:
            return None

        key = document.get(VARIABLES_FIELD)
        if not is_blob_reference(key):
            return document

        data = await self._blob_store.get(key)
        if data is None:
            logger.warning(
                f"{__name__}:rehydrate - Blob missing, substituting empty variables "
                f"instance_id={document.get('_id')}, key={key}"
            )
            document[VARIABLES_FIELD] = MISSING_BLOB_FALLBACK
        else:
            try:
                document[VARIABLES_FIELD] = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SerializationError(
                    f"Offloaded variables are not valid UTF-8: {e}",
                    str(document.get("_id")),
                    {"key": key},
                ) from e
        return document
