"""
Payload codec for workflow instances.

Converts WorkflowInstance records to raw MongoDB documents and back, and
decides whether the Variables field stays inline or moves to the blob store.

Dependencies: pydantic, workflow_store.models
System role: Encode/decode step between typed records and raw documents
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic_core import PydanticSerializationError
from pydantic import ValidationError as PydanticValidationError

from workflow_store.core.exceptions import SerializationError
from workflow_store.core.offload.constants import (
    DEFAULT_OFFLOAD_THRESHOLD_BYTES,
    VARIABLES_FIELD,
    blob_key_for,
    is_blob_reference,
)
from workflow_store.models.workflow_instance import WorkflowInstance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedInstance:
    """
    Result of encoding one record.

    Attributes:
        document: Raw document ready to be written
        blob_key: Key to store ``payload`` under, None when kept inline
        payload: UTF-8 bytes of the offloaded Variables, None when kept inline
    """

    document: dict[str, Any]
    blob_key: str | None = None
    payload: bytes | None = None

    @property
    def offloaded(self) -> bool:
        return self.blob_key is not None


class PayloadCodec:
    """
    Encode/decode WorkflowInstance records with Variables offloading.

    Variables whose UTF-8 encoding exceeds ``threshold_bytes`` are replaced
    in the raw document by the blob reference ``GRIDFS/{id}``. Literal values
    that already look like a blob reference are offloaded regardless of size
    so a stored value is never ambiguous.
    """

    def __init__(self, threshold_bytes: int = DEFAULT_OFFLOAD_THRESHOLD_BYTES) -> None:
        """
        Initialize codec.

        Args:
            threshold_bytes: Largest Variables size (UTF-8 bytes) kept inline

        Raises:
            ValueError: If threshold_bytes is not positive
        """
        if threshold_bytes <= 0:
            raise ValueError("threshold_bytes must be positive")
        self.threshold_bytes = threshold_bytes

    def encode(self, instance: WorkflowInstance) -> EncodedInstance:
        """
        Convert a record into its raw document, offloading Variables if needed.

        Args:
            instance: Record with an assigned id

        Returns:
            EncodedInstance: Raw document plus the payload to offload, if any

        Raises:
            SerializationError: If the record has no id or cannot be dumped
        """
        if not instance.id:
            raise SerializationError("Cannot encode a workflow instance without an id")

        try:
            document = instance.to_document()
            variables = document.get(VARIABLES_FIELD)
            payload = variables.encode("utf-8") if isinstance(variables, str) else None
        except (PydanticSerializationError, UnicodeEncodeError) as e:
            raise SerializationError(
                f"Failed to serialize workflow instance: {e}", instance.id
            ) from e

        if payload is None:
            return EncodedInstance(document=document)

        if len(payload) <= self.threshold_bytes and not is_blob_reference(variables):
            return EncodedInstance(document=document)

        key = blob_key_for(instance.id)
        document[VARIABLES_FIELD] = key
        logger.debug(
            f"{__name__}:encode - Offloading variables "
            f"instance_id={instance.id}, size={len(payload)} bytes"
        )
        return EncodedInstance(document=document, blob_key=key, payload=payload)

    def decode(self, document: dict[str, Any]) -> WorkflowInstance:
        """
        Convert a rehydrated raw document back into a record.

        Args:
            document: Raw document whose Variables holds literal content

        Returns:
            WorkflowInstance: Validated record

        Raises:
            SerializationError: If the document does not match the record shape
        """
        try:
            return WorkflowInstance.model_validate(document)
        except PydanticValidationError as e:
            raise SerializationError(
                "Failed to deserialize workflow instance document",
                str(document.get("_id")) if isinstance(document, dict) else None,
                {"errors": e.error_count()},
            ) from e
