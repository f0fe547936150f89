"""
Offload rules for oversized Variables.

Exports:
  - PayloadCodec, EncodedInstance: Record <-> raw document conversion
  - Rehydrator: Blob reference resolution on read
  - blob_key_for(), is_blob_reference(): Blob key helpers
"""

from workflow_store.core.offload.codec import EncodedInstance, PayloadCodec
from workflow_store.core.offload.constants import (
    BLOB_REFERENCE_PREFIX,
    MISSING_BLOB_FALLBACK,
    VARIABLES_FIELD,
    blob_key_for,
    is_blob_reference,
)
from workflow_store.core.offload.rehydrator import Rehydrator

__all__ = [
    "PayloadCodec",
    "EncodedInstance",
    "Rehydrator",
    "BLOB_REFERENCE_PREFIX",
    "MISSING_BLOB_FALLBACK",
    "VARIABLES_FIELD",
    "blob_key_for",
    "is_blob_reference",
]
