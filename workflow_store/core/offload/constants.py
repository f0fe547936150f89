"""
Offload constants shared by the codec, rehydrator and blob backends.

Dependencies: workflow_store.models
System role: Wire-level constants for blob references
"""

from workflow_store.models.workflow_instance import EMPTY_VARIABLES

# Raw document field that may be moved to the blob store.
VARIABLES_FIELD = "Variables"

BLOB_REFERENCE_PREFIX = "GRIDFS/"

# Stays well below MongoDB's 16 MiB document limit.
DEFAULT_OFFLOAD_THRESHOLD_BYTES = 1024 * 10

# Substituted when a referenced blob no longer exists.
MISSING_BLOB_FALLBACK = EMPTY_VARIABLES

GRIDFS_BUCKET_SUFFIX = "_GridFs"
GRIDFS_FILENAME = "variables.json"


def blob_key_for(instance_id: str) -> str:
    """Return the blob key owned by a workflow instance."""
    return f"{BLOB_REFERENCE_PREFIX}{instance_id}"


def is_blob_reference(value: object) -> bool:
    """Check whether a raw field value is a blob reference."""
    return isinstance(value, str) and value.startswith(BLOB_REFERENCE_PREFIX)
