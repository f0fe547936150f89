"""
Workflow instance domain model.

The typed record persisted by the instance store. Document keys use
PascalCase aliases and the identifier is stored as ``_id``.

Dependencies: pydantic
System role: Typed side of the document codec
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

# Serialized form of an empty variable set.
EMPTY_VARIABLES = '{"Data":{}}'


class WorkflowStatus(str, Enum):
    """Lifecycle status reported by the workflow engine."""

    IDLE = "Idle"
    RUNNING = "Running"
    FINISHED = "Finished"
    SUSPENDED = "Suspended"
    FAULTED = "Faulted"
    CANCELLED = "Cancelled"


class WorkflowInstance(BaseModel):
    """
    Persisted state of one workflow execution.

    Only ``id`` and ``variables`` carry meaning for the store. ``variables``
    holds the engine's serialized variable state and is the field that may be
    offloaded to the blob store. Fields not declared here are kept as extras
    and round-trip untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="allow",
    )

    id: str | None = Field(default=None, alias="_id")
    definition_id: str | None = None
    definition_version_id: str | None = None
    tenant_id: str | None = None
    version: int = 1
    workflow_status: WorkflowStatus = WorkflowStatus.IDLE
    correlation_id: str | None = None
    context_type: str | None = None
    context_id: str | None = None
    name: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_executed_at: datetime | None = None
    finished_at: datetime | None = None
    cancelled_at: datetime | None = None
    faulted_at: datetime | None = None
    last_executed_activity_id: str | None = None
    variables: str = EMPTY_VARIABLES

    def to_document(self) -> dict[str, Any]:
        """Dump to the aliased shape stored in MongoDB."""
        return self.model_dump(by_alias=True)
