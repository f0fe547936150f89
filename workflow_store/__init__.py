"""
Workflow instance store.

MongoDB persistence for workflow instances with transparent offloading of
oversized variables to a blob store (GridFS, S3 or in-memory).
"""

from workflow_store.boundary.db.CRUD import RawDocumentCRUD, WorkflowInstanceCRUD
from workflow_store.models import (
    EntityIdSpecification,
    FilterSpecification,
    OrderBy,
    Paging,
    WorkflowInstance,
    WorkflowStatus,
)

__all__ = [
    "RawDocumentCRUD",
    "WorkflowInstanceCRUD",
    "WorkflowInstance",
    "WorkflowStatus",
    "EntityIdSpecification",
    "FilterSpecification",
    "OrderBy",
    "Paging",
]
