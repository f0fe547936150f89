"""
Domain models: the workflow instance record and query value objects.
"""

from workflow_store.models.query import (
    AndSpecification,
    EntityIdSpecification,
    EntityIdsSpecification,
    FilterSpecification,
    OrderBy,
    Paging,
    SortDirection,
    Specification,
)
from workflow_store.models.workflow_instance import (
    EMPTY_VARIABLES,
    WorkflowInstance,
    WorkflowStatus,
)

__all__ = [
    "WorkflowInstance",
    "WorkflowStatus",
    "EMPTY_VARIABLES",
    "Specification",
    "EntityIdSpecification",
    "EntityIdsSpecification",
    "FilterSpecification",
    "AndSpecification",
    "OrderBy",
    "Paging",
    "SortDirection",
]
