"""
CRUD operations for workflow instance documents.

Exports the generic raw document capability and the workflow instance
store built on top of it.

Usage:
    from workflow_store.boundary.db.CRUD import RawDocumentCRUD, WorkflowInstanceCRUD

    store = WorkflowInstanceCRUD(RawDocumentCRUD(collection), blob_store)
    instance = await store.find_by_id(instance_id)
"""

from workflow_store.boundary.db.CRUD.raw_document_crud import RawDocumentCRUD
from workflow_store.boundary.db.CRUD.workflow_instance_crud import WorkflowInstanceCRUD

__all__ = [
    "RawDocumentCRUD",
    "WorkflowInstanceCRUD",
]
