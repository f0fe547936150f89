"""
Database boundary layer: MongoDB connection and CRUD operations.

Exports:
  - get_mongo_client(), get_database(), get_collection(), close_mongo_client():
    Connection management
  - RawDocumentCRUD: Generic id-addressed document operations
  - WorkflowInstanceCRUD: Workflow instance store with Variables offloading

Dependencies: pymongo, workflow_store.configs
System role: Database adapter providing persistent storage for workflow
instances with transparent offloading of oversized variables.
"""

from workflow_store.boundary.db.connection import (
    close_mongo_client,
    get_collection,
    get_database,
    get_mongo_client,
)
from workflow_store.boundary.db.CRUD import RawDocumentCRUD, WorkflowInstanceCRUD

__all__ = [
    # Connection
    "get_mongo_client",
    "get_database",
    "get_collection",
    "close_mongo_client",
    # CRUD
    "RawDocumentCRUD",
    "WorkflowInstanceCRUD",
]
