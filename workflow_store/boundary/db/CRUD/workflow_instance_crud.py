"""
Workflow instance store with blob offloading.

Persists WorkflowInstance records in MongoDB while moving oversized Variables
into a blob store, so no stored document approaches MongoDB's per-document
size limit. Reads resolve ids through the query layer, fetch the raw
documents, rehydrate offloaded Variables and decode them.

There is no transaction spanning the collection and the blob store. A crash
between the two writes of one operation can leave an orphaned blob (harmless)
or a document whose blob is missing (read back as empty variables).

Dependencies: pymongo, workflow_store.core.offload, workflow_store.boundary.blob
System role: Public persistence API for workflow instances
"""

import logging
from typing import Iterable

from workflow_store.boundary.blob.blob_store import BlobStore
from workflow_store.boundary.db.CRUD.raw_document_crud import RawDocumentCRUD
from workflow_store.core.id_generator import IdGenerator, UuidIdGenerator
from workflow_store.core.offload.codec import EncodedInstance, PayloadCodec
from workflow_store.core.offload.constants import (
    VARIABLES_FIELD,
    blob_key_for,
    is_blob_reference,
)
from workflow_store.core.offload.rehydrator import Rehydrator
from workflow_store.models.query import (
    EntityIdSpecification,
    OrderBy,
    Paging,
    Specification,
)
from workflow_store.models.workflow_instance import WorkflowInstance

logger = logging.getLogger(__name__)


class WorkflowInstanceCRUD:
    """
    CRUD operations for WorkflowInstance with Variables offloading.

    Composes a generic RawDocumentCRUD with the payload codec, the
    rehydrator and a blob store.

    Known behaviors callers should be aware of:
        - ``update`` does not upsert. Updating an instance that does not
          exist is a silent no-op, unlike ``save``.
        - Saving an offloaded instance again with Variables small enough to
          stay inline leaves the previous blob in place (unreferenced).
        - A missing blob is read back as empty variables, not an error.
        - On GridFS, re-saving an offloaded instance deletes the old file
          before uploading the new one. If that upload fails the document
          keeps its previous reference and reads back as empty variables.
    """

    def __init__(
        self,
        documents: RawDocumentCRUD,
        blob_store: BlobStore,
        codec: PayloadCodec | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        """
        Initialize instance store.

        Args:
            documents: Raw document operations on the instance collection
            blob_store: Backend receiving offloaded Variables
            codec: Payload codec (default threshold when omitted)
            id_generator: Source of ids for unsaved instances
        """
        self.documents = documents
        self.blob_store = blob_store
        self.codec = codec or PayloadCodec()
        self.id_generator = id_generator or UuidIdGenerator()
        self.rehydrator = Rehydrator(blob_store)

    async def _encode(self, instance: WorkflowInstance) -> EncodedInstance:
        """Assign an id if needed, encode, and upload the offloaded payload."""
        if not instance.id:
            instance.id = self.id_generator.generate()

        encoded = self.codec.encode(instance)
        if encoded.offloaded:
            await self.blob_store.put(encoded.blob_key, encoded.payload)
        return encoded

    async def save(self, instance: WorkflowInstance) -> None:
        """
        Insert or replace an instance.

        Args:
            instance: Instance to persist; receives an id if it has none

        Raises:
            SerializationError: If the instance cannot be encoded
        """
        encoded = await self._encode(instance)
        await self.documents.replace_by_id(instance.id, encoded.document, upsert=True)

    async def add(self, instance: WorkflowInstance) -> None:
        """
        Insert a new instance.

        Args:
            instance: Instance to persist; receives an id if it has none

        Raises:
            SerializationError: If the instance cannot be encoded
            DuplicateKeyError: If an instance with the same id exists
        """
        encoded = await self._encode(instance)
        await self.documents.insert(encoded.document)

    async def add_many(self, instances: Iterable[WorkflowInstance]) -> None:
        """
        Insert instances in a single batch, each offloaded independently.

        An empty input performs no I/O.

        Args:
            instances: Instances to persist; each receives an id if it has none
        """
        instance_list = list(instances)
        if not instance_list:
            return

        documents = [(await self._encode(instance)).document for instance in instance_list]
        await self.documents.insert_many(documents)

    async def update(self, instance: WorkflowInstance) -> None:
        """
        Replace an existing instance without upserting.

        If no instance with this id exists nothing is written to the
        collection and no error is raised, so callers cannot tell a
        successful update from a missing target. An offloaded payload is
        still uploaded before the replace is attempted.

        Args:
            instance: Instance to persist

        Raises:
            SerializationError: If the instance cannot be encoded
        """
        encoded = await self._encode(instance)
        replaced = await self.documents.replace_by_id(
            instance.id, encoded.document, upsert=False
        )
        if not replaced:
            logger.debug(
                f"{__name__}:update - No instance to update instance_id={instance.id}"
            )

    async def delete(self, instance: WorkflowInstance) -> None:
        """
        Delete an instance and its offloaded Variables blob.

        Deleting an instance that does not exist is a no-op.

        Args:
            instance: Instance to delete (only its id is used)
        """
        document = await self.documents.find_one_and_delete_by_id(instance.id)
        if document is None:
            logger.debug(
                f"{__name__}:delete - No instance to delete instance_id={instance.id}"
            )
            return

        key = document.get(VARIABLES_FIELD)
        if is_blob_reference(key):
            await self.blob_store.delete(key)

    async def delete_many(self, specification: Specification) -> int:
        """
        Delete every instance matching a specification, with its blob.

        Matching ids are resolved first and exactly those documents are
        deleted. Blob cleanup then deletes ``GRIDFS/{id}`` for every matched
        id whether or not that instance was offloaded; blob deletes of missing
        keys are no-ops in every backend.

        Args:
            specification: Filter selecting instances to delete

        Returns:
            Number of instance documents deleted
        """
        ids = await self.documents.find_ids(specification)
        if not ids:
            return 0

        deleted_count = await self.documents.delete_many_by_ids(ids)
        for id in ids:
            await self.blob_store.delete(blob_key_for(id))

        logger.info(
            f"{__name__}:delete_many - Deleted instances "
            f"matched={len(ids)}, deleted={deleted_count}"
        )
        return deleted_count

    async def find_many(
        self,
        specification: Specification,
        order_by: OrderBy | None = None,
        paging: Paging | None = None,
    ) -> list[WorkflowInstance]:
        """
        Retrieve instances matching a specification.

        Ids are resolved with ordering and paging applied, raw documents are
        fetched by id set, rehydrated and decoded. Results follow the resolved
        id order; ids whose document vanished in between are skipped.

        Args:
            specification: Filter to apply
            order_by: Optional sort field and direction
            paging: Optional skip/take window

        Returns:
            Matching instances in query order

        Raises:
            SerializationError: If a stored document cannot be decoded
        """
        ids = await self.documents.find_ids(specification, order_by, paging)
        documents = await self.documents.get_by_ids(ids)
        documents_by_id = {document["_id"]: document for document in documents}

        instances = []
        for id in ids:
            document = documents_by_id.get(id)
            if document is None:
                continue
            await self.rehydrator.rehydrate(document)
            instances.append(self.codec.decode(document))
        return instances

    async def find(self, specification: Specification) -> WorkflowInstance | None:
        """
        Retrieve the first instance matching a specification.

        Args:
            specification: Filter to apply

        Returns:
            The instance, or None if nothing matches

        Raises:
            SerializationError: If the stored document cannot be decoded
        """
        id = await self.documents.find_first_id(specification)
        if id is None:
            return None

        document = await self.documents.get_by_id(id)
        if document is None:
            return None

        await self.rehydrator.rehydrate(document)
        return self.codec.decode(document)

    async def find_by_id(self, id: str) -> WorkflowInstance | None:
        """
        Retrieve an instance by identifier.

        Args:
            id: Instance identifier

        Returns:
            The instance, or None if it does not exist
        """
        return await self.find(EntityIdSpecification(id))

    async def count(self, specification: Specification) -> int:
        """
        Count instances matching a specification.

        Args:
            specification: Filter to apply

        Returns:
            Number of matching instances
        """
        return await self.documents.count(specification)
