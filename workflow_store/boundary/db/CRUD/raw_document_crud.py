"""
Raw document operations for a MongoDB collection.

Provides generic id-addressed writes, bulk reads and the specification-driven
id query used by typed stores. Documents are plain dicts; no record type is
known at this level.

Dependencies: pymongo
System role: Generic document capability composed into typed stores
"""

from typing import Any, Iterable, Mapping, Sequence

from pymongo.asynchronous.collection import AsyncCollection

from workflow_store.models.query import OrderBy, Paging, Specification

_ID_PROJECTION = {"_id": 1}


class RawDocumentCRUD:
    """
    Generic operations over raw documents keyed by ``_id``.

    Attributes:
        collection: The async pymongo collection to operate on
    """

    def __init__(self, collection: AsyncCollection) -> None:
        """
        Initialize CRUD with target collection.

        Args:
            collection: Async pymongo collection holding the documents
        """
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    async def replace_by_id(
        self,
        id: str,
        document: Mapping[str, Any],
        upsert: bool,
    ) -> bool:
        """
        Replace the document with the given id.

        Args:
            id: Document identifier
            document: Full replacement document
            upsert: Insert when no document matches

        Returns:
            True if a document was replaced or inserted, False if none matched
        """
        result = await self.collection.replace_one({"_id": id}, document, upsert=upsert)
        return result.matched_count > 0 or result.upserted_id is not None

    async def insert(self, document: Mapping[str, Any]) -> None:
        """
        Insert one document.

        Args:
            document: Document carrying its own ``_id``
        """
        await self.collection.insert_one(document)

    async def insert_many(self, documents: Sequence[Mapping[str, Any]]) -> None:
        """
        Insert documents in one batch. An empty batch performs no I/O.

        Args:
            documents: Documents carrying their own ``_id``
        """
        if not documents:
            return
        await self.collection.insert_many(list(documents))

    async def find_one_and_delete_by_id(self, id: str) -> dict[str, Any] | None:
        """
        Atomically remove a document and return it.

        Args:
            id: Document identifier

        Returns:
            The removed document, or None if nothing matched
        """
        return await self.collection.find_one_and_delete({"_id": id})

    async def delete_many_by_ids(self, ids: Iterable[str]) -> int:
        """
        Delete all documents whose id is in ``ids``.

        Args:
            ids: Document identifiers

        Returns:
            Number of documents deleted
        """
        id_list = list(ids)
        if not id_list:
            return 0
        result = await self.collection.delete_many({"_id": {"$in": id_list}})
        return result.deleted_count

    async def get_by_id(self, id: str) -> dict[str, Any] | None:
        """
        Retrieve a single document by identifier.

        Args:
            id: Document identifier

        Returns:
            Document if found, None otherwise
        """
        return await self.collection.find_one({"_id": id})

    async def get_by_ids(self, ids: Iterable[str]) -> list[dict[str, Any]]:
        """
        Retrieve documents for a set of identifiers, in no particular order.

        Args:
            ids: Document identifiers

        Returns:
            Documents found; missing ids are skipped
        """
        id_list = list(ids)
        if not id_list:
            return []
        cursor = self.collection.find({"_id": {"$in": id_list}})
        return await cursor.to_list(length=None)

    async def find_ids(
        self,
        specification: Specification,
        order_by: OrderBy | None = None,
        paging: Paging | None = None,
    ) -> list[str]:
        """
        Resolve a specification to an ordered, paged list of identifiers.

        Args:
            specification: Filter to apply
            order_by: Optional sort field and direction
            paging: Optional skip/take window

        Returns:
            Matching identifiers in query order
        """
        cursor = self.collection.find(specification.to_filter(), projection=_ID_PROJECTION)
        if order_by is not None:
            cursor = cursor.sort(order_by.to_sort())
        if paging is not None:
            cursor = cursor.skip(paging.skip)
            if paging.take is not None:
                cursor = cursor.limit(paging.take)
        documents = await cursor.to_list(length=None)
        return [document["_id"] for document in documents]

    async def find_first_id(self, specification: Specification) -> str | None:
        """
        Resolve a specification to the first matching identifier.

        Args:
            specification: Filter to apply

        Returns:
            Identifier of the first match, None if nothing matches
        """
        document = await self.collection.find_one(
            specification.to_filter(), projection=_ID_PROJECTION
        )
        if document is None:
            return None
        return document["_id"]

    async def count(self, specification: Specification) -> int:
        """
        Count documents matching a specification.

        Args:
            specification: Filter to apply

        Returns:
            Number of matching documents
        """
        return await self.collection.count_documents(specification.to_filter())
