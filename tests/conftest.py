"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory stand-in for the async pymongo collection, blob store,
instance store wired to both, and instance factories.
Dependencies: pytest, pymongo
System role: Test infrastructure and fixture management
"""

import copy
from types import SimpleNamespace
from typing import Any

import pytest
from pymongo.errors import DuplicateKeyError

from workflow_store.boundary.blob import InMemoryBlobStore
from workflow_store.boundary.db.CRUD import RawDocumentCRUD, WorkflowInstanceCRUD
from workflow_store.models import WorkflowInstance


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    """Evaluate the subset of MongoDB filter syntax used by the store."""
    for key, condition in filter.items():
        if key == "$and":
            if not all(_matches(document, sub) for sub in condition):
                return False
            continue
        value = document.get(key)
        if isinstance(condition, dict) and "$in" in condition:
            if value not in condition["$in"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    """Chainable cursor over a snapshot of matching documents, projected on read."""

    def __init__(
        self, documents: list[dict[str, Any]], projection: dict[str, int] | None = None
    ) -> None:
        self._documents = documents
        self._projection = projection

    def sort(self, spec: list[tuple[str, int]]) -> "FakeCursor":
        for key, direction in reversed(spec):
            self._documents.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def skip(self, count: int) -> "FakeCursor":
        self._documents = self._documents[count:]
        return self

    def limit(self, count: int) -> "FakeCursor":
        if count:
            self._documents = self._documents[:count]
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return [FakeAsyncCollection._project(d, self._projection) for d in self._documents]


class FakeAsyncCollection:
    """Dict-backed stand-in for the AsyncCollection methods the store calls."""

    name = "WorkflowInstances"

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}

    def _matching(self, filter: dict[str, Any] | None) -> list[dict[str, Any]]:
        return [d for d in self.documents.values() if _matches(d, filter or {})]

    @staticmethod
    def _project(document: dict[str, Any], projection: dict[str, int] | None) -> dict[str, Any]:
        if not projection:
            return copy.deepcopy(document)
        return {key: document[key] for key in projection if key in document}

    async def replace_one(self, filter, replacement, upsert=False):
        id = filter["_id"]
        matched = id in self.documents
        if matched or upsert:
            self.documents[id] = copy.deepcopy(dict(replacement))
        return SimpleNamespace(
            matched_count=int(matched),
            upserted_id=id if upsert and not matched else None,
        )

    async def insert_one(self, document):
        if document["_id"] in self.documents:
            raise DuplicateKeyError(f"duplicate key: {document['_id']}")
        self.documents[document["_id"]] = copy.deepcopy(dict(document))

    async def insert_many(self, documents):
        for document in documents:
            await self.insert_one(document)

    async def find_one_and_delete(self, filter):
        matching = self._matching(filter)
        if not matching:
            return None
        return self.documents.pop(matching[0]["_id"])

    async def delete_many(self, filter):
        matching = self._matching(filter)
        for document in matching:
            del self.documents[document["_id"]]
        return SimpleNamespace(deleted_count=len(matching))

    def find(self, filter=None, projection=None):
        matching = [copy.deepcopy(d) for d in self._matching(filter)]
        if isinstance((filter or {}).get("_id"), dict):
            # Id-set fetches come back in storage order, not request order
            matching.reverse()
        return FakeCursor(matching, projection)

    async def find_one(self, filter=None, projection=None):
        matching = self._matching(filter)
        if not matching:
            return None
        return self._project(matching[0], projection)

    async def count_documents(self, filter):
        return len(self._matching(filter))


@pytest.fixture
def fake_collection() -> FakeAsyncCollection:
    """Provide empty in-memory instance collection."""
    return FakeAsyncCollection()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    """Provide empty in-memory blob store."""
    return InMemoryBlobStore()


@pytest.fixture
def instance_store(
    fake_collection: FakeAsyncCollection, blob_store: InMemoryBlobStore
) -> WorkflowInstanceCRUD:
    """Provide instance store over the fake collection and memory blob store."""
    return WorkflowInstanceCRUD(RawDocumentCRUD(fake_collection), blob_store)


@pytest.fixture
def make_instance():
    """
    Build WorkflowInstance objects for tests.

    Returns:
        Callable accepting WorkflowInstance field overrides
    """

    def _make(**overrides: Any) -> WorkflowInstance:
        fields = {"definition_id": "approval-flow", "variables": "{}"}
        fields.update(overrides)
        return WorkflowInstance(**fields)

    return _make
