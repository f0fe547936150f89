"""
Query value objects for the instance store.

Specifications translate to native MongoDB filters; OrderBy and Paging
translate to cursor sort/skip/limit. Building richer predicates is left to
callers: anything implementing ``to_filter()`` is accepted.

Dependencies: dataclasses (stdlib)
System role: Predicate abstraction consumed by the query layer
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence

from workflow_store.core.exceptions import ValidationError


class Specification(Protocol):
    """Anything that can express itself as a MongoDB filter document."""

    def to_filter(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class EntityIdSpecification:
    """Match a single instance by identifier."""

    id: str

    def to_filter(self) -> dict[str, Any]:
        return {"_id": self.id}


@dataclass(frozen=True)
class EntityIdsSpecification:
    """Match any instance whose identifier is in the given set."""

    ids: Sequence[str]

    def to_filter(self) -> dict[str, Any]:
        return {"_id": {"$in": list(self.ids)}}


@dataclass(frozen=True)
class FilterSpecification:
    """Wrap a raw MongoDB filter, e.g. ``{"WorkflowStatus": "Finished"}``."""

    filter: Mapping[str, Any] = field(default_factory=dict)

    def to_filter(self) -> dict[str, Any]:
        return dict(self.filter)


@dataclass(frozen=True)
class AndSpecification:
    """Conjunction of two or more specifications."""

    specifications: Sequence[Specification]

    def to_filter(self) -> dict[str, Any]:
        filters = [spec.to_filter() for spec in self.specifications]
        filters = [f for f in filters if f]
        if not filters:
            return {}
        if len(filters) == 1:
            return filters[0]
        return {"$and": filters}


class SortDirection(str, Enum):
    """Sort direction for OrderBy."""

    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class OrderBy:
    """Order results by one document field (aliased name, e.g. ``CreatedAt``)."""

    field: str
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        if not self.field:
            raise ValidationError("OrderBy field cannot be empty", field="field")

    def to_sort(self) -> list[tuple[str, int]]:
        """Return the pymongo sort specification."""
        return [(self.field, 1 if self.direction == SortDirection.ASCENDING else -1)]


@dataclass(frozen=True)
class Paging:
    """Skip/take window over an ordered result set."""

    skip: int = 0
    take: int | None = None

    def __post_init__(self) -> None:
        if self.skip < 0:
            raise ValidationError("Paging skip must be >= 0", field="skip")
        if self.take is not None and self.take < 1:
            raise ValidationError("Paging take must be >= 1", field="take")

    @classmethod
    def page(cls, page: int, page_size: int) -> "Paging":
        """
        Build paging from a zero-based page number.

        Args:
            page: Zero-based page index
            page_size: Number of items per page

        Returns:
            Paging: Window covering the requested page
        """
        if page < 0:
            raise ValidationError("Page must be >= 0", field="page")
        if page_size < 1:
            raise ValidationError("Page size must be >= 1", field="page_size")
        return cls(skip=page * page_size, take=page_size)
