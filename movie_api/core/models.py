"""
Shared data models for the movie query system.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FilterOperator(str, Enum):
    """Comparison operators a filter parameter can carry."""

    EQUALS = "equals"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    IN = "in"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterParameter(BaseModel):
    """A single field/operator/value predicate taken from the query string."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: FilterOperator = FilterOperator.EQUALS
    value: Any  # str for scalar operators, tuple of str for IN


class SearchPredicate(BaseModel):
    """Case-insensitive substring match OR-ed across a fixed set of fields."""

    model_config = ConfigDict(frozen=True)

    term: str
    fields: Tuple[str, ...]


class SortField(BaseModel):
    """Sort field specification."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC


class PageLink(BaseModel):
    """Pointer to a neighbouring page."""

    page: int
    limit: int


class PaginationWindow(BaseModel):
    """
    The (page, limit) pair of a listing request.

    Both values are at least 1; ``skip`` is derived from them.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def has_next(self, total: int) -> bool:
        return self.page * self.limit < total

    def has_previous(self) -> bool:
        return self.page > 1

    def links(self, total: int) -> Dict[str, PageLink]:
        """
        Build the ``next``/``prev`` descriptor for a given total.

        Args:
            total: Number of records matching the filter predicate

        Returns:
            Dictionary with an optional ``next`` and an optional ``prev`` key
        """
        links: Dict[str, PageLink] = {}
        if self.has_next(total):
            links["next"] = PageLink(page=self.page + 1, limit=self.limit)
        if self.has_previous():
            links["prev"] = PageLink(page=self.page - 1, limit=self.limit)
        return links


class QueryPlan(BaseModel):
    """
    Store-agnostic description of a listing query.

    Filters are AND-ed together and with the optional search predicate.
    An empty ``select`` means every field is returned.
    """

    model_config = ConfigDict(frozen=True)

    filters: Tuple[FilterParameter, ...] = ()
    search: Optional[SearchPredicate] = None
    select: Tuple[str, ...] = ()
    sort: Tuple[SortField, ...] = ()
    window: PaginationWindow = Field(default_factory=PaginationWindow)


class QueryResult(BaseModel):
    """Standardized result of running a query plan against a store."""

    total_hits: int = 0
    documents: List[Dict[str, Any]] = Field(default_factory=list)


class QueryConfig(BaseModel):
    """Defaults and fixed vocabularies used when translating query strings."""

    default_page: int = Field(1, ge=1)
    default_limit: int = Field(10, ge=1)
    default_sort: str = "-createdAt"
    search_fields: Tuple[str, ...] = ("title", "description", "director")
    reserved_keys: Tuple[str, ...] = ("select", "sort", "page", "limit", "search")
