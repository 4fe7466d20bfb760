"""Core interfaces, models and settings for the movies API."""

from movie_api.core.interfaces import (
    IQueryTranslator,
    IQueryExecutor,
)
from movie_api.core.models import (
    FilterOperator,
    FilterParameter,
    SearchPredicate,
    SortDirection,
    SortField,
    PageLink,
    PaginationWindow,
    QueryPlan,
    QueryResult,
    QueryConfig,
)

__all__ = [
    "IQueryTranslator",
    "IQueryExecutor",
    "FilterOperator",
    "FilterParameter",
    "SearchPredicate",
    "SortDirection",
    "SortField",
    "PageLink",
    "PaginationWindow",
    "QueryPlan",
    "QueryResult",
    "QueryConfig",
]
