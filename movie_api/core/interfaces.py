"""
Abstract interfaces for record store adapters.

These protocols define the contract a store adapter must implement to serve
query plans built by the query translator.
"""

from typing import Any, Dict, List, Protocol

from movie_api.core.models import QueryPlan, QueryResult


class IQueryTranslator(Protocol):
    """
    Translate a store-agnostic query plan into a store-specific query.

    Takes the QueryPlan produced from request parameters and converts it to
    the native query format of a store (e.g., a MongoDB filter document).
    """

    def translate(self, plan: QueryPlan) -> Dict[str, Any]:
        """
        Convert a query plan to a store-specific query.

        Args:
            plan: Query plan built from the request parameters

        Returns:
            Store-specific query object. Must at least contain the keys
            consumed by the matching executor.
        """
        ...


class IQueryExecutor(Protocol):
    """
    Execute store-specific queries and return normalized results.
    """

    def execute(self, query: Dict[str, Any]) -> QueryResult:
        """
        Run a translated listing query.

        Args:
            query: Store-specific query object from IQueryTranslator

        Returns:
            QueryResult whose ``total_hits`` counts every record matching the
            predicate (ignoring pagination) and whose ``documents`` holds the
            requested page.
        """
        ...

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline.

        Args:
            pipeline: Store-specific aggregation stages

        Returns:
            List of aggregated rows
        """
        ...
