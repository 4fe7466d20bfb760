"""
Query execution coordinator.

Handles execution of queries through store-specific executors.
"""

import logging
from typing import Any, Dict, List

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from movie_api.core.exceptions import StoreQueryError
from movie_api.core.interfaces import IQueryExecutor
from movie_api.core.models import QueryResult

logger = logging.getLogger(__name__)

# Encoding errors (e.g. integers wider than 64 bits) surface before the server is reached
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


class QueryExecutor:
    """
    Coordinates query execution.

    Wraps a store-specific query executor and turns store failures into
    StoreQueryError. Nothing is retried: listing queries are read-only, so a
    caller can simply repeat a failed request.
    """

    def __init__(self, executor: IQueryExecutor):
        """
        Initialize query executor.

        Args:
            executor: Store-specific query executor implementation
        """
        self.executor = executor

    def execute(self, query: Dict[str, Any]) -> QueryResult:
        """
        Execute a translated listing query.

        Args:
            query: Store-specific query object

        Returns:
            QueryResult with total count and page documents

        Raises:
            StoreQueryError: If the store rejects or fails the query
        """
        try:
            return self.executor.execute(query)
        except STORE_ERRORS as e:
            logger.exception("Listing query failed: %s", query)
            raise StoreQueryError("Server Error") from e

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline.

        Raises:
            StoreQueryError: If the store rejects or fails the pipeline
        """
        try:
            return self.executor.aggregate(pipeline)
        except STORE_ERRORS as e:
            logger.exception("Aggregation failed: %s", pipeline)
            raise StoreQueryError("Server Error") from e
