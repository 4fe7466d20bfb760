"""
Listing orchestrator - main entry point for list requests.

Coordinates query translation, execution and result formatting.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from pymongo.collection import Collection

from movie_api.core.interfaces import IQueryTranslator, IQueryExecutor
from movie_api.core.models import QueryConfig, QueryPlan
from movie_api.execution.executor import QueryExecutor
from movie_api.execution.result_formatter import ResultFormatter
from movie_api.query.translator import ParamValue, QueryTranslator

DocumentHook = Callable[[List[Dict[str, Any]]], None]
DocumentFormatter = Callable[[Dict[str, Any]], Optional[Dict[str, Any]]]


class ListingOrchestrator:
    """
    Runs filtered, sorted and paginated listings.

    Each call builds a fresh QueryPlan from the request parameters, counts
    the matching records, fetches the requested page and wraps it in the
    listing envelope. Instances hold no per-request state.
    """

    def __init__(
        self,
        query_translator: IQueryTranslator,
        query_executor: IQueryExecutor,
        config: Optional[QueryConfig] = None,
        on_page: Optional[DocumentHook] = None,
        formatter: DocumentFormatter = ResultFormatter.serialize_document,
    ):
        """
        Initialize listing orchestrator with store adapters.

        Args:
            query_translator: Store-specific query translator
            query_executor: Store-specific query executor
            config: Query-string defaults (page size, default sort, ...)
            on_page: Called with the raw page documents before formatting,
                e.g. to populate references
            formatter: Turns one raw document into its JSON-ready form
        """
        self.query_translator = QueryTranslator(config, query_translator)
        self.query_executor = QueryExecutor(query_executor)
        self.on_page = on_page
        self.formatter = formatter

    @classmethod
    def from_mongodb(
        cls,
        collection: Collection,
        field_types: Optional[Dict[str, str]] = None,
        config: Optional[QueryConfig] = None,
        references: Optional[Collection] = None,
        reference_paths: Sequence[str] = (),
        formatter: DocumentFormatter = ResultFormatter.serialize_document,
    ) -> "ListingOrchestrator":
        """
        Create orchestrator for a MongoDB collection.

        Args:
            collection: Collection being listed
            field_types: Field -> type mapping used to cast filter values
            config: Query-string defaults
            references: Collection that ``reference_paths`` point into
            reference_paths: Reference fields to populate on every page
            formatter: Document formatter

        Returns:
            Configured ListingOrchestrator for MongoDB
        """
        from movie_api.adapters.mongodb import (
            MongoQueryExecutor,
            MongoQueryTranslator,
            TypeMapper,
            populate_references,
        )

        on_page: Optional[DocumentHook] = None
        if references is not None and reference_paths:
            def _populate(documents: List[Dict[str, Any]]) -> None:
                populate_references(documents, reference_paths, references)

            on_page = _populate

        return cls(
            query_translator=MongoQueryTranslator(TypeMapper(field_types)),
            query_executor=MongoQueryExecutor(collection),
            config=config,
            on_page=on_page,
            formatter=formatter,
        )

    def build_plan(self, params: Mapping[str, ParamValue]) -> QueryPlan:
        return self.query_translator.build_plan(params)

    def run(self, params: Mapping[str, ParamValue]) -> Dict[str, Any]:
        """
        Run a listing request.

        Args:
            params: Query-string parameters of the request

        Returns:
            ``{success, count, total, pagination, data}`` envelope

        Raises:
            StoreQueryError: If the store fails the count or page query
        """
        plan = self.build_plan(params)
        store_query = self.query_translator.translate(plan)
        result = self.query_executor.execute(store_query)

        if self.on_page is not None:
            self.on_page(result.documents)

        data = [self.formatter(doc) for doc in result.documents]
        return ResultFormatter.format_listing(result, plan.window, data)
