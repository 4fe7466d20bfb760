"""
MongoDB query executor.

Runs translated listing queries and aggregation pipelines against a collection.
"""

from typing import Any, Dict, Iterable, List, Sequence

from pymongo.collection import Collection

from movie_api.core.models import QueryResult


class MongoQueryExecutor:
    """
    Executes MongoDB queries.

    Implements the IQueryExecutor interface for MongoDB. Store errors
    (``pymongo.errors.PyMongoError``) propagate to the caller.
    """

    def __init__(self, collection: Collection):
        """
        Initialize MongoDB query executor.

        Args:
            collection: Collection the queries run against
        """
        self.collection = collection

    def execute(self, query: Dict[str, Any]) -> QueryResult:
        """
        Count the matching documents, then fetch the requested page.

        Args:
            query: Output of MongoQueryTranslator.translate()

        Returns:
            QueryResult with the unpaginated total and the page documents
        """
        filter_doc = query.get("filter", {})

        # Count uses the predicate only: no projection, sort or window
        total = self.collection.count_documents(filter_doc)

        cursor = self.collection.find(filter_doc, query.get("projection"))
        if query.get("sort"):
            cursor = cursor.sort(query["sort"])
        cursor = cursor.skip(query.get("skip", 0)).limit(query.get("limit", 0))

        return QueryResult(total_hits=total, documents=list(cursor))

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(pipeline))


def populate_references(
    documents: Iterable[Dict[str, Any]],
    paths: Sequence[str],
    collection: Collection,
    fields: Sequence[str] = ("name", "email"),
) -> None:
    """
    Replace ObjectId references in ``documents`` with the referenced records.

    Only ``fields`` (plus ``_id``) of the referenced records are loaded.
    References that no longer resolve become ``None``.

    Args:
        documents: Documents to populate in place
        paths: Top-level reference fields (e.g. ``createdBy``)
        collection: Collection the references point to
        fields: Fields to load from the referenced records
    """
    documents = list(documents)
    ids = {
        doc[path]
        for doc in documents
        for path in paths
        if doc.get(path) is not None
    }
    if not ids:
        return

    projection = {field: 1 for field in fields}
    referenced = {
        ref["_id"]: ref
        for ref in collection.find({"_id": {"$in": list(ids)}}, projection)
    }

    for doc in documents:
        for path in paths:
            if doc.get(path) is not None:
                doc[path] = referenced.get(doc[path])
