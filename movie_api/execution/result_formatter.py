"""
Result formatting utilities.

Turns raw store documents into JSON-ready dictionaries and builds the
response envelopes returned by the API.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId

from movie_api.core.models import PaginationWindow, QueryResult


class ResultFormatter:
    """
    Formats query results into a consistent structure.
    """

    HIDDEN_FIELDS = ("password",)

    @classmethod
    def serialize_document(cls, document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Make a store document JSON-ready.

        ObjectIds become strings (recursively), an ``id`` alias is added for
        ``_id`` and hidden fields are dropped.

        Args:
            document: Raw document from the store

        Returns:
            Serialized document, or None when given None
        """
        if document is None:
            return None

        serialized = {
            key: cls._serialize_value(value)
            for key, value in document.items()
            if key not in cls.HIDDEN_FIELDS
        }
        if "_id" in serialized:
            serialized["id"] = serialized["_id"]
        return serialized

    @classmethod
    def _serialize_value(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, dict):
            return cls.serialize_document(value)
        if isinstance(value, list):
            return [cls._serialize_value(item) for item in value]
        return value

    @classmethod
    def format_movie(
        cls, document: Optional[Dict[str, Any]], now: Optional[datetime] = None
    ) -> Optional[Dict[str, Any]]:
        """Serialize a movie and add its ``movieAge`` (years since release)."""
        movie = cls.serialize_document(document)
        if movie is None:
            return None

        release_date = movie.get("releaseDate")
        if isinstance(release_date, datetime):
            current_year = (now or datetime.now(timezone.utc)).year
            movie["movieAge"] = current_year - release_date.year
        return movie

    @staticmethod
    def format_listing(
        result: QueryResult,
        window: PaginationWindow,
        data: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Build the listing envelope.

        Args:
            result: Result of the listing query
            window: Pagination window the page was fetched with
            data: Formatted page documents

        Returns:
            ``{success, count, total, pagination, data}`` dictionary
        """
        return {
            "success": True,
            "count": len(data),
            "total": result.total_hits,
            "pagination": {
                name: link.model_dump()
                for name, link in window.links(result.total_hits).items()
            },
            "data": data,
        }
