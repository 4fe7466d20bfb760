"""
Movie service.

CRUD, curated listings and statistics over the movies collection.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from movie_api.adapters.mongodb import (
    MOVIE_FIELD_TYPES,
    MongoQueryExecutor,
    populate_references,
)
from movie_api.adapters.mongodb.aggregations import (
    genre_pipeline,
    overview_pipeline,
    year_pipeline,
)
from movie_api.core.exceptions import (
    DuplicateResourceError,
    NotAuthorizedError,
    ResourceNotFoundError,
)
from movie_api.core.models import QueryConfig
from movie_api.db import MOVIES, USERS, to_object_id
from movie_api.execution import QueryExecutor, ResultFormatter
from movie_api.orchestrator import ListingOrchestrator
from movie_api.query.translator import ParamValue, parse_positive_int
from movie_api.schemas.movie import MovieCreate, MovieStatus, MovieUpdate
from movie_api.schemas.user import Role

logger = logging.getLogger(__name__)

REFERENCE_PATHS = ("createdBy", "updatedBy")


class MovieService:
    """Operations on movies, bound to one database."""

    def __init__(self, db: Database, config: Optional[QueryConfig] = None):
        """
        Initialize movie service.

        Args:
            db: Database holding the movies and users collections
            config: Query-string defaults for listings
        """
        self.config = config or QueryConfig()
        self.movies = db[MOVIES]
        self.users = db[USERS]

        self.listing = ListingOrchestrator.from_mongodb(
            self.movies,
            field_types=MOVIE_FIELD_TYPES,
            config=self.config,
            references=self.users,
            reference_paths=REFERENCE_PATHS,
            formatter=ResultFormatter.format_movie,
        )
        self.query_executor = QueryExecutor(MongoQueryExecutor(self.movies))

    # ===== Listings =====

    def list_movies(self, params: Mapping[str, ParamValue]) -> Dict[str, Any]:
        """Filtered, searched, sorted and paginated listing."""
        return self.listing.run(params)

    def movies_by_genre(
        self,
        genre: str,
        page: Optional[ParamValue] = None,
        limit: Optional[ParamValue] = None,
    ) -> Dict[str, Any]:
        page_number = parse_positive_int(page, self.config.default_page)
        page_size = parse_positive_int(limit, self.config.default_limit)
        query = {"genre": {"$in": [genre]}}

        documents = list(
            self.movies.find(query)
            .sort("createdAt", DESCENDING)
            .skip((page_number - 1) * page_size)
            .limit(page_size)
        )
        total = self.movies.count_documents(query)
        data = self._format(documents, paths=("createdBy",))

        return {
            "success": True,
            "count": len(data),
            "total": total,
            "pagination": {
                "page": page_number,
                "limit": page_size,
                "pages": math.ceil(total / page_size),
            },
            "data": data,
        }

    def top_rated(self, limit: Optional[ParamValue] = None) -> Dict[str, Any]:
        return self._active_movies("rating", limit)

    def latest(self, limit: Optional[ParamValue] = None) -> Dict[str, Any]:
        return self._active_movies("releaseDate", limit)

    def _active_movies(self, sort_field: str, limit: Optional[ParamValue]) -> Dict[str, Any]:
        page_size = parse_positive_int(limit, self.config.default_limit)
        documents = list(
            self.movies.find({"status": MovieStatus.active.value})
            .sort(sort_field, DESCENDING)
            .limit(page_size)
        )
        data = self._format(documents, paths=("createdBy",))
        return {"success": True, "count": len(data), "data": data}

    # ===== CRUD =====

    def get_movie(self, movie_id: str) -> Dict[str, Any]:
        movie = self._find(movie_id)
        return self._format([movie])[0]

    def create_movie(self, payload: MovieCreate, user: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        document = payload.to_document()
        document.update(createdBy=user["_id"], createdAt=now, updatedAt=now)

        try:
            inserted = self.movies.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateResourceError("Duplicate field value entered") from e

        logger.info("Movie %s created by user %s", inserted.inserted_id, user["_id"])
        movie = self.movies.find_one({"_id": inserted.inserted_id})
        return self._format([movie], paths=("createdBy",))[0]

    def update_movie(
        self, movie_id: str, payload: MovieUpdate, user: Dict[str, Any]
    ) -> Dict[str, Any]:
        movie = self._find(movie_id)
        self._check_owner(movie, user, "Not authorized to update this movie")

        changes = payload.to_document()
        changes.update(updatedBy=user["_id"], updatedAt=datetime.now(timezone.utc))

        try:
            updated = self.movies.find_one_and_update(
                {"_id": movie["_id"]},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateResourceError("Duplicate field value entered") from e

        if updated is None:
            raise ResourceNotFoundError("Movie not found")
        return self._format([updated])[0]

    def delete_movie(self, movie_id: str, user: Dict[str, Any]) -> None:
        movie = self._find(movie_id)
        self._check_owner(movie, user, "Not authorized to delete this movie")
        self.movies.delete_one({"_id": movie["_id"]})
        logger.info("Movie %s deleted by user %s", movie["_id"], user["_id"])

    # ===== Statistics =====

    def stats(self) -> Dict[str, Any]:
        """Collection-wide overview plus per-genre and per-year breakdowns."""
        overview = self.query_executor.aggregate(overview_pipeline())
        by_genre = self.query_executor.aggregate(genre_pipeline())
        by_year = self.query_executor.aggregate(year_pipeline())

        return {
            "overview": overview[0] if overview else {},
            "byGenre": by_genre,
            "byYear": by_year,
        }

    # ===== Helper Methods =====

    def _find(self, movie_id: str) -> Dict[str, Any]:
        movie = self.movies.find_one({"_id": to_object_id(movie_id, "Movie not found")})
        if movie is None:
            raise ResourceNotFoundError("Movie not found")
        return movie

    @staticmethod
    def _check_owner(movie: Dict[str, Any], user: Dict[str, Any], message: str) -> None:
        is_owner = str(movie.get("createdBy")) == str(user["_id"])
        if not is_owner and user.get("role") != Role.admin.value:
            raise NotAuthorizedError(message)

    def _format(
        self, documents: List[Dict[str, Any]], paths=REFERENCE_PATHS
    ) -> List[Dict[str, Any]]:
        populate_references(documents, paths, self.users)
        return [ResultFormatter.format_movie(doc) for doc in documents]
