"""MongoDB adapter for the movies API."""

from movie_api.adapters.mongodb.type_mappings import (
    TypeMapper,
    MOVIE_FIELD_TYPES,
)
from movie_api.adapters.mongodb.query_translator import MongoQueryTranslator
from movie_api.adapters.mongodb.executor import MongoQueryExecutor, populate_references

__all__ = [
    "TypeMapper",
    "MOVIE_FIELD_TYPES",
    "MongoQueryTranslator",
    "MongoQueryExecutor",
    "populate_references",
]
