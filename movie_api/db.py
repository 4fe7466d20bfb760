"""
MongoDB connection handling.

One MongoClient (and its connection pool) is shared by the whole process.
"""

import logging
from functools import lru_cache

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from movie_api.core.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

MOVIES = "movies"
USERS = "users"


@lru_cache
def get_client(mongo_uri: str) -> MongoClient:
    logger.info("Connecting to MongoDB")
    return MongoClient(mongo_uri, tz_aware=True)


def get_database(mongo_uri: str, database_name: str) -> Database:
    return get_client(mongo_uri)[database_name]


def ensure_indexes(db: Database) -> None:
    """Create the unique and query indexes the collections rely on."""
    db[USERS].create_index([("email", ASCENDING)], unique=True)

    movies = db[MOVIES]
    movies.create_index([("imdbId", ASCENDING)], unique=True, sparse=True)
    movies.create_index([("genre", ASCENDING)])
    movies.create_index([("rating", DESCENDING)])
    movies.create_index([("releaseDate", DESCENDING)])
    movies.create_index([("createdBy", ASCENDING)])


def to_object_id(value: str, not_found_message: str) -> ObjectId:
    """Parse a path id; malformed ids are reported as missing records."""
    if not ObjectId.is_valid(value):
        raise ResourceNotFoundError(not_found_message)
    return ObjectId(value)
