"""
Seed the database with sample users and movies.

Usage:
    python seed_data.py -i    import sample data (existing data is deleted)
    python seed_data.py -d    delete all users and movies
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo.database import Database

from movie_api.core.config import get_settings
from movie_api.core.logging import configure_logging
from movie_api.db import MOVIES, USERS, ensure_indexes, get_database
from movie_api.schemas.movie import MovieCreate
from movie_api.schemas.user import Role, UserRegister
from movie_api.services import UserService

logger = logging.getLogger("seed_data")

USERS_DATA = [
    {
        "name": "Admin User",
        "email": "admin@example.com",
        "password": "Admin123",
        "role": Role.admin,
        "bio": "System Administrator",
    },
    {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "User1234",
        "role": Role.user,
        "bio": "Movie enthusiast and critic",
    },
]

MOVIES_DATA: List[Dict[str, Any]] = [
    {
        "title": "The Shawshank Redemption",
        "description": "Two imprisoned men bond over a number of years, finding solace and eventual redemption through acts of common decency.",
        "genre": ["Drama"],
        "director": "Frank Darabont",
        "cast": [
            {"name": "Tim Robbins", "role": "Andy Dufresne"},
            {"name": "Morgan Freeman", "role": "Ellis Boyd Redding"},
        ],
        "rating": 9.3,
        "duration": 142,
        "releaseDate": "1994-09-23",
        "language": "English",
        "country": "USA",
        "posterUrl": "https://via.placeholder.com/300x450/shawshank-redemption.png",
        "budget": 25000000,
        "boxOffice": 16000000,
    },
    {
        "title": "The Godfather",
        "description": "The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.",
        "genre": ["Crime", "Drama"],
        "director": "Francis Ford Coppola",
        "cast": [
            {"name": "Marlon Brando", "role": "Don Vito Corleone"},
            {"name": "Al Pacino", "role": "Michael Corleone"},
        ],
        "rating": 9.2,
        "duration": 175,
        "releaseDate": "1972-03-24",
        "language": "English",
        "country": "USA",
        "posterUrl": "https://via.placeholder.com/300x450/the-godfather.png",
        "budget": 6000000,
        "boxOffice": 245066411,
    },
    {
        "title": "The Dark Knight",
        "description": "When the menace known as the Joker wreaks havoc and chaos on the people of Gotham, Batman must accept one of the greatest tests of his ability to fight injustice.",
        "genre": ["Action", "Crime", "Drama"],
        "director": "Christopher Nolan",
        "cast": [
            {"name": "Christian Bale", "role": "Bruce Wayne"},
            {"name": "Heath Ledger", "role": "Joker"},
        ],
        "rating": 9.0,
        "duration": 152,
        "releaseDate": "2008-07-18",
        "language": "English",
        "country": "USA",
        "posterUrl": "https://via.placeholder.com/300x450/the-dark-knight.png",
        "budget": 185000000,
        "boxOffice": 1004558444,
    },
    {
        "title": "Pulp Fiction",
        "description": "The lives of two mob hitmen, a boxer, a gangster and his wife, and a pair of diner bandits intertwine in four tales of violence and redemption.",
        "genre": ["Crime", "Drama"],
        "director": "Quentin Tarantino",
        "cast": [
            {"name": "John Travolta", "role": "Vincent Vega"},
            {"name": "Samuel L. Jackson", "role": "Jules Winnfield"},
        ],
        "rating": 8.9,
        "duration": 154,
        "releaseDate": "1994-10-14",
        "language": "English",
        "country": "USA",
        "posterUrl": "https://via.placeholder.com/300x450/pulp-fiction.png",
        "budget": 8000000,
        "boxOffice": 214179088,
    },
    {
        "title": "Forrest Gump",
        "description": "The presidencies of Kennedy and Johnson, the Vietnam War, and other historical events unfold from the perspective of an Alabama man with an IQ of 75.",
        "genre": ["Drama", "Romance"],
        "director": "Robert Zemeckis",
        "cast": [
            {"name": "Tom Hanks", "role": "Forrest Gump"},
            {"name": "Robin Wright", "role": "Jenny Curran"},
        ],
        "rating": 8.8,
        "duration": 142,
        "releaseDate": "1994-07-06",
        "language": "English",
        "country": "USA",
        "posterUrl": "https://via.placeholder.com/300x450/forrest-gump.png",
        "budget": 55000000,
        "boxOffice": 678226465,
    },
]


def delete_data(db: Database) -> None:
    db[USERS].delete_many({})
    db[MOVIES].delete_many({})
    logger.info("Existing data deleted...")


def import_data(db: Database) -> None:
    """Replace all users and movies with the sample data."""
    delete_data(db)
    ensure_indexes(db)

    users = UserService(db, get_settings())
    created_users = []
    for data in USERS_DATA:
        payload = UserRegister(name=data["name"], email=data["email"], password=data["password"])
        user = users.register(payload, role=data["role"])
        db[USERS].update_one({"_id": user["_id"]}, {"$set": {"bio": data["bio"]}})
        created_users.append(user)
    logger.info("Users imported...")

    admin = created_users[0]
    now = datetime.now(timezone.utc)
    documents = []
    for data in MOVIES_DATA:
        documents.append(MovieCreate(**data).to_document())
    db[MOVIES].insert_many(
        [
            {**document, "createdBy": admin["_id"], "createdAt": now, "updatedAt": now}
            for document in documents
        ]
    )
    logger.info("Movies imported...")


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Seed the movies database.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-i", "--import", dest="import_", action="store_true", help="import sample data")
    group.add_argument("-d", "--delete", action="store_true", help="delete all data")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    if not (args.import_ or args.delete):
        parser.print_help()
        return 0

    db = get_database(settings.mongo_uri, settings.mongo_database)
    if args.import_:
        import_data(db)
        logger.info("Data import successful!")
    else:
        delete_data(db)
        logger.info("Data deleted successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
