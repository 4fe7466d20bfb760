from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import mongomock
import pytest
from fastapi.testclient import TestClient

from movie_api.app import create_app
from movie_api.core.config import Settings
from movie_api.schemas.user import Role, UserRegister
from movie_api.services import UserService

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_movie(index: int, **overrides: Any) -> Dict[str, Any]:
    """A valid movie document; rating grows with ``index`` (0.0 .. 9.6 for 25 movies)."""
    movie = {
        "title": f"Movie {index}",
        "description": f"Description of movie number {index}.",
        "genre": ["Drama"] if index % 2 else ["Action", "Drama"],
        "director": "Christopher Nolan" if index % 5 == 0 else "Someone Else",
        "cast": [],
        "rating": round(index * 0.4, 1),
        "duration": 90 + index,
        "releaseDate": datetime(1990 + index, 6, 1, tzinfo=timezone.utc),
        "language": "English",
        "country": "USA",
        "posterUrl": f"https://example.com/posters/{index}.jpg",
        "budget": 1000 * index,
        "boxOffice": 2000 * index,
        "awards": [],
        "status": "active",
        "createdAt": BASE_DATE + timedelta(days=index),
        "updatedAt": BASE_DATE + timedelta(days=index),
    }
    movie.update(overrides)
    return movie


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret="test-secret", environment="test", log_level="WARNING")


@pytest.fixture
def db():
    return mongomock.MongoClient(tz_aware=True)["movies_api_test"]


@pytest.fixture
def client(settings, db):
    app = create_app(settings=settings, database=db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_service(settings, db) -> UserService:
    return UserService(db, settings)


@pytest.fixture
def admin(user_service) -> Dict[str, Any]:
    payload = UserRegister(name="Admin User", email="admin@example.com", password="Admin123")
    return user_service.register(payload, role=Role.admin)


@pytest.fixture
def member(user_service) -> Dict[str, Any]:
    payload = UserRegister(name="John Doe", email="john@example.com", password="User1234")
    return user_service.register(payload)


@pytest.fixture
def other_member(user_service) -> Dict[str, Any]:
    payload = UserRegister(name="Jane Roe", email="jane@example.com", password="User1234")
    return user_service.register(payload)


@pytest.fixture
def auth_headers(user_service):
    def _headers(user: Dict[str, Any]) -> Dict[str, str]:
        return {"Authorization": f"Bearer {user_service.issue_token(user)}"}

    return _headers


@pytest.fixture
def movies(db, member):
    """25 movies created by ``member``; Movie 21 and Movie 0 mention Batman."""
    documents = []
    for i in range(25):
        overrides = {"createdBy": member["_id"]}
        if i in (0, 21):
            overrides["description"] = f"A Batman story, take {i}."
        documents.append(make_movie(i, **overrides))
    db["movies"].insert_many(documents)
    return documents
