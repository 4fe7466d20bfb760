from bson import ObjectId
from fastapi.testclient import TestClient

from movie_api.app import create_app
from movie_api.services import MovieService

from tests.conftest import make_movie

NEW_MOVIE = {
    "title": "Inception",
    "description": "A thief who steals corporate secrets through dream-sharing technology.",
    "genre": ["Action", "Sci-Fi"],
    "director": "Christopher Nolan",
    "cast": [{"name": "Leonardo DiCaprio", "role": "Cobb"}],
    "rating": 8.8,
    "duration": 148,
    "releaseDate": "2010-07-16",
    "language": "English",
    "country": "USA",
    "posterUrl": "https://example.com/posters/inception.jpg",
    "imdbId": "tt1375666",
}


def test_list_movies_envelope(client, movies):
    response = client.get("/api/movies")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 10
    assert body["total"] == 25
    assert body["pagination"] == {"next": {"page": 2, "limit": 10}}
    assert body["data"][0]["createdBy"]["name"] == "John Doe"
    assert "id" in body["data"][0]


def test_list_movies_with_bracket_filters(client, movies):
    response = client.get(
        "/api/movies",
        params={"rating[gte]": "8", "rating[lt]": "9", "sort": "-rating", "select": "title,rating"},
    )

    body = response.json()
    assert body["total"] == 3
    assert [movie["rating"] for movie in body["data"]] == [8.8, 8.4, 8.0]
    assert set(body["data"][0]) == {"_id", "id", "title", "rating"}


def test_list_movies_repeated_in_keys(client, movies):
    response = client.get("/api/movies?duration[in]=90&duration[in]=91,92&sort=duration")

    assert [movie["duration"] for movie in response.json()["data"]] == [90, 91, 92]


def test_list_movies_malformed_pagination(client, movies):
    body = client.get("/api/movies", params={"page": "abc", "limit": "-5"}).json()

    assert body["count"] == 10
    assert body["pagination"] == {"next": {"page": 2, "limit": 10}}


def test_list_movies_search(client, movies):
    body = client.get("/api/movies", params={"search": "batman"}).json()

    assert sorted(movie["title"] for movie in body["data"]) == ["Movie 0", "Movie 21"]


def test_movies_by_genre(client, movies):
    response = client.get("/api/movies/genre/Action", params={"limit": "5"})

    body = response.json()
    assert body["total"] == 13
    assert body["count"] == 5
    assert body["pagination"] == {"page": 1, "limit": 5, "pages": 3}


def test_top_rated_skips_inactive_movies(client, db, movies, member):
    db["movies"].insert_one(
        make_movie(99, title="Hidden", rating=10, status="inactive", createdBy=member["_id"])
    )

    body = client.get("/api/movies/top-rated", params={"limit": "3"}).json()

    assert body["count"] == 3
    assert [movie["rating"] for movie in body["data"]] == [9.6, 9.2, 8.8]


def test_latest_orders_by_release_date(client, movies):
    body = client.get("/api/movies/latest", params={"limit": "2"}).json()

    assert [movie["title"] for movie in body["data"]] == ["Movie 24", "Movie 23"]


def test_get_movie(client, db, movies):
    movie_id = db["movies"].find_one({"title": "Movie 3"})["_id"]

    response = client.get(f"/api/movies/{movie_id}")

    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Movie 3"


def test_get_movie_not_found(client):
    for movie_id in (str(ObjectId()), "not-an-id"):
        response = client.get(f"/api/movies/{movie_id}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Movie not found"}


def test_create_movie(client, member, auth_headers):
    response = client.post("/api/movies", json=NEW_MOVIE, headers=auth_headers(member))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["title"] == "Inception"
    assert data["status"] == "active"
    assert data["createdBy"]["email"] == "john@example.com"
    assert isinstance(data["movieAge"], int)


def test_create_movie_requires_token(client):
    response = client.post("/api/movies", json=NEW_MOVIE)

    assert response.status_code == 401
    assert response.json()["message"] == "Not authorized to access this route"


def test_create_movie_validation_errors(client, member, auth_headers):
    payload = {**NEW_MOVIE, "rating": 11, "genre": [], "posterUrl": "not-a-url"}

    response = client.post("/api/movies", json=payload, headers=auth_headers(member))

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation errors"
    assert {error["field"] for error in body["errors"]} == {"rating", "genre", "posterUrl"}


def test_create_movie_duplicate_imdb_id(client, member, auth_headers):
    client.post("/api/movies", json=NEW_MOVIE, headers=auth_headers(member))

    response = client.post("/api/movies", json=NEW_MOVIE, headers=auth_headers(member))

    assert response.status_code == 400
    assert response.json()["message"] == "Duplicate field value entered"


def test_update_movie_by_owner(client, db, movies, member, auth_headers):
    movie_id = db["movies"].find_one({"title": "Movie 1"})["_id"]

    response = client.put(
        f"/api/movies/{movie_id}", json={"rating": 7.5}, headers=auth_headers(member)
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["rating"] == 7.5
    assert data["title"] == "Movie 1"
    assert data["updatedBy"]["name"] == "John Doe"


def test_update_movie_by_other_user(client, db, movies, other_member, auth_headers):
    movie_id = db["movies"].find_one({"title": "Movie 1"})["_id"]

    response = client.put(
        f"/api/movies/{movie_id}", json={"rating": 1}, headers=auth_headers(other_member)
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Not authorized to update this movie"
    assert db["movies"].find_one({"_id": movie_id})["rating"] == 0.4


def test_update_movie_by_admin(client, db, movies, admin, auth_headers):
    movie_id = db["movies"].find_one({"title": "Movie 1"})["_id"]

    response = client.put(
        f"/api/movies/{movie_id}", json={"status": "inactive"}, headers=auth_headers(admin)
    )

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "inactive"


def test_delete_movie(client, db, movies, member, auth_headers):
    movie_id = db["movies"].find_one({"title": "Movie 2"})["_id"]

    response = client.delete(f"/api/movies/{movie_id}", headers=auth_headers(member))

    assert response.json() == {"success": True, "message": "Movie deleted successfully"}
    assert client.get(f"/api/movies/{movie_id}").status_code == 404


def test_delete_movie_by_other_user(client, db, movies, other_member, auth_headers):
    movie_id = db["movies"].find_one({"title": "Movie 2"})["_id"]

    response = client.delete(f"/api/movies/{movie_id}", headers=auth_headers(other_member))

    assert response.status_code == 401
    assert db["movies"].count_documents({"_id": movie_id}) == 1


def test_stats_for_admin(client, movies, admin, auth_headers):
    response = client.get("/api/movies/admin/stats", headers=auth_headers(admin))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["overview"]["totalMovies"] == 25
    assert data["byGenre"][0]["_id"] == "Drama"
    assert data["byGenre"][0]["count"] == 25
    assert len(data["byYear"]) == 10
    assert data["byYear"][0]["_id"] == 2014


def test_stats_forbidden_for_users(client, member, auth_headers):
    response = client.get("/api/movies/admin/stats", headers=auth_headers(member))

    assert response.status_code == 403
    assert response.json()["message"] == "User role user is not authorized to access this route"


def test_unknown_route(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route /api/nothing-here not found"}


def test_health_and_welcome(client):
    health = client.get("/api/health").json()
    welcome = client.get("/").json()

    assert health["success"] is True
    assert health["environment"] == "test"
    assert welcome["message"] == "Welcome to Movies API"
    assert welcome["documentation"].endswith("/api-docs")


def test_unexpected_errors_use_the_error_envelope(settings, db, monkeypatch):
    def explode(self, params):
        raise RuntimeError("boom")

    monkeypatch.setattr(MovieService, "list_movies", explode)
    app = create_app(settings=settings, database=db)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/movies")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server Error"}
