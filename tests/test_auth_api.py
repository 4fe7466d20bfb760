from movie_api.auth import create_jwt, hash_password, verify_password
from movie_api.core.config import Settings

REGISTRATION = {"name": "Ada Lovelace", "email": "Ada@Example.com", "password": "Secret123"}


def test_register_returns_token_and_hides_password(client, db):
    response = client.post("/api/auth/register", json=REGISTRATION)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["token"]
    assert body["data"]["email"] == "ada@example.com"
    assert body["data"]["role"] == "user"
    assert "password" not in body["data"]
    assert db["users"].find_one({"email": "ada@example.com"})["password"] != "Secret123"


def test_register_duplicate_email(client):
    client.post("/api/auth/register", json=REGISTRATION)

    response = client.post("/api/auth/register", json=REGISTRATION)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Duplicate field value entered"}


def test_register_weak_password(client):
    response = client.post("/api/auth/register", json={**REGISTRATION, "password": "password"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert [error["field"] for error in errors] == ["password"]


def test_login(client, member):
    response = client.post(
        "/api/auth/login", json={"email": "john@example.com", "password": "User1234"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "John Doe"


def test_login_with_wrong_password(client, member):
    response = client.post(
        "/api/auth/login", json={"email": "john@example.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_token_grants_access(client, member):
    token = client.post(
        "/api/auth/login", json={"email": "john@example.com", "password": "User1234"}
    ).json()["token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "john@example.com"
    assert "password" not in response.json()["data"]


def test_me_rejects_bad_tokens(client, member, settings):
    foreign = create_jwt({"id": str(member["_id"])}, Settings(jwt_secret="another-secret"))
    unknown_user = create_jwt({"id": "0" * 24}, settings)

    for token in ("garbage", foreign, unknown_user):
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized to access this route"


def test_me_without_token(client):
    assert client.get("/api/auth/me").status_code == 401


def test_update_me(client, member, auth_headers):
    response = client.put(
        "/api/auth/me",
        json={"name": "Johnny Doe", "bio": "Critic"},
        headers=auth_headers(member),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Johnny Doe"
    assert data["bio"] == "Critic"
    assert data["email"] == "john@example.com"


def test_update_me_invalid_phone(client, member, auth_headers):
    response = client.put(
        "/api/auth/me", json={"phone": "call me"}, headers=auth_headers(member)
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "phone"


def test_update_me_to_taken_email(client, member, other_member, auth_headers):
    response = client.put(
        "/api/auth/me", json={"email": "jane@example.com"}, headers=auth_headers(member)
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Duplicate field value entered"


def test_password_hashing():
    hashed = hash_password("Secret123")

    assert hashed != "Secret123"
    assert verify_password("Secret123", hashed)
    assert not verify_password("secret123", hashed)
    assert not verify_password("Secret123", "not-a-hash")
