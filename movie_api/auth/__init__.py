"""JWT issuing/verification, password hashing and auth dependencies."""

from movie_api.auth.jwt import create_jwt, verify_jwt
from movie_api.auth.passwords import hash_password, verify_password

__all__ = ["create_jwt", "verify_jwt", "hash_password", "verify_password"]
