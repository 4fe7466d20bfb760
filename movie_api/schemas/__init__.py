"""Request payload models."""

from movie_api.schemas.movie import (
    Award,
    CastMember,
    Genre,
    MovieCreate,
    MovieStatus,
    MovieUpdate,
)
from movie_api.schemas.user import Role, UserLogin, UserRegister, UserUpdate

__all__ = [
    "Award",
    "CastMember",
    "Genre",
    "MovieCreate",
    "MovieStatus",
    "MovieUpdate",
    "Role",
    "UserLogin",
    "UserRegister",
    "UserUpdate",
]
