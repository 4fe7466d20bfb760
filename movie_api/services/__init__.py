"""Domain services over the record store."""

from movie_api.services.movies import MovieService
from movie_api.services.users import UserService

__all__ = ["MovieService", "UserService"]
