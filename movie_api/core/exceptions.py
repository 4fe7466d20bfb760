"""
Exception hierarchy for the movies API.

Every error carries the HTTP status the API layer answers with.
"""

from typing import Optional


class MovieApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class StoreQueryError(MovieApiError):
    """The record store rejected or failed to execute a query."""

    status_code = 500


class ResourceNotFoundError(MovieApiError):
    status_code = 404


class NotAuthorizedError(MovieApiError):
    status_code = 401


class ForbiddenError(MovieApiError):
    status_code = 403


class DuplicateResourceError(MovieApiError):
    status_code = 400
