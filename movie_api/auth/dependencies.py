"""Authentication and role checks as FastAPI dependencies."""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from movie_api.api.dependencies import get_app_settings, get_user_service
from movie_api.auth.jwt import verify_jwt
from movie_api.core.config import Settings
from movie_api.core.exceptions import ForbiddenError, NotAuthorizedError
from movie_api.services import UserService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Enter JWT token")

NOT_AUTHORIZED = "Not authorized to access this route"


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """Resolve the user behind the bearer token or answer 401."""
    if credentials is None:
        raise NotAuthorizedError(NOT_AUTHORIZED)

    try:
        claims = verify_jwt(credentials.credentials, settings)
    except JWTError as exc:
        logger.debug("Rejected token: %s", exc)
        raise NotAuthorizedError(NOT_AUTHORIZED) from exc

    user = users.get_user(claims.get("id"))
    if user is None:
        raise NotAuthorizedError(NOT_AUTHORIZED)
    return user


def require_roles(*roles: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory that only lets users with one of ``roles`` through."""

    def check_role(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if user.get("role") not in roles:
            raise ForbiddenError(
                f"User role {user.get('role')} is not authorized to access this route"
            )
        return user

    return check_role
