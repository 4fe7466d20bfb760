from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from movie_api.core.config import Settings


def create_jwt(payload: Dict[str, Any], settings: Settings) -> str:
    exp = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_min)
    to_encode = payload | {"exp": exp}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_jwt(token: str, settings: Settings) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise JWTError("Invalid or expired token") from e
