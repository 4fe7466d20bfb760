"""
User service.

Registration, credential checks and profile updates.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from movie_api.auth.jwt import create_jwt
from movie_api.auth.passwords import hash_password, verify_password
from movie_api.core.config import Settings
from movie_api.core.exceptions import (
    DuplicateResourceError,
    NotAuthorizedError,
    ResourceNotFoundError,
)
from movie_api.db import USERS
from movie_api.execution import ResultFormatter
from movie_api.schemas.user import Role, UserRegister, UserUpdate

logger = logging.getLogger(__name__)

DEFAULT_AVATAR = "https://via.placeholder.com/150x150.png?text=User"


class UserService:
    """Operations on users, bound to one database."""

    def __init__(self, db: Database, settings: Settings):
        self.users = db[USERS]
        self.settings = settings

    def register(self, payload: UserRegister, role: Role = Role.user) -> Dict[str, Any]:
        """
        Create a user with a hashed password.

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        now = datetime.now(timezone.utc)
        document = {
            "name": payload.name,
            "email": payload.email,
            "password": hash_password(payload.password),
            "role": role.value,
            "avatar": DEFAULT_AVATAR,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            inserted = self.users.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateResourceError("Duplicate field value entered") from e

        logger.info("Registered user %s", inserted.inserted_id)
        document["_id"] = inserted.inserted_id
        return document

    def authenticate(self, email: str, password: str) -> Dict[str, Any]:
        """
        Check credentials.

        Raises:
            NotAuthorizedError: If the email is unknown or the password is wrong
        """
        user = self.users.find_one({"email": email.lower()})
        if user is None or not verify_password(password, user.get("password", "")):
            raise NotAuthorizedError("Invalid credentials")
        return user

    def get_user(self, user_id: Optional[str]) -> Optional[Dict[str, Any]]:
        if not user_id or not ObjectId.is_valid(user_id):
            return None
        return self.users.find_one({"_id": ObjectId(user_id)})

    def update_user(self, user: Dict[str, Any], payload: UserUpdate) -> Dict[str, Any]:
        changes = payload.to_document()
        changes["updatedAt"] = datetime.now(timezone.utc)

        try:
            updated = self.users.find_one_and_update(
                {"_id": user["_id"]},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateResourceError("Duplicate field value entered") from e

        if updated is None:
            raise ResourceNotFoundError("User not found")
        return updated

    def issue_token(self, user: Dict[str, Any]) -> str:
        return create_jwt({"id": str(user["_id"]), "role": user.get("role")}, self.settings)

    def token_response(self, user: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "success": True,
            "token": self.issue_token(user),
            "data": ResultFormatter.serialize_document(user),
        }
