"""Authentication and profile routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from movie_api.api.dependencies import get_user_service
from movie_api.auth.dependencies import get_current_user
from movie_api.execution import ResultFormatter
from movie_api.schemas.user import UserLogin, UserRegister, UserUpdate
from movie_api.services import UserService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register a new user")
def register(
    payload: UserRegister,
    users: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = users.register(payload)
    return users.token_response(user)


@router.post("/login", summary="Log in and receive a token")
def login(
    payload: UserLogin,
    users: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = users.authenticate(payload.email, payload.password)
    return users.token_response(user)


@router.get("/me", summary="Get current user")
def get_me(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return {"success": True, "data": ResultFormatter.serialize_document(user)}


@router.put("/me", summary="Update current user details")
def update_me(
    payload: UserUpdate,
    user: Dict[str, Any] = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    updated = users.update_user(user, payload)
    return {"success": True, "data": ResultFormatter.serialize_document(updated)}
