"""Health check and API welcome routes."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from movie_api import __version__
from movie_api.api.dependencies import get_app_settings
from movie_api.core.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/api/health", summary="Health check")
def health(settings: Settings = Depends(get_app_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


@router.get("/", include_in_schema=False)
def welcome(request: Request) -> Dict[str, Any]:
    base_url = str(request.base_url).rstrip("/")
    return {
        "success": True,
        "message": "Welcome to Movies API",
        "version": __version__,
        "documentation": f"{base_url}/api-docs",
        "endpoints": {
            "auth": "/api/auth",
            "movies": "/api/movies",
            "health": "/api/health",
        },
        "features": [
            "JWT Authentication",
            "Complete CRUD operations for movies",
            "Advanced search and filtering",
            "Role-based access control",
            "Input validation",
            "Interactive API documentation",
        ],
        "quickStart": {
            "register": "POST /api/auth/register",
            "login": "POST /api/auth/login",
            "getMovies": "GET /api/movies",
            "documentation": "/api-docs",
        },
    }
