"""Movie routes."""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, Query, status

from movie_api.api.dependencies import get_movie_service, get_query_params
from movie_api.auth.dependencies import get_current_user, require_roles
from movie_api.schemas.movie import MovieCreate, MovieUpdate
from movie_api.schemas.user import Role
from movie_api.services import MovieService

router = APIRouter(prefix="/api/movies", tags=["Movies"])


@router.get(
    "",
    summary="Get all movies",
    description=(
        "List movies with filtering (`field=value`, `field[gt|gte|lt|lte|in]=value`), "
        "free-text `search`, `select`, `sort` and `page`/`limit` pagination."
    ),
)
def get_movies(
    params: Dict[str, Union[str, List[str]]] = Depends(get_query_params),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return service.list_movies(params)


@router.get("/top-rated", summary="Get top rated movies")
def get_top_rated_movies(
    limit: Optional[str] = Query(None, description="Number of movies to return"),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return service.top_rated(limit)


@router.get("/latest", summary="Get latest movies")
def get_latest_movies(
    limit: Optional[str] = Query(None, description="Number of movies to return"),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return service.latest(limit)


@router.get("/genre/{genre}", summary="Get movies by genre")
def get_movies_by_genre(
    genre: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return service.movies_by_genre(genre, page, limit)


@router.get("/admin/stats", summary="Get movie statistics (admin only)")
def get_movie_stats(
    _admin: Dict[str, Any] = Depends(require_roles(Role.admin.value)),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return {"success": True, "data": service.stats()}


@router.get("/{movie_id}", summary="Get single movie")
def get_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return {"success": True, "data": service.get_movie(movie_id)}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create new movie")
def create_movie(
    payload: MovieCreate,
    user: Dict[str, Any] = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return {"success": True, "data": service.create_movie(payload, user)}


@router.put("/{movie_id}", summary="Update movie (owner or admin)")
def update_movie(
    movie_id: str,
    payload: MovieUpdate,
    user: Dict[str, Any] = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return {"success": True, "data": service.update_movie(movie_id, payload, user)}


@router.delete("/{movie_id}", summary="Delete movie (owner or admin)")
def delete_movie(
    movie_id: str,
    user: Dict[str, Any] = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> Dict[str, Any]:
    service.delete_movie(movie_id, user)
    return {"success": True, "message": "Movie deleted successfully"}
