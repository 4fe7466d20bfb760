"""FastAPI dependencies shared by the routers."""

from typing import Dict, List, Union

from fastapi import Depends, Request
from pymongo.database import Database

from movie_api.core.config import Settings
from movie_api.services import MovieService, UserService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_movie_service(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MovieService:
    return MovieService(db, settings.query)


def get_user_service(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> UserService:
    return UserService(db, settings)


def get_query_params(request: Request) -> Dict[str, Union[str, List[str]]]:
    """Query string as a mapping; a repeated key maps to the list of its values."""
    params: Dict[str, Union[str, List[str]]] = {}
    for key, value in request.query_params.multi_items():
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params
