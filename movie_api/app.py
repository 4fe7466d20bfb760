"""
FastAPI application factory.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_api import __version__
from movie_api.api import auth, health, movies
from movie_api.core.config import Settings, get_settings
from movie_api.core.exceptions import MovieApiError
from movie_api.core.logging import configure_logging
from movie_api.db import ensure_indexes, get_database

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Runtime settings; read from the environment when omitted
        database: Database to serve from; connects to ``settings.mongo_uri``
            when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ensure_indexes(app.state.db)
        logger.info("Movies API ready (%s)", settings.environment)
        yield

    app = FastAPI(
        title="Movies API",
        description="Movies management backend with authentication",
        version=__version__,
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = (
        database
        if database is not None
        else get_database(settings.mongo_uri, settings.mongo_database)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.is_development:
        app.middleware("http")(log_requests)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(movies.router)
    return app


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to the ``{success: false, message}`` envelope."""

    @app.exception_handler(MovieApiError)
    async def handle_api_error(request: Request, exc: MovieApiError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"][1:]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        return _error(400, "Validation errors", errors=errors)

    @app.exception_handler(PyMongoError)
    async def handle_store_error(request: Request, exc: PyMongoError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return _error(500, "Server Error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Server Error")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, f"Route {request.url.path} not found")
        return _error(exc.status_code, str(exc.detail))
