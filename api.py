"""
FastAPI REST API for movies and users.

Exposes movie CRUD, filtered listings, statistics and JWT authentication.
"""

from movie_api.app import create_app
from movie_api.core.config import get_settings

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
