"""
Application settings loaded from the environment.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from movie_api.core.models import QueryConfig

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration for the API process."""

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "movies_api"

    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_min: int = 60 * 24 * 30

    frontend_url: str = "*"
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    environment: str = "development"
    log_level: str = "INFO"

    query: QueryConfig = Field(default_factory=QueryConfig)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file)."""
        defaults = cls()
        return cls(
            mongo_uri=os.getenv("MONGO_URI", defaults.mongo_uri),
            mongo_database=os.getenv("MONGO_DATABASE", defaults.mongo_database),
            jwt_secret=os.getenv("JWT_SECRET", defaults.jwt_secret),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", defaults.jwt_algorithm),
            jwt_expires_min=int(os.getenv("JWT_EXPIRES_MIN", str(defaults.jwt_expires_min))),
            frontend_url=os.getenv("FRONTEND_URL", defaults.frontend_url),
            api_host=os.getenv("API_HOST", defaults.api_host),
            api_port=int(os.getenv("API_PORT", str(defaults.api_port))),
            environment=os.getenv("NODE_ENV", defaults.environment),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            query=QueryConfig(
                default_limit=int(os.getenv("DEFAULT_PAGE_SIZE", "10")),
            ),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
