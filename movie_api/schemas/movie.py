from datetime import datetime
from enum import Enum
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Genre(str, Enum):
    action = "Action"
    adventure = "Adventure"
    animation = "Animation"
    biography = "Biography"
    comedy = "Comedy"
    crime = "Crime"
    documentary = "Documentary"
    drama = "Drama"
    family = "Family"
    fantasy = "Fantasy"
    history = "History"
    horror = "Horror"
    music = "Music"
    mystery = "Mystery"
    romance = "Romance"
    sci_fi = "Sci-Fi"
    sport = "Sport"
    thriller = "Thriller"
    war = "War"
    western = "Western"


class MovieStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    coming_soon = "coming-soon"


POSTER_URL_PATTERN = re.compile(r"^https?://.+\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)
URL_PATTERN = re.compile(r"^https?://.+")


class CastMember(BaseModel):
    name: str = Field(..., min_length=1, description="Actor name.")
    role: Optional[str] = Field(None, description="Character played.")


class Award(BaseModel):
    name: Optional[str] = None
    year: Optional[int] = None
    category: Optional[str] = None


class MovieFields(BaseModel):
    """Field rules shared by movie creation and update payloads."""

    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    @field_validator("releaseDate", mode="before", check_fields=False)
    @classmethod
    def parse_release_date(cls, value: Any) -> Any:
        # Plain dates ("1994-09-23") are accepted and stored at midnight
        if isinstance(value, str) and len(value) == 10:
            return datetime.fromisoformat(value)
        return value

    @field_validator("posterUrl", check_fields=False)
    @classmethod
    def check_poster_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not POSTER_URL_PATTERN.match(value):
            raise ValueError("Please provide a valid image URL")
        return value

    @field_validator("trailerUrl", check_fields=False)
    @classmethod
    def check_trailer_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not URL_PATTERN.match(value):
            raise ValueError("Please provide a valid URL")
        return value

    def to_document(self) -> Dict[str, Any]:
        """Fields to write to the store; unset and null fields are left out."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MovieCreate(MovieFields):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    genre: List[Genre] = Field(..., min_length=1, description="At least one genre is required.")
    director: str = Field(..., min_length=1, max_length=100)
    cast: List[CastMember] = Field(default_factory=list)
    rating: float = Field(..., ge=0, le=10)
    duration: int = Field(..., ge=1, description="Duration in minutes.")
    releaseDate: datetime
    language: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    posterUrl: str
    trailerUrl: Optional[str] = None
    budget: Optional[float] = Field(None, ge=0)
    boxOffice: Optional[float] = Field(None, ge=0)
    awards: List[Award] = Field(default_factory=list)
    imdbId: Optional[str] = None
    status: MovieStatus = MovieStatus.active

    def to_document(self) -> Dict[str, Any]:
        # Defaults (status, empty lists) are part of a new record
        return self.model_dump(exclude_none=True)


class MovieUpdate(MovieFields):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=10, max_length=2000)
    genre: Optional[List[Genre]] = Field(None, min_length=1)
    director: Optional[str] = Field(None, min_length=1, max_length=100)
    cast: Optional[List[CastMember]] = None
    rating: Optional[float] = Field(None, ge=0, le=10)
    duration: Optional[int] = Field(None, ge=1)
    releaseDate: Optional[datetime] = None
    language: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    posterUrl: Optional[str] = None
    trailerUrl: Optional[str] = None
    budget: Optional[float] = Field(None, ge=0)
    boxOffice: Optional[float] = Field(None, ge=0)
    awards: Optional[List[Award]] = None
    imdbId: Optional[str] = None
    status: Optional[MovieStatus] = None
