"""
Movie Pydantic Schemas
"""

from datetime import date, datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict

from .genre import Genre
from .language import Language

class MovieBase(BaseModel):
    """Movie fields accepted on write"""
    title: Optional[str] = None
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: Optional[int] = None
    # Parsed by the service so that a malformed date fails like any other write
    release_date: Optional[Union[date, str]] = None

class MovieCreate(MovieBase):
    """Create movie schema"""

class MovieUpdate(MovieBase):
    """Partial update schema; only fields present in the body are applied"""

class Movie(BaseModel):
    """Movie response schema with genre and language expanded"""
    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: Optional[int] = None
    release_date: Optional[date] = None
    genre: Genre
    language: Language

    model_config = ConfigDict(from_attributes=True)


def parse_release_date(value: Optional[Union[date, str]]) -> date:
    """
    Parse a release date given either as a calendar date ("1994-09-23")
    or as a full ISO timestamp ("1994-09-23T00:00:00.000Z").

    Raises ValueError when the value is missing or not a recognizable date.
    """
    if value is None:
        raise ValueError("release date is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
