"""
Pydantic Schemas - Main imports
"""

from .common import MessageResponse, ErrorResponse, HealthResponse
from .genre import Genre, GenreWrite
from .language import Language
from .movie import MovieBase, MovieCreate, MovieUpdate, Movie, parse_release_date

__all__ = [
    # Common
    "MessageResponse", "ErrorResponse", "HealthResponse",

    # Genre
    "Genre", "GenreWrite",

    # Language
    "Language",

    # Movie
    "MovieBase", "MovieCreate", "MovieUpdate", "Movie", "parse_release_date",
]
