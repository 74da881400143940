"""
Models Package - Main imports
"""

# Database models
from .database import Base, Genre, Language, Movie

# Pydantic schemas
from .schemas import (
    # Common
    MessageResponse, ErrorResponse, HealthResponse,

    # Genre schemas
    Genre as GenreSchema, GenreWrite,

    # Language schemas
    Language as LanguageSchema,

    # Movie schemas
    MovieCreate, MovieUpdate, Movie as MovieSchema, parse_release_date,
)

__all__ = [
    # Database models
    "Base", "Genre", "Language", "Movie",

    # Common schemas
    "MessageResponse", "ErrorResponse", "HealthResponse",

    # Genre schemas
    "GenreSchema", "GenreWrite",

    # Language schemas
    "LanguageSchema",

    # Movie schemas
    "MovieCreate", "MovieUpdate", "MovieSchema", "parse_release_date",
]
