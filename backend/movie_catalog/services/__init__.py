"""
Services - Business logic layer
"""

from .movie_service import MovieService
from .genre_service import GenreService
from .language_service import LanguageService

__all__ = ["MovieService", "GenreService", "LanguageService"]
