"""
Database Models - Main imports
"""

from .base import Base
from .genre import Genre
from .language import Language
from .movie import Movie

__all__ = ["Base", "Genre", "Language", "Movie"]
