"""
API Endpoints
"""

from . import movies, genres, languages

__all__ = ["movies", "genres", "languages"]
