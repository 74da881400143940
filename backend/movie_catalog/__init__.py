"""
Movie Catalog API
=================

CRUD HTTP API for a movie catalog (movies, genres, languages) on top of
FastAPI and SQLAlchemy.
"""

__version__ = "1.0.0"
