"""
Movie Catalog API - Core Module
===============================

Shared components: configuration, database handle, structured logging
and the error taxonomy.

Usage:
    from movie_catalog.core import settings, Database, get_logger
"""

from .config import settings, get_settings, Settings
from .database import Database
from .logging import get_logger, setup_logging
from .exceptions import (
    CatalogError,
    BadRequestError,
    NotFoundError,
    ConflictError,
    InternalFailureError,
    translate_failures,
)

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    "Settings",

    # Database
    "Database",

    # Logging
    "get_logger",
    "setup_logging",

    # Errors
    "CatalogError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "InternalFailureError",
    "translate_failures",
]
