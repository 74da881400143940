"""
API Package
"""

from .api import api_router
from .deps import get_db, get_database

__all__ = ["api_router", "get_db", "get_database"]
