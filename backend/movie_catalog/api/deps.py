"""
API Dependencies
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.core.config import Settings
from movie_catalog.core.database import Database

# ==========================================
# APPLICATION STATE DEPENDENCIES
# ==========================================

def get_database(request: Request) -> Database:
    """Database handle created by the application lifespan"""
    return request.app.state.database

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

# ==========================================
# DATABASE DEPENDENCIES
# ==========================================

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request, rolled back if the handler raises"""
    async with get_database(request).session() as session:
        yield session
