"""
Language API Endpoints
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.api.deps import get_db
from movie_catalog.models import LanguageSchema
from movie_catalog.services import LanguageService

router = APIRouter()

@router.get("", response_model=List[LanguageSchema])
async def get_languages(db: AsyncSession = Depends(get_db)):
    """Get all languages ordered by name"""
    return await LanguageService(db).list_languages()
