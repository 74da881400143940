"""
Language Service - Read-only access to languages
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from movie_catalog.models import Language

class LanguageService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_languages(self) -> List[Language]:
        result = await self.db.execute(select(Language).order_by(Language.name))
        return list(result.scalars().all())
