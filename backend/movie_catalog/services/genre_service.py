"""
Genre Service - Business logic for genre operations
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from movie_catalog.models import Genre
from movie_catalog.core import messages
from movie_catalog.core.exceptions import BadRequestError, ConflictError, NotFoundError
from movie_catalog.core.logging import get_logger

logger = get_logger(__name__)

class GenreService:
    """Service for genre business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_genres(self) -> List[Genre]:
        result = await self.db.execute(select(Genre).order_by(Genre.name))
        return list(result.scalars().all())

    async def get_genre_by_id(self, genre_id: int) -> Optional[Genre]:
        result = await self.db.execute(select(Genre).where(Genre.id == genre_id))
        return result.scalar_one_or_none()

    async def find_by_name(self, name: str, exclude_id: Optional[int] = None) -> Optional[Genre]:
        """Find a genre whose name equals ``name`` ignoring case"""
        query = select(Genre).where(func.lower(Genre.name) == func.lower(name))
        if exclude_id is not None:
            query = query.where(Genre.id != exclude_id)

        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def create_genre(self, name: Optional[str]) -> Genre:
        if not name:
            raise BadRequestError(messages.GENRE_NAME_REQUIRED)

        if await self.find_by_name(name):
            raise ConflictError(messages.GENRE_ALREADY_EXISTS)

        genre = Genre(name=name)
        self.db.add(genre)
        await self._commit_or_conflict(name)

        logger.info("Created genre", genre_id=genre.id, name=name)
        return genre

    async def update_genre(self, genre_id: int, name: Optional[str]) -> Genre:
        """Rename a genre; checks run as presence, existence, then uniqueness"""
        if not name:
            raise BadRequestError(messages.GENRE_NAME_REQUIRED)

        genre = await self.get_genre_by_id(genre_id)
        if not genre:
            raise NotFoundError(messages.GENRE_NOT_FOUND)

        if await self.find_by_name(name, exclude_id=genre_id):
            raise ConflictError(messages.GENRE_ALREADY_EXISTS)

        genre.name = name
        await self._commit_or_conflict(name, exclude_id=genre_id)

        logger.info("Updated genre", genre_id=genre_id, name=name)
        return genre

    async def _commit_or_conflict(self, name: str, exclude_id: Optional[int] = None) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await self.find_by_name(name, exclude_id=exclude_id):
                raise ConflictError(messages.GENRE_ALREADY_EXISTS)
            raise
