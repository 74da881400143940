"""
Movie Service - Business logic for movie operations
"""

from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from movie_catalog.models import Movie, Genre, MovieCreate, MovieUpdate, parse_release_date
from movie_catalog.core import messages
from movie_catalog.core.exceptions import ConflictError, NotFoundError
from movie_catalog.core.logging import get_logger

logger = get_logger(__name__)

class MovieService:
    """Service for movie business logic"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _title_order(self):
        """Ordinal title ordering independent of the database locale"""
        if self.db.bind.dialect.name == "postgresql":
            return Movie.title.collate("C").asc()
        return Movie.title.asc()

    def _with_relations(self):
        return select(Movie).options(
            selectinload(Movie.genre),
            selectinload(Movie.language),
        )

    async def list_movies(self) -> List[Movie]:
        """All movies ordered by title, genre and language expanded"""
        result = await self.db.execute(self._with_relations().order_by(self._title_order()))
        return list(result.scalars().all())

    async def list_movies_by_genre_name(self, genre_name: str) -> List[Movie]:
        """Movies whose genre name matches case-insensitively"""
        query = (
            self._with_relations()
            .join(Movie.genre)
            .where(func.lower(Genre.name) == func.lower(genre_name))
            .order_by(self._title_order())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
        result = await self.db.execute(select(Movie).where(Movie.id == movie_id))
        return result.scalar_one_or_none()

    async def find_by_title(self, title: Optional[str], exclude_id: Optional[int] = None) -> Optional[Movie]:
        """Find a movie whose title equals ``title`` ignoring case"""
        if title is None:
            return None

        query = select(Movie).where(func.lower(Movie.title) == func.lower(title))
        if exclude_id is not None:
            query = query.where(Movie.id != exclude_id)

        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def create_movie(self, movie_data: MovieCreate) -> Movie:
        """Create new movie, rejecting titles that already exist"""

        if await self.find_by_title(movie_data.title):
            raise ConflictError(messages.MOVIE_ALREADY_EXISTS)

        data = movie_data.model_dump()
        data["release_date"] = parse_release_date(data["release_date"])

        movie = Movie(**data)
        self.db.add(movie)
        await self._commit_or_conflict(movie_data.title)

        logger.info("Created movie", movie_id=movie.id, title=movie.title)
        return movie

    async def update_movie(self, movie_id: int, movie_data: MovieUpdate) -> Movie:
        """Apply exactly the fields present in the request body"""

        movie = await self.get_movie_by_id(movie_id)
        if not movie:
            raise NotFoundError(messages.MOVIE_NOT_FOUND)

        update_data = self._prepare_update(movie_data)

        title = update_data.get("title")
        if title is not None and await self.find_by_title(title, exclude_id=movie_id):
            raise ConflictError(messages.MOVIE_ALREADY_EXISTS)

        for field, value in update_data.items():
            setattr(movie, field, value)

        await self._commit_or_conflict(title, exclude_id=movie_id)

        logger.info("Updated movie", movie_id=movie_id, fields=sorted(update_data))
        return movie

    async def delete_movie(self, movie_id: int) -> None:
        movie = await self.get_movie_by_id(movie_id)
        if not movie:
            raise NotFoundError(messages.MOVIE_NOT_FOUND)

        await self.db.delete(movie)
        await self.db.commit()

        logger.info("Deleted movie", movie_id=movie_id)

    def _prepare_update(self, movie_data: MovieUpdate) -> Dict[str, Any]:
        update_data = movie_data.model_dump(exclude_unset=True)

        # A missing or empty release date leaves the stored one untouched
        release_date = update_data.pop("release_date", None)
        if release_date:
            update_data["release_date"] = parse_release_date(release_date)

        return update_data

    async def _commit_or_conflict(self, title: Optional[str], exclude_id: Optional[int] = None) -> None:
        """
        Commit, reporting a lost race on the unique title index as a conflict.
        Other integrity errors (missing genre or language) propagate.
        """
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await self.find_by_title(title, exclude_id=exclude_id):
                raise ConflictError(messages.MOVIE_ALREADY_EXISTS)
            raise
