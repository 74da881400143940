"""
Genre API Endpoints
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.api.deps import get_db
from movie_catalog.api.routing import failure_message_route
from movie_catalog.core import messages
from movie_catalog.core.exceptions import translate_failures
from movie_catalog.models import GenreSchema, GenreWrite, MessageResponse
from movie_catalog.services import GenreService

router = APIRouter(route_class=failure_message_route({
    "create_genre": (messages.GENRE_CREATE_FAILED, True),
    "update_genre": (messages.GENRE_UPDATE_FAILED, False),
}))

@router.get("", response_model=List[GenreSchema])
async def get_genres(db: AsyncSession = Depends(get_db)):
    """Get all genres ordered by name"""
    return await GenreService(db).list_genres()

@router.post("", response_model=GenreSchema, status_code=status.HTTP_201_CREATED)
async def create_genre(genre_data: Optional[GenreWrite] = None, db: AsyncSession = Depends(get_db)):
    """Create new genre; a missing body counts as a missing name"""
    name = genre_data.name if genre_data else None
    with translate_failures(messages.GENRE_CREATE_FAILED, include_error=True):
        return await GenreService(db).create_genre(name)

@router.put("/{genre_id}", response_model=MessageResponse)
async def update_genre(
    genre_id: int,
    genre_data: Optional[GenreWrite] = None,
    db: AsyncSession = Depends(get_db)
):
    """Rename genre"""
    name = genre_data.name if genre_data else None
    with translate_failures(messages.GENRE_UPDATE_FAILED):
        await GenreService(db).update_genre(genre_id, name)

    return {"message": messages.GENRE_UPDATED}
