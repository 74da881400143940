"""
Movie API Endpoints
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.api.deps import get_db
from movie_catalog.api.routing import failure_message_route
from movie_catalog.core import messages
from movie_catalog.core.exceptions import translate_failures
from movie_catalog.models import MovieSchema, MovieCreate, MovieUpdate, MessageResponse
from movie_catalog.services import MovieService

router = APIRouter(route_class=failure_message_route({
    "get_movies_by_genre": (messages.MOVIE_FILTER_FAILED, False),
    "create_movie": (messages.MOVIE_CREATE_FAILED, False),
    "update_movie": (messages.MOVIE_UPDATE_FAILED, False),
    "delete_movie": (messages.MOVIE_DELETE_FAILED, False),
}))

@router.get("", response_model=List[MovieSchema])
async def get_movies(db: AsyncSession = Depends(get_db)):
    """Get all movies ordered by title"""
    return await MovieService(db).list_movies()

@router.get("/{genre_name}", response_model=List[MovieSchema])
async def get_movies_by_genre(genre_name: str, db: AsyncSession = Depends(get_db)):
    """Get movies whose genre name matches, ignoring case"""
    with translate_failures(messages.MOVIE_FILTER_FAILED):
        return await MovieService(db).list_movies_by_genre_name(genre_name)

@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_movie(movie_data: Optional[MovieCreate] = None, db: AsyncSession = Depends(get_db)):
    """Create new movie"""
    with translate_failures(messages.MOVIE_CREATE_FAILED):
        await MovieService(db).create_movie(movie_data or MovieCreate())

    return Response(status_code=status.HTTP_201_CREATED)

@router.put("/{movie_id}", response_model=MessageResponse)
async def update_movie(
    movie_id: int,
    movie_data: Optional[MovieUpdate] = None,
    db: AsyncSession = Depends(get_db)
):
    """Update the fields present in the body; no body is an empty update"""
    with translate_failures(messages.MOVIE_UPDATE_FAILED):
        await MovieService(db).update_movie(movie_id, movie_data or MovieUpdate())

    return {"message": messages.MOVIE_UPDATED}

@router.delete("/{movie_id}", response_model=MessageResponse)
async def delete_movie(movie_id: int, db: AsyncSession = Depends(get_db)):
    """Delete movie"""
    with translate_failures(messages.MOVIE_DELETE_FAILED):
        await MovieService(db).delete_movie(movie_id)

    return {"message": messages.MOVIE_DELETED}
