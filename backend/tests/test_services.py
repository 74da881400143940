from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from movie_catalog.core.exceptions import (
    BadRequestError,
    ConflictError,
    InternalFailureError,
    NotFoundError,
    translate_failures,
)
from movie_catalog.models import Genre, Language, Movie, MovieCreate, MovieUpdate, parse_release_date
from movie_catalog.services import GenreService, LanguageService, MovieService
from scripts.seed_data import seed_data, GENRES, LANGUAGES


async def add_language(database, name="English"):
    async with database.session() as session:
        language = Language(name=name)
        session.add(language)
        await session.commit()
        return language.id


@pytest.mark.asyncio
async def test_movie_crud_through_service(database):
    language_id = await add_language(database)

    async with database.session() as session:
        genre = await GenreService(session).create_genre("Drama")
        service = MovieService(session)
        movie = await service.create_movie(MovieCreate(
            title="Amélie", genre_id=genre.id, language_id=language_id,
            oscar_count=0, release_date="2001-04-25",
        ))

        assert movie.release_date == date(2001, 4, 25)

        await service.update_movie(movie.id, MovieUpdate(oscar_count=2))

    async with database.session() as session:
        movies = await MovieService(session).list_movies()

        assert [(m.title, m.oscar_count, m.genre.name) for m in movies] == [("Amélie", 2, "Drama")]

        await MovieService(session).delete_movie(movies[0].id)
        assert await MovieService(session).list_movies() == []


@pytest.mark.asyncio
async def test_lost_race_on_title_reported_as_conflict(database):
    language_id = await add_language(database)

    async with database.session() as session:
        genre = await GenreService(session).create_genre("Drama")
        service = MovieService(session)
        await service.create_movie(MovieCreate(
            title="Heat", genre_id=genre.id, language_id=language_id, release_date="1995-12-15",
        ))

        # A concurrent insert that skipped the lookup hits the unique index
        session.add(Movie(
            title="HEAT", genre_id=genre.id, language_id=language_id, release_date=date(1995, 12, 15),
        ))
        with pytest.raises(ConflictError):
            await service._commit_or_conflict("HEAT")


@pytest.mark.asyncio
async def test_lost_race_on_genre_name_reported_as_conflict(database):
    async with database.session() as session:
        service = GenreService(session)
        await service.create_genre("Drama")

        session.add(Genre(name="drama"))
        with pytest.raises(ConflictError):
            await service._commit_or_conflict("drama")


@pytest.mark.asyncio
async def test_foreign_key_violation_is_not_a_conflict(database):
    async with database.session() as session:
        service = MovieService(session)
        with pytest.raises(IntegrityError):
            await service.create_movie(MovieCreate(
                title="Orphan", genre_id=1, language_id=1, release_date="2000-01-01",
            ))


@pytest.mark.asyncio
async def test_create_movie_requires_release_date(database):
    language_id = await add_language(database)

    async with database.session() as session:
        genre = await GenreService(session).create_genre("Drama")
        service = MovieService(session)
        with pytest.raises(ValueError):
            await service.create_movie(MovieCreate(title="Undated", genre_id=genre.id, language_id=language_id))

        assert await service.list_movies() == []


@pytest.mark.asyncio
async def test_genre_service_errors(database):
    async with database.session() as session:
        service = GenreService(session)

        with pytest.raises(BadRequestError):
            await service.create_genre("")
        with pytest.raises(NotFoundError):
            await service.update_genre(42, "Noir")

        genre = await service.create_genre("Noir")
        assert (await service.update_genre(genre.id, "noir")).name == "noir"


@pytest.mark.asyncio
async def test_seed_data_is_idempotent(database):
    await seed_data(database)
    await seed_data(database)

    async with database.session() as session:
        languages = await LanguageService(session).list_languages()
        genres = await GenreService(session).list_genres()

    assert sorted(language.name for language in languages) == sorted(LANGUAGES)
    assert len(genres) == len(GENRES)


@pytest.mark.asyncio
async def test_database_health(database):
    assert (await database.check_health())["status"] == "healthy"

    await database.dispose()
    assert (await database.check_health())["status"] == "unhealthy"


def test_parse_release_date():
    assert parse_release_date("1972-03-24") == date(1972, 3, 24)
    assert parse_release_date("1972-03-24T00:00:00.000Z") == date(1972, 3, 24)
    assert parse_release_date(date(1972, 3, 24)) == date(1972, 3, 24)

    with pytest.raises(ValueError):
        parse_release_date("24/03/1972")
    with pytest.raises(ValueError):
        parse_release_date(None)


def test_translate_failures_wraps_unexpected_errors():
    with pytest.raises(InternalFailureError) as exc_info:
        with translate_failures("falhou"):
            raise RuntimeError("connection refused")

    assert exc_info.value.to_dict() == {"message": "falhou"}


def test_translate_failures_can_attach_cause():
    with pytest.raises(InternalFailureError) as exc_info:
        with translate_failures("falhou", include_error=True):
            raise RuntimeError("connection refused")

    assert exc_info.value.to_dict() == {"message": "falhou", "error": "connection refused"}


def test_translate_failures_passes_catalog_errors_through():
    with pytest.raises(NotFoundError):
        with translate_failures("falhou"):
            raise NotFoundError("Filme não encontrado")
