"""
Seed database with languages and genres
"""
import asyncio

from sqlalchemy import select

from movie_catalog.core.config import get_settings
from movie_catalog.core.database import Database
from movie_catalog.core.logging import setup_logging, get_logger
from movie_catalog.models import Genre, Language

LANGUAGES = ["Português", "Inglês", "Espanhol", "Francês", "Italiano", "Japonês", "Coreano", "Alemão"]
GENRES = ["Ação", "Animação", "Comédia", "Documentário", "Drama", "Ficção Científica", "Suspense", "Terror"]

logger = get_logger(__name__)

async def seed_data(database: Database) -> None:
    """Insert the languages and genres that are not present yet"""
    async with database.session() as session:
        existing_languages = set((await session.execute(select(Language.name))).scalars())
        existing_genres = set((await session.execute(select(Genre.name))).scalars())

        for name in LANGUAGES:
            if name not in existing_languages:
                session.add(Language(name=name))

        for name in GENRES:
            if name not in existing_genres:
                session.add(Genre(name=name))

        await session.commit()

    logger.info("Seed data applied", languages=len(LANGUAGES), genres=len(GENRES))

async def main():
    settings = get_settings()
    setup_logging(settings)

    database = Database(settings)
    await database.connect()
    try:
        await seed_data(database)
    finally:
        await database.dispose()

if __name__ == "__main__":
    asyncio.run(main())
