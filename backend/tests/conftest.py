import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from movie_catalog.core.config import Settings
from movie_catalog.core.database import Database
from movie_catalog.main import create_app
from movie_catalog.models import Language


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        ENVIRONMENT="testing",
        TESTING=True,
        LOG_FORMAT="simple",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def languages(client, settings):
    """Languages cannot be created through the API, so insert them directly"""
    engine = create_engine(settings.DATABASE_URL.replace("+aiosqlite", ""))
    with Session(engine) as session:
        rows = [Language(name="Inglês"), Language(name="Português")]
        session.add_all(rows)
        session.commit()
        ids = {row.name: row.id for row in rows}
    engine.dispose()
    return ids


@pytest.fixture
def english(languages):
    return languages["Inglês"]


@pytest_asyncio.fixture
async def database(settings):
    database = Database(settings)
    await database.connect()
    yield database
    await database.dispose()
