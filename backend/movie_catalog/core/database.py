"""
Movie Catalog API - Database Management
=======================================

Async database connection management using SQLAlchemy 2.0+.
PostgreSQL (asyncpg) in production, SQLite (aiosqlite) for tests.

The ``Database`` handle owns the engine and session factory. The
application creates one in its lifespan and stores it on
``app.state.database``.

Usage:
    from movie_catalog.api.deps import get_db

    async def some_endpoint(db: AsyncSession = Depends(get_db)):
        ...
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Any, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    AsyncEngine,
    async_sessionmaker,
)
from sqlalchemy.pool import NullPool

from movie_catalog.core.config import Settings
from movie_catalog.core.logging import get_logger
from movie_catalog.models.database import Base

logger = get_logger(__name__)


# ==========================================
# ENGINE CREATION AND CONFIGURATION
# ==========================================

def create_database_engine(settings: Settings) -> AsyncEngine:
    """Create and configure the async database engine"""

    logger.info("Connecting to database", url=settings.safe_database_url)

    engine_config = settings.database_config
    if settings.TESTING or settings.is_sqlite:
        engine_config["poolclass"] = NullPool

    engine = create_async_engine(**engine_config)

    if settings.is_sqlite:
        setup_sqlite_events(engine)

    return engine


def setup_sqlite_events(engine: AsyncEngine) -> None:
    """SQLite leaves foreign key enforcement off unless asked per connection"""

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# ==========================================
# DATABASE HANDLE
# ==========================================

class Database:
    """Engine and session factory with an explicit connect/dispose lifecycle"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """Create the engine, verify connectivity and optionally create tables"""
        logger.info("Initializing database...")

        self.engine = create_database_engine(self.settings)
        self.session_factory = create_session_factory(self.engine)

        try:
            await self.test_connection()
            if self.settings.DB_CREATE_TABLES:
                await self.create_tables()
        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            await self.dispose()
            raise

        logger.info("Database initialized successfully")

    async def dispose(self) -> None:
        """Close database connections"""
        if self.engine is None:
            return

        logger.info("Closing database connections...")
        await self.engine.dispose()
        self.engine = None
        self.session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open a session, rolling back if the block raises.

        Usage:
            async with database.session() as db:
                ...
        """
        if self.session_factory is None:
            raise RuntimeError("Database not initialized. Call connect() first.")

        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def test_connection(self) -> bool:
        """Run a trivial query against the database"""
        if self.engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1

    async def check_health(self) -> Dict[str, Any]:
        """Report database connectivity for the health endpoint"""
        if self.engine is None:
            return {"status": "unhealthy", "error": "Database engine not initialized"}

        try:
            await self.test_connection()
            return {"status": "healthy"}
        except Exception as e:
            logger.warning("Database health check failed", error=str(e))
            return {"status": "unhealthy", "error": str(e)}

    async def create_tables(self) -> None:
        """Create all tables defined in models"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    async def drop_tables(self) -> None:
        """Drop all tables (WARNING: This will delete all data!)"""
        logger.warning("Dropping all database tables...")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)


__all__ = [
    "Database",
    "create_database_engine",
    "create_session_factory",
]
