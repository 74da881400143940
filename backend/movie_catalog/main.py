"""
Movie Catalog API - Main Application
"""
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_catalog.api import api_router
from movie_catalog.core import messages
from movie_catalog.core.config import Settings, get_settings, validate_settings
from movie_catalog.core.database import Database
from movie_catalog.core.exceptions import CatalogError
from movie_catalog.core.logging import setup_logging, get_logger, LogContext, log_api_request

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database handle at startup and dispose it at shutdown"""
    settings: Settings = app.state.settings

    for problem in validate_settings(settings):
        logger.warning("Configuration problem", problem=problem)

    database = Database(settings)
    await database.connect()
    app.state.database = database
    logger.info("Application started", app_name=settings.APP_NAME, version=settings.APP_VERSION)

    try:
        yield
    finally:
        await database.dispose()
        logger.info("Application stopped")


# ==========================================
# EXCEPTION HANDLERS
# ==========================================

async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"message": messages.INTERNAL_ERROR})


# ==========================================
# MIDDLEWARE
# ==========================================

async def request_context_middleware(request: Request, call_next):
    """Tag logs with a request id, log the request and add response headers"""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    start = time.perf_counter()

    with LogContext(request_id):
        response = await call_next(request)
        log_api_request(
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
        )

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


# ==========================================
# APPLICATION FACTORY
# ==========================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; tests pass their own settings"""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="CRUD API for a movie catalog: movies, genres and languages",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=settings.DOCS_URL if settings.ENABLE_DOCS else None,
        redoc_url=None,
        openapi_url=settings.OPENAPI_URL if settings.ENABLE_DOCS else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router)

    return app


app = create_app()


def run():
    """Console entry point: serve the app with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "movie_catalog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
