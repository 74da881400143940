"""
API Router - Main API routing configuration
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from movie_catalog.api.endpoints import movies, genres, languages
from movie_catalog.api.deps import get_database, get_app_settings
from movie_catalog.core.config import Settings
from movie_catalog.core.database import Database
from movie_catalog.models import HealthResponse, ErrorResponse

# Error responses documented for every route
COMMON_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing genre name"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Duplicate title or name"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}

# Create main API router
api_router = APIRouter(responses=COMMON_RESPONSES)

# ==========================================
# HEALTH AND STATUS ENDPOINTS
# ==========================================

@api_router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings)
):
    """API health check endpoint"""

    db_health = await database.check_health()
    healthy = db_health["status"] == "healthy"

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "database": db_health["status"],
        }
    )

# ==========================================
# INCLUDE ENDPOINT ROUTERS
# ==========================================

ROUTES = (
    (movies.router, "/movies", "movies"),
    (genres.router, "/genres", "genres"),
    (languages.router, "/languages", "languages"),
)

for router, prefix, tag in ROUTES:
    api_router.include_router(router, prefix=prefix, tags=[tag])
