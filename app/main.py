"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from typing import Dict, Any, Optional

from app.config import Settings, get_settings
from app.application.dto.base_dto import HealthCheckResponseDTO
from app.infrastructure.auth import BcryptPasswordHasher, JWTHandler
from app.infrastructure.db.database import Database
from app.infrastructure.rate_limiting import RateLimiter, general_rate_limit, limits_for_environment
from app.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from app.infrastructure.web.middleware.request_logger import RequestLoggingMiddleware
from app.infrastructure.web.routers import auth, categories, tags, tasks

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Creates the schema on startup and releases connections on shutdown.
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {app_settings.api_title} v{app_settings.api_version}")
    logger.info(f"Environment: {app_settings.environment}")

    await app.state.database.create_all()

    yield

    # Shutdown
    logger.info("Shutting down application")
    await app.state.database.dispose()


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        database: Database to use instead of one built from settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(general_rate_limit)]
    )

    # Shared services
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url_async, echo=settings.database_echo)
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = JWTHandler(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )
    app.state.rate_limiter = RateLimiter(
        enabled=settings.rate_limit_enabled,
        limits=limits_for_environment(settings.environment),
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)

    # Request ids and timing
    app.add_middleware(
        RequestLoggingMiddleware,
        enabled=settings.log_requests,
        exclude_paths=[f"{settings.api_prefix}/health"],
    )

    # Outermost, so error responses carry CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(
        auth.router,
        prefix=f"{settings.api_prefix}/auth",
        tags=["Authentication"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{settings.api_prefix}/tasks",
        tags=["Tasks"]
    )
    app.include_router(
        categories.router,
        prefix=f"{settings.api_prefix}/category",
        tags=["Categories"]
    )
    app.include_router(
        tags.router,
        prefix=f"{settings.api_prefix}/tags",
        tags=["Tags"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    return app


# Create the FastAPI app instance
app = create_application(settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
