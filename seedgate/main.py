"""FastAPI main application for the seedgate service."""

import time
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from seedgate.api.routes import achievements, resources, seed
from seedgate.core.config import settings
from seedgate.core.database import close_db_pool, get_pool, init_db_pool
from seedgate.core.logging_config import get_logger, setup_logging
from seedgate.core.responses import error_response_dict, success_response

# Setup logging
setup_logging()
logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # HSTS only behind HTTPS in production
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - runs on startup and shutdown."""
    logger.info("Starting seedgate...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    # Tests supply their own connections through dependency overrides
    if settings.ENVIRONMENT != "test":
        await init_db_pool(settings)

    yield

    if settings.ENVIRONMENT != "test":
        await close_db_pool()
    logger.info("Shutting down seedgate...")


app = FastAPI(
    title="seedgate",
    description="""
    Gated database seeding endpoints for the learning platform.

    - `POST /api/admin/seed` - seed content (bearer token required)
    - `POST /api/seed` - seed content (development environment only)
    - `GET|POST /api/admin/seed-achievements` - inspect or seed default achievements
    - `POST /api/admin/seed-resources` - seed sample library resources

    Include the access token in the Authorization header:

    ```
    Authorization: Bearer <your_jwt_token>
    ```
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

if settings.ENVIRONMENT == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
    )


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP exceptions as ``{"error": ...}`` bodies."""
    if isinstance(exc.detail, dict):
        return error_response_dict(exc.detail, exc.status_code)
    return error_response_dict({"error": exc.detail}, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors."""
    errors = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors[field] = error["msg"]

    return error_response_dict(
        {"error": "Validation failed", "details": errors},
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


@app.exception_handler(asyncpg.exceptions.PostgresError)
async def database_exception_handler(
    request: Request, exc: asyncpg.exceptions.PostgresError
):
    """Handle database errors."""
    logger.error(f"Database error: {exc}", exc_info=True)
    return error_response_dict(
        {"error": "Database error occurred"}, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return error_response_dict(
        {"error": "An unexpected error occurred"},
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


app.include_router(seed.router)
app.include_router(achievements.router)
app.include_router(resources.router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the database answers, 503 otherwise.
    """
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "checks": {"api": {"status": "healthy", "message": "API is running"}},
    }

    pool = get_pool()
    if pool is None:
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database pool not initialized",
        }
    else:
        try:
            async with pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            health_status["checks"]["database"] = {
                "status": "healthy",
                "message": "Database is accessible",
                "pool": {"size": pool.get_size(), "idle": pool.get_idle_size()},
            }
        except Exception as e:
            health_status["checks"]["database"] = {
                "status": "unhealthy",
                "message": f"Database check failed: {e!s}",
            }

    if health_status["checks"]["database"]["status"] != "healthy":
        health_status["status"] = "unhealthy"
        return error_response_dict(
            {"error": "Health check failed", "details": health_status},
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return success_response(data=health_status)
