"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_api.api.v1 import storage
from travel_api.api.v1.router import api_router
from travel_api.config import settings
from travel_api.core.exceptions import AppException
from travel_api.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from travel_api.database import close_db, init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    # Startup
    if settings.debug:
        await init_db()
    logger.info(f"{settings.app_name} started ({settings.environment})")

    yield

    # Shutdown
    await close_db()


def error_response(
    status_code: int,
    message: str,
    errors: list[dict] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Failure envelope shared by every exception handler."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "errors": errors or []},
        headers=headers,
    )


def _field_path(loc: tuple) -> str:
    # Drop the leading "body"/"query"/"path" marker
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Travel booking API for destinations, hotels, vehicles and trips",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        return error_response(exc.status_code, exc.detail, exc.to_errors(), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"type": "VALIDATION", "path": _field_path(tuple(error["loc"])), "message": error["msg"]}
            for error in exc.errors()
        ]
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"Route {request.method} {request.url.path} not found"
        return error_response(
            exc.status_code,
            message,
            [{"type": "HTTP", "path": request.url.path, "message": message}],
            getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        message = str(exc) if settings.environment == "development" else "Internal server error"
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            [{"type": "SERVER", "path": None, "message": message}],
        )

    # Middleware (order matters - last added = outermost)
    # 1. Gzip compression (innermost)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # 2. CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 3. Request logging
    app.add_middleware(RequestLoggingMiddleware)

    # 4. Security headers (outermost)
    app.add_middleware(SecurityHeadersMiddleware)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(storage.router, prefix="/storage", tags=["Storage"])

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "travel_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
    )
