"""Chat Gateway API - Main Application Module.

This module initializes the FastAPI application with proper configuration,
middleware, routing, and lifecycle management for the chat gateway.
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import ConfigValidator, get_config_summary, settings
from app.core.logging import setup_logging
from app.database import build_engine, build_session_factory, init_db, resolve_database_url
from app.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store once per process and close it on shutdown."""
    setup_logging(settings.log_level.value, settings.log_format.value)
    logger.info("Starting %s (%s)", settings.app_name, settings.environment.value)
    logger.debug("Configuration: %s", get_config_summary())

    engine = build_engine(resolve_database_url(), echo=settings.debug)
    await init_db(engine, settings.default_agent)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    logger.info("CORS enabled for origins: %s", ", ".join(settings.allowed_origins_list))

    yield

    logger.info("Shutting down %s...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Gateway that relays chat messages to a language model and keeps conversation history",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID and access log middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info("%s %s -> %d", request.method, request.url.path, response.status_code)
        return response


def error_body(message: str, details: str | None = None) -> dict:
    """Build the gateway error body."""
    return ErrorResponse(error=message, details=details or None).model_dump(exclude_none=True)


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
        # Handle custom exceptions that have structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
            details = exc.detail.get("details")
        elif exc.status_code == 404:
            message = "Not found"
            details = None
        else:
            message = str(exc.detail) if exc.detail else "An error occurred"
            details = None

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message, details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError):
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", []))
            problems.append(f"{location}: {error.get('msg', 'Validation error')}")

        return JSONResponse(
            status_code=400,
            content=error_body("Invalid request body", "; ".join(problems)),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Store error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content=error_body("Internal server error"))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content=error_body("Internal server error"))


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.conversation.controller import router as conversation_router
    from app.domains.message.controller import router as message_router
    from app.domains.settings.controller import router as settings_router
    from app.domains.status.controller import router as status_router

    @app.get("/health")
    async def health_check():
        """Liveness probe."""
        return {
            "status": "ok",
            "version": settings.version,
            "environment": settings.environment.value,
        }

    # Include domain routers
    app.include_router(status_router)
    app.include_router(conversation_router)
    app.include_router(message_router)
    app.include_router(settings_router)


# Create the application instance
app = create_app()


def main():
    """Entry point for running the gateway."""
    import uvicorn

    setup_logging(settings.log_level.value, settings.log_format.value)
    try:
        ConfigValidator.validate_required_settings()
    except ValueError as e:
        logger.error("%s", e)
        logger.error("Please create a .env file based on .env.example")
        sys.exit(1)

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
