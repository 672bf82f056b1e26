"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, bookmarks, users
from src.config import Settings, get_settings
from src.database import create_db_engine, create_session_factory, init_db
from src.schemas.errors import ErrorResponse, ValidationErrorResponse, collect_violations
from src.services.auth import PasswordHasher, TokenService
from src.services.exceptions import ServiceError

logger = logging.getLogger(__name__)


async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Render a service-layer failure with its status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.message).model_dump(),
        headers=exc.headers,
    )


async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every invalid field at once as a 400."""
    body = ValidationErrorResponse(errors=collect_violations(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Unmapped store failures become a 500."""
    logger.error(f"Unhandled database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="Internal server error").model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and its process-wide collaborators."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )

    engine = create_db_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        if settings.create_tables:
            init_db(engine)
        logger.info(f"Bookmarks API started ({settings.environment})")
        yield
        engine.dispose()

    app = FastAPI(
        title="Bookmarks API",
        description="Multi-tenant bookmarks with JWT authentication",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:3000",
                "http://localhost:5173",
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # Register routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(bookmarks.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
