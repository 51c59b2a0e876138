# clean_api/main.py

"""
FastAPI application factory.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from clean_api.adapters.configuration.config import settings
from clean_api.adapters.inbound.api.v1.router import api_router
from clean_api.adapters.outbound.persistence.database import engine
from clean_api.domain.exceptions import DomainException
from clean_api.shared.middleware import (
    AsyncRequestLoggingMiddleware,
    ErrorHandlerMiddleware,
    domain_exception_handler,
    validation_exception_handler,
)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    yield
    await engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Credential and refresh-token session management",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.SCHEMA_VISIBILITY else None,
        redoc_url="/redoc" if settings.SCHEMA_VISIBILITY else None,
        openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
    )

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)

    # CORS must be outermost (added last) so error responses carry its headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", settings.CSRF_HEADER_NAME],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


# Application instance
app = create_app()
