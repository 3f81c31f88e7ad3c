"""FastAPI application factory: entry point for LibroReseñas."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from libroresenas.api.routes.books import router as books_router
from libroresenas.api.routes.reviews import router as reviews_router
from libroresenas.core.config import settings
from libroresenas.core.exceptions import (CatalogError, DuplicateError,
                                          ForbiddenError, NotFoundError)
from libroresenas.db.session import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

SERVER_ERROR = {"message": "Server error"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    logger.info("LibroReseñas starting up...")
    logger.info("Environment: %s", settings.ENVIRONMENT)
    init_db()
    yield
    logger.info("LibroReseñas shutting down...")


def _status_for(exc: CatalogError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, DuplicateError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=_status_for(exc), content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=SERVER_ERROR)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="LibroReseñas",
        description="Book catalog with user reviews",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Error mapping ──────────────────────────────
    application.add_exception_handler(CatalogError, catalog_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(SQLAlchemyError, store_error_handler)
    application.add_exception_handler(Exception, store_error_handler)

    # ── Routes ─────────────────────────────────────
    application.include_router(books_router)
    application.include_router(reviews_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
