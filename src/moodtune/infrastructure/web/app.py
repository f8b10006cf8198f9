"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from moodtune import __version__
from moodtune.domain.shared.exceptions import EntityNotFoundError, ValidationError
from moodtune.domain.shared.messages import ErrorMessages, LogTemplates
from moodtune.infrastructure.web.routes import router

if TYPE_CHECKING:
    from moodtune.config.container import Container

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around a container.

    The container is initialized on startup and shut down when the
    application stops.
    """
    if container is None:
        from moodtune.config.container import create_container

        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await container.initialize()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(title="MoodTune API", version=__version__, lifespan=lifespan)
    app.state.container = container

    server = container.settings.server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(server.cors_origins),
        allow_origin_regex=server.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                LogTemplates.HTTP_REQUEST,
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        return response

    register_exception_handlers(app)
    app.include_router(router)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(ValidationError)
    async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"message": exc.message, "field": exc.field})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(LogTemplates.HTTP_UNHANDLED_ERROR, request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": ErrorMessages.INTERNAL_ERROR})
