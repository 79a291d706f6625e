"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from music_streaming_player.config.container import Container
from music_streaming_player.infrastructure.http.errors import register_exception_handlers
from music_streaming_player.infrastructure.http.routes import (
    catalog_router,
    health_router,
    player_router,
)


def create_app(container: Container) -> FastAPI:
    """Build the HTTP API around an (uninitialized) container.

    The container is initialized on startup and shut down on exit through
    the application lifespan.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await container.initialize()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(
        title="Music Streaming Player",
        debug=container.settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.api.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)
    app.include_router(player_router)
    app.include_router(catalog_router)
    app.include_router(health_router)

    return app
