"""Dependency Injection Container

Manages the service's dependency graph, providing lazy initialization
and lifecycle management for the database, repositories, identity provider,
and command/query handlers. Components are created on first access and
cached for the lifetime of the container.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.commands.advance_track import AdvanceTrackHandler
    from ..application.commands.publish_catalog import CatalogHandler
    from ..application.commands.record_play import RecordPlayHandler
    from ..application.interfaces.identity_provider import IdentityProvider
    from ..application.queries.get_catalog import GetCatalogHandler
    from ..application.queries.get_history import GetHistoryHandler
    from ..domain.music.repository import CatalogRepository, TrackHistoryRepository
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Tests may pass
    pre-built collaborators (for example an identity provider) to override
    the defaults.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _catalog_repository: CatalogRepository | None = None
    _history_repository: TrackHistoryRepository | None = None

    # Infrastructure adapters
    _identity_provider: IdentityProvider | None = None

    # Command handlers
    _advance_track_handler: AdvanceTrackHandler | None = None
    _record_play_handler: RecordPlayHandler | None = None
    _catalog_handler: CatalogHandler | None = None

    # Query handlers
    _get_catalog_handler: GetCatalogHandler | None = None
    _get_history_handler: GetHistoryHandler | None = None

    # === Database ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    # === Repositories ===

    @property
    def catalog_repository(self) -> CatalogRepository:
        if self._catalog_repository is None:
            from ..infrastructure.persistence.repositories.catalog_repository import (
                SQLiteCatalogRepository,
            )

            self._catalog_repository = SQLiteCatalogRepository(self.database)
        return self._catalog_repository

    @property
    def history_repository(self) -> TrackHistoryRepository:
        if self._history_repository is None:
            from ..infrastructure.persistence.repositories.history_repository import (
                SQLiteHistoryRepository,
            )

            self._history_repository = SQLiteHistoryRepository(self.database)
        return self._history_repository

    # === Infrastructure Adapters ===

    @property
    def identity_provider(self) -> IdentityProvider:
        """Get the bearer-token identity provider."""
        if self._identity_provider is None:
            from ..infrastructure.auth.static_tokens import StaticTokenIdentityProvider

            self._identity_provider = StaticTokenIdentityProvider(self.settings.auth.tokens)
        return self._identity_provider

    # === Command Handlers ===

    @property
    def advance_track_handler(self) -> AdvanceTrackHandler:
        if self._advance_track_handler is None:
            from ..application.commands.advance_track import AdvanceTrackHandler

            self._advance_track_handler = AdvanceTrackHandler(
                catalog_repository=self.catalog_repository,
            )
        return self._advance_track_handler

    @property
    def record_play_handler(self) -> RecordPlayHandler:
        if self._record_play_handler is None:
            from ..application.commands.record_play import RecordPlayHandler

            self._record_play_handler = RecordPlayHandler(
                history_repository=self.history_repository,
                catalog_repository=self.catalog_repository,
            )
        return self._record_play_handler

    @property
    def catalog_handler(self) -> CatalogHandler:
        if self._catalog_handler is None:
            from ..application.commands.publish_catalog import CatalogHandler

            self._catalog_handler = CatalogHandler(catalog_repository=self.catalog_repository)
        return self._catalog_handler

    # === Query Handlers ===

    @property
    def get_catalog_handler(self) -> GetCatalogHandler:
        if self._get_catalog_handler is None:
            from ..application.queries.get_catalog import GetCatalogHandler

            self._get_catalog_handler = GetCatalogHandler(
                catalog_repository=self.catalog_repository,
            )
        return self._get_catalog_handler

    @property
    def get_history_handler(self) -> GetHistoryHandler:
        if self._get_history_handler is None:
            from ..application.queries.get_history import GetHistoryHandler

            self._get_history_handler = GetHistoryHandler(
                history_repository=self.history_repository,
                max_limit=self.settings.player.history_max_limit,
            )
        return self._get_history_handler

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources."""
        await self.database.initialize()
        logger.info(LogTemplates.CONTAINER_INITIALIZED, self.settings.environment)

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._database is not None:
            await self._database.close()
        logger.info(LogTemplates.CONTAINER_SHUTDOWN)


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
