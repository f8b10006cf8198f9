"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the database, repositories, upstream clients
and application services. Components are created on first access and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.catalog_client import CatalogClient
    from ..application.interfaces.mood_analyzer import MoodAnalyzer
    from ..application.services.journal_service import MoodJournalService
    from ..application.services.recommendation_service import RecommendationSelector
    from ..domain.journal.repository import (
        MoodEntryRepository,
        PlaylistRepository,
        RecommendationRepository,
        ReflectionRepository,
    )
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Tests may
    pre-populate the private slots with fakes.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _mood_entry_repository: MoodEntryRepository | None = None
    _reflection_repository: ReflectionRepository | None = None
    _recommendation_repository: RecommendationRepository | None = None
    _playlist_repository: PlaylistRepository | None = None

    # Infrastructure adapters
    _catalog_client: CatalogClient | None = None
    _mood_analyzer: MoodAnalyzer | None = None

    # Application services
    _recommendation_selector: RecommendationSelector | None = None
    _journal_service: MoodJournalService | None = None

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
    def mood_entry_repository(self) -> MoodEntryRepository:
        if self._mood_entry_repository is None:
            from ..infrastructure.persistence.repositories.mood_entry_repository import (
                SQLiteMoodEntryRepository,
            )

            self._mood_entry_repository = SQLiteMoodEntryRepository(self.database)
        return self._mood_entry_repository

    @property
    def reflection_repository(self) -> ReflectionRepository:
        if self._reflection_repository is None:
            from ..infrastructure.persistence.repositories.reflection_repository import (
                SQLiteReflectionRepository,
            )

            self._reflection_repository = SQLiteReflectionRepository(self.database)
        return self._reflection_repository

    @property
    def recommendation_repository(self) -> RecommendationRepository:
        if self._recommendation_repository is None:
            from ..infrastructure.persistence.repositories.recommendation_repository import (
                SQLiteRecommendationRepository,
            )

            self._recommendation_repository = SQLiteRecommendationRepository(self.database)
        return self._recommendation_repository

    @property
    def playlist_repository(self) -> PlaylistRepository:
        if self._playlist_repository is None:
            from ..infrastructure.persistence.repositories.playlist_repository import (
                SQLitePlaylistRepository,
            )

            self._playlist_repository = SQLitePlaylistRepository(self.database)
        return self._playlist_repository

    # === Infrastructure adapters ===

    @property
    def catalog_client(self) -> CatalogClient:
        """Get the Spotify catalog client (one HTTP client per process)."""
        if self._catalog_client is None:
            from ..infrastructure.catalog.spotify_client import SpotifyCatalogClient

            self._catalog_client = SpotifyCatalogClient(self.settings.catalog)
        return self._catalog_client

    @property
    def mood_analyzer(self) -> MoodAnalyzer:
        if self._mood_analyzer is None:
            from ..infrastructure.ai.mood_analyzer import AgentMoodAnalyzer

            self._mood_analyzer = AgentMoodAnalyzer(self.settings.ai)
        return self._mood_analyzer

    # === Application services ===

    @property
    def recommendation_selector(self) -> RecommendationSelector:
        if self._recommendation_selector is None:
            from ..application.services.recommendation_service import RecommendationSelector

            self._recommendation_selector = RecommendationSelector(
                catalog_client=self.catalog_client
            )
        return self._recommendation_selector

    @property
    def journal_service(self) -> MoodJournalService:
        """Get the journal application service."""
        if self._journal_service is None:
            from ..application.services.journal_service import MoodJournalService

            self._journal_service = MoodJournalService(
                mood_entry_repository=self.mood_entry_repository,
                reflection_repository=self.reflection_repository,
                recommendation_repository=self.recommendation_repository,
                playlist_repository=self.playlist_repository,
                mood_analyzer=self.mood_analyzer,
                recommendation_selector=self.recommendation_selector,
            )
        return self._journal_service

    async def initialize(self) -> None:
        """Initialize all async resources."""
        await self.database.initialize()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._catalog_client is not None:
            try:
                await self._catalog_client.aclose()
            except Exception as exc:
                logger.warning(LogTemplates.CONTAINER_SHUTDOWN_FAILED, "catalog client", exc)

        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings | None = None) -> Container:
    """Create a new dependency injection container."""
    if settings is None:
        from .settings import get_settings

        settings = get_settings()
    return Container(settings)
