"""
Unit Tests for Dependency Injection Container

Tests for:
- Lazy initialization and caching of every component
- Wiring of the journal service
- Lifecycle methods (initialize, shutdown)
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic import SecretStr

from moodtune.application.services.journal_service import MoodJournalService
from moodtune.application.services.recommendation_service import RecommendationSelector
from moodtune.config.container import Container, create_container
from moodtune.config.settings import CatalogSettings, DatabaseSettings, Settings
from moodtune.infrastructure.ai.mood_analyzer import AgentMoodAnalyzer
from moodtune.infrastructure.catalog.spotify_client import SpotifyCatalogClient
from moodtune.infrastructure.persistence.database import Database
from moodtune.infrastructure.persistence.repositories import (
    SQLiteMoodEntryRepository,
    SQLitePlaylistRepository,
    SQLiteRecommendationRepository,
    SQLiteReflectionRepository,
)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database=DatabaseSettings(url=f"sqlite:///{tmp_path / 'container.db'}"),
        catalog=CatalogSettings(client_id=SecretStr("id"), client_secret=SecretStr("secret")),
    )


@pytest.fixture
def container(settings):
    return Container(settings=settings)


class TestLazyComponents:
    """Tests for lazily created, cached components."""

    @pytest.mark.parametrize(
        ("attribute", "expected_type"),
        [
            ("database", Database),
            ("mood_entry_repository", SQLiteMoodEntryRepository),
            ("reflection_repository", SQLiteReflectionRepository),
            ("recommendation_repository", SQLiteRecommendationRepository),
            ("playlist_repository", SQLitePlaylistRepository),
            ("catalog_client", SpotifyCatalogClient),
            ("mood_analyzer", AgentMoodAnalyzer),
            ("recommendation_selector", RecommendationSelector),
            ("journal_service", MoodJournalService),
        ],
    )
    def test_created_once(self, container, attribute, expected_type):
        first = getattr(container, attribute)

        assert isinstance(first, expected_type)
        assert getattr(container, attribute) is first

    def test_repositories_share_database(self, container):
        assert container.mood_entry_repository._db is container.database
        assert container.playlist_repository._db is container.database

    def test_selector_uses_container_catalog(self, container):
        fake = MagicMock()
        container._catalog_client = fake

        assert container.recommendation_selector._catalog is fake

    def test_create_container_uses_given_settings(self, settings):
        assert create_container(settings).settings is settings

    def test_create_container_defaults_to_cached_settings(self, settings):
        with patch("moodtune.config.settings.get_settings", return_value=settings):
            assert create_container().settings is settings


class TestLifecycle:
    """Tests for initialize/shutdown."""

    @pytest.mark.asyncio
    async def test_initialize_and_shutdown(self, container):
        await container.initialize()
        assert container.database.is_initialized

        catalog = container.catalog_client
        with patch.object(catalog, "aclose", AsyncMock()) as aclose:
            await container.shutdown()

        aclose.assert_awaited_once()
        assert not container.database.is_initialized

    @pytest.mark.asyncio
    async def test_shutdown_survives_catalog_close_failure(self, container):
        await container.initialize()
        container._catalog_client = MagicMock(aclose=AsyncMock(side_effect=RuntimeError("x")))

        await container.shutdown()

        assert not container.database.is_initialized

    @pytest.mark.asyncio
    async def test_shutdown_without_components_is_noop(self, container):
        await container.shutdown()
        assert container._database is None
