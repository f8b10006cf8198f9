"""
Unit Tests for MoodJournalService

Runs against real SQLite repositories with a fake catalog and analyzer:
- Mood entry creation flow (entry, reflection, recommendations)
- Catalog outages never abort an entry
- Lookups, affirmation context and playlists
"""

import pytest
import pytest_asyncio
from conftest import FakeCatalogClient, FakeMoodAnalyzer, make_track

from moodtune.application.services.journal_service import MoodJournalService
from moodtune.application.services.recommendation_service import RecommendationSelector
from moodtune.domain.shared.exceptions import AuthenticationError, EntityNotFoundError


@pytest.fixture
def build_service(
    mood_entry_repository,
    reflection_repository,
    recommendation_repository,
    playlist_repository,
):
    def _build(catalog, analyzer=None) -> MoodJournalService:
        return MoodJournalService(
            mood_entry_repository=mood_entry_repository,
            reflection_repository=reflection_repository,
            recommendation_repository=recommendation_repository,
            playlist_repository=playlist_repository,
            mood_analyzer=analyzer or FakeMoodAnalyzer(),
            recommendation_selector=RecommendationSelector(catalog_client=catalog),
        )

    return _build


@pytest_asyncio.fixture
async def service(build_service, fake_catalog, fake_analyzer):
    return build_service(fake_catalog, fake_analyzer)


async def _create(service: MoodJournalService, text: str = "rainy afternoon", **overrides):
    data = {"text": text, "emoji": "🌧️", "quick_mood": "meh", "energy": 3, "valence": 4}
    data.update(overrides)
    return await service.create_entry(**data)


class TestCreateEntry:
    """Tests for the mood logging flow."""

    @pytest.mark.asyncio
    async def test_persists_entry_reflection_and_recommendations(self, service):
        created = await _create(service)

        stored = await service.get_entry_with_reflection(created.mood_entry.id)
        assert stored.mood_entry == created.mood_entry
        assert stored.reflection.content == "Reflecting on: rainy afternoon"
        assert [r.track_id for r in stored.recommendations] == [f"t{i}" for i in range(5)]
        assert len(created.recommendations) == 5

    @pytest.mark.asyncio
    async def test_recommendations_use_energy_valence_and_ai_genres(
        self, build_service, fake_analyzer
    ):
        catalog = FakeCatalogClient(query_result=[make_track("a")])
        service = build_service(catalog, fake_analyzer)

        await _create(service, energy=8, valence=2)

        call = catalog.query_calls[0]
        assert call["target_energy"] == pytest.approx(0.8)
        assert call["target_valence"] == pytest.approx(0.2)
        assert call["seed_genres"] == ["indie", "rock"]
        assert fake_analyzer.analyze_calls == [("rainy afternoon", 8, 2)]

    @pytest.mark.asyncio
    async def test_stored_features_come_from_catalog(self, service):
        created = await _create(service)

        rec = created.recommendations[0]
        assert (rec.energy, rec.valence) == (0.8, 0.6)
        assert rec.artist_name == "Test Artist"

    @pytest.mark.asyncio
    async def test_catalog_outage_still_creates_entry(self, build_service):
        catalog = FakeCatalogClient(query_result=AuthenticationError("Service Unavailable"))
        service = build_service(catalog)

        created = await _create(service)

        assert created.recommendations == []
        assert created.reflection is not None
        entry = await service.get_entry(created.mood_entry.id)
        assert entry.text == "rainy afternoon"
        assert await service.recommendations_for(entry.id) == []


class TestLookups:
    """Tests for entry lookups."""

    @pytest.mark.asyncio
    async def test_get_unknown_entry_raises(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.get_entry("0" * 32)

    @pytest.mark.asyncio
    async def test_get_reflection_unknown_raises(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.get_reflection("0" * 32)

    @pytest.mark.asyncio
    async def test_list_and_recent(self, service):
        for i in range(3):
            await _create(service, text=f"mood {i}")

        assert len(await service.list_entries()) == 3
        recent = await service.recent_entries(2)
        assert len(recent) == 2
        assert recent[0].text == "mood 2"


class TestAffirmation:
    """Tests for the daily affirmation."""

    @pytest.mark.asyncio
    async def test_uses_five_most_recent_texts(self, service, fake_analyzer):
        for i in range(7):
            await _create(service, text=f"mood {i}")

        assert await service.daily_affirmation() == "You are doing great."
        assert fake_analyzer.affirmation_calls[-1] == [f"mood {i}" for i in (6, 5, 4, 3, 2)]


class TestPlaylists:
    """Tests for saved playlists."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, service):
        created = await _create(service)

        playlist = await service.create_playlist(
            name="Rainy days", mood_entry_ids=[created.mood_entry.id]
        )

        playlists = await service.list_playlists()
        assert [p.id for p in playlists] == [playlist.id]
        assert playlists[0].mood_entry_ids == (created.mood_entry.id,)
        assert playlists[0].description is None
