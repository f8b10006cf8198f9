from collections.abc import Sequence

import pytest
import pytest_asyncio

from moodtune.application.interfaces.catalog_client import CatalogClient
from moodtune.application.interfaces.mood_analyzer import MoodAnalyzer
from moodtune.domain.journal.entities import MoodAnalysis
from moodtune.domain.recommendations.entities import AudioFeatures, Track
from moodtune.domain.shared.exceptions import UpstreamRequestError

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from moodtune.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def mood_entry_repository(in_memory_database):
    from moodtune.infrastructure.persistence.repositories.mood_entry_repository import (
        SQLiteMoodEntryRepository,
    )

    return SQLiteMoodEntryRepository(in_memory_database)


@pytest_asyncio.fixture
async def reflection_repository(in_memory_database):
    from moodtune.infrastructure.persistence.repositories.reflection_repository import (
        SQLiteReflectionRepository,
    )

    return SQLiteReflectionRepository(in_memory_database)


@pytest_asyncio.fixture
async def recommendation_repository(in_memory_database):
    from moodtune.infrastructure.persistence.repositories.recommendation_repository import (
        SQLiteRecommendationRepository,
    )

    return SQLiteRecommendationRepository(in_memory_database)


@pytest_asyncio.fixture
async def playlist_repository(in_memory_database):
    from moodtune.infrastructure.persistence.repositories.playlist_repository import (
        SQLitePlaylistRepository,
    )

    return SQLitePlaylistRepository(in_memory_database)


# ============================================================================
# Fakes
# ============================================================================


def make_track(track_id: str, name: str | None = None) -> Track:
    return Track(
        id=track_id,
        name=name or f"Track {track_id}",
        primary_artist="Test Artist",
        album_art_url=f"https://img.example/{track_id}.jpg",
        preview_url=None,
    )


class FakeCatalogClient(CatalogClient):
    """In-memory catalog that records every call.

    ``query_result`` / ``search_results`` may be a list of tracks or an
    exception instance to raise.
    """

    def __init__(
        self,
        *,
        query_result=None,
        search_results: dict | None = None,
        default_search=None,
        features=None,
        genres: list[str] | None = None,
    ) -> None:
        self.query_result = query_result if query_result is not None else []
        self.search_results = search_results or {}
        self.default_search = default_search if default_search is not None else []
        self.features = features
        self.genres = genres or ["pop", "rock"]
        self.query_calls: list[dict] = []
        self.search_calls: list[tuple[str, int]] = []
        self.feature_calls: list[list[str]] = []
        self.closed = False

    async def get_access_token(self) -> str:
        return "fake-token"

    async def get_recommendations(
        self,
        *,
        seed_genres: Sequence[str],
        target_energy: float,
        target_valence: float,
        limit: int,
    ) -> list[Track]:
        self.query_calls.append(
            {
                "seed_genres": list(seed_genres),
                "target_energy": target_energy,
                "target_valence": target_valence,
                "limit": limit,
            }
        )
        if isinstance(self.query_result, Exception):
            raise self.query_result
        return list(self.query_result)

    async def search_tracks(self, query: str, limit: int) -> list[Track]:
        self.search_calls.append((query, limit))
        result = self.search_results.get(query, self.default_search)
        if isinstance(result, Exception):
            raise result
        return list(result)[:limit]

    async def get_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        self.feature_calls.append(list(track_ids))
        if isinstance(self.features, Exception):
            raise self.features
        if self.features is None:
            return [AudioFeatures(track_id=t, energy=0.8, valence=0.6) for t in track_ids]
        return [self.features.get(t) for t in track_ids]

    async def get_available_genres(self) -> list[str]:
        return list(self.genres)

    async def aclose(self) -> None:
        self.closed = True


class FakeMoodAnalyzer(MoodAnalyzer):
    def __init__(self, genres: list[str] | None = None) -> None:
        self.genres = genres or ["indie", "rock"]
        self.analyze_calls: list[tuple[str, float, float]] = []
        self.affirmation_calls: list[list[str]] = []

    async def analyze_mood(self, text: str, energy: float, valence: float) -> MoodAnalysis:
        self.analyze_calls.append((text, energy, valence))
        return MoodAnalysis(
            energy=energy,
            valence=valence,
            dominant_emotions=["calm"],
            suggested_genres=self.genres,
            reflection=f"Reflecting on: {text}",
        )

    async def generate_affirmation(self, recent_moods: list[str]) -> str:
        self.affirmation_calls.append(list(recent_moods))
        return "You are doing great."


@pytest.fixture
def upstream_404():
    return UpstreamRequestError("/recommendations", 404, "Not Found")


@pytest.fixture
def fake_catalog():
    return FakeCatalogClient(query_result=[make_track(f"t{i}") for i in range(5)])


@pytest.fixture
def fake_analyzer():
    return FakeMoodAnalyzer()
