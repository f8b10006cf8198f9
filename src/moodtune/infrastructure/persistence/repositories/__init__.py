"""SQLite repository implementations."""

from moodtune.infrastructure.persistence.repositories.mood_entry_repository import (
    SQLiteMoodEntryRepository,
)
from moodtune.infrastructure.persistence.repositories.playlist_repository import (
    SQLitePlaylistRepository,
)
from moodtune.infrastructure.persistence.repositories.recommendation_repository import (
    SQLiteRecommendationRepository,
)
from moodtune.infrastructure.persistence.repositories.reflection_repository import (
    SQLiteReflectionRepository,
)

__all__ = [
    "SQLiteMoodEntryRepository",
    "SQLiteReflectionRepository",
    "SQLiteRecommendationRepository",
    "SQLitePlaylistRepository",
]
