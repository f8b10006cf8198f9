"""
Journal Domain Repository Interfaces

Abstract base classes defining the contracts for data persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from moodtune.domain.journal.entities import (
    AiReflection,
    MoodEntry,
    SavedPlaylist,
    TrackRecommendation,
)


class MoodEntryRepository(ABC):
    """Abstract repository for mood entries."""

    @abstractmethod
    async def save(self, entry: MoodEntry) -> MoodEntry:
        """Persist a new mood entry.

        Args:
            entry: The entry to store.

        Returns:
            The stored entry.
        """
        ...

    @abstractmethod
    async def get(self, entry_id: str) -> MoodEntry | None:
        """Retrieve an entry by id.

        Args:
            entry_id: The entry id.

        Returns:
            The entry if found, None otherwise.
        """
        ...

    @abstractmethod
    async def list_all(self) -> list[MoodEntry]:
        """Return every entry, newest first."""
        ...

    @abstractmethod
    async def list_recent(self, limit: int = 10) -> list[MoodEntry]:
        """Return the newest ``limit`` entries, newest first."""
        ...


class ReflectionRepository(ABC):
    """Abstract repository for AI reflections."""

    @abstractmethod
    async def save(self, reflection: AiReflection) -> AiReflection:
        """Persist a reflection."""
        ...

    @abstractmethod
    async def get_by_mood_entry(self, mood_entry_id: str) -> AiReflection | None:
        """Retrieve the reflection written for a mood entry.

        Args:
            mood_entry_id: The mood entry id.

        Returns:
            The reflection if one exists, None otherwise.
        """
        ...


class RecommendationRepository(ABC):
    """Abstract repository for tracks recommended against mood entries."""

    @abstractmethod
    async def save_many(
        self, recommendations: list[TrackRecommendation]
    ) -> list[TrackRecommendation]:
        """Persist recommendations in one transaction.

        Args:
            recommendations: Rows to insert; may be empty.

        Returns:
            The stored recommendations in input order.
        """
        ...

    @abstractmethod
    async def list_by_mood_entry(self, mood_entry_id: str) -> list[TrackRecommendation]:
        """Return recommendations for a mood entry in the order they were chosen."""
        ...


class PlaylistRepository(ABC):
    """Abstract repository for saved playlists."""

    @abstractmethod
    async def save(self, playlist: SavedPlaylist) -> SavedPlaylist:
        """Persist a playlist."""
        ...

    @abstractmethod
    async def list_all(self) -> list[SavedPlaylist]:
        """Return every playlist, newest first."""
        ...
