"""Journal Application Service - orchestrates mood logging, reflection and music."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.journal.entities import (
    AiReflection,
    MoodEntry,
    MoodEntryWithReflection,
    SavedPlaylist,
    TrackRecommendation,
)
from ...domain.recommendations.entities import MoodSignal
from ...domain.shared.exceptions import EntityNotFoundError
from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.journal.repository import (
        MoodEntryRepository,
        PlaylistRepository,
        RecommendationRepository,
        ReflectionRepository,
    )
    from ..interfaces.mood_analyzer import MoodAnalyzer
    from .recommendation_service import RecommendationSelector

logger = logging.getLogger(__name__)

AFFIRMATION_CONTEXT_SIZE = 5


class MoodJournalService:
    """Logs moods and attaches an AI reflection plus music suggestions.

    Music selection is best-effort: a mood entry is always stored even when
    the catalog is unreachable.
    """

    def __init__(
        self,
        *,
        mood_entry_repository: MoodEntryRepository,
        reflection_repository: ReflectionRepository,
        recommendation_repository: RecommendationRepository,
        playlist_repository: PlaylistRepository,
        mood_analyzer: MoodAnalyzer,
        recommendation_selector: RecommendationSelector,
    ) -> None:
        self._entries = mood_entry_repository
        self._reflections = reflection_repository
        self._recommendations = recommendation_repository
        self._playlists = playlist_repository
        self._analyzer = mood_analyzer
        self._selector = recommendation_selector

    async def create_entry(
        self,
        *,
        text: str,
        emoji: str,
        quick_mood: str,
        energy: float,
        valence: float,
    ) -> MoodEntryWithReflection:
        entry = await self._entries.save(
            MoodEntry(text=text, emoji=emoji, quick_mood=quick_mood, energy=energy, valence=valence)
        )
        logger.info(LogTemplates.MOOD_ENTRY_CREATED, entry.id, entry.energy, entry.valence)

        analysis = await self._analyzer.analyze_mood(entry.text, entry.energy, entry.valence)
        reflection = await self._reflections.save(
            AiReflection(mood_entry_id=entry.id, content=analysis.reflection)
        )
        logger.debug(LogTemplates.REFLECTION_SAVED, entry.id)

        signal = MoodSignal(
            energy=entry.energy,
            valence=entry.valence,
            genre_hints=tuple(analysis.suggested_genres),
        )
        result = await self._selector.get_recommendations(signal)

        recommendations = await self._recommendations.save_many(
            [TrackRecommendation.from_recommended(entry.id, item) for item in result.items]
        )
        logger.info(LogTemplates.RECOMMENDATIONS_SAVED, len(recommendations), entry.id)

        return MoodEntryWithReflection(
            mood_entry=entry,
            reflection=reflection,
            recommendations=recommendations,
        )

    async def list_entries(self) -> list[MoodEntry]:
        return await self._entries.list_all()

    async def recent_entries(self, limit: int = 10) -> list[MoodEntry]:
        return await self._entries.list_recent(limit)

    async def get_entry(self, entry_id: str) -> MoodEntry:
        """Fetch one entry.

        Raises:
            EntityNotFoundError: If no entry has this id.
        """
        entry = await self._entries.get(entry_id)
        if entry is None:
            raise EntityNotFoundError("MoodEntry", entry_id)
        return entry

    async def get_reflection(self, entry_id: str) -> AiReflection:
        reflection = await self._reflections.get_by_mood_entry(entry_id)
        if reflection is None:
            raise EntityNotFoundError("AiReflection", entry_id)
        return reflection

    async def get_entry_with_reflection(self, entry_id: str) -> MoodEntryWithReflection:
        entry = await self.get_entry(entry_id)
        return MoodEntryWithReflection(
            mood_entry=entry,
            reflection=await self._reflections.get_by_mood_entry(entry_id),
            recommendations=await self._recommendations.list_by_mood_entry(entry_id),
        )

    async def recommendations_for(self, entry_id: str) -> list[TrackRecommendation]:
        return await self._recommendations.list_by_mood_entry(entry_id)

    async def daily_affirmation(self) -> str:
        recent = await self._entries.list_recent(AFFIRMATION_CONTEXT_SIZE)
        return await self._analyzer.generate_affirmation([entry.text for entry in recent])

    async def create_playlist(
        self,
        *,
        name: str,
        description: str | None = None,
        mood_entry_ids: list[str] | None = None,
    ) -> SavedPlaylist:
        playlist = await self._playlists.save(
            SavedPlaylist(
                name=name,
                description=description,
                mood_entry_ids=tuple(mood_entry_ids or ()),
            )
        )
        logger.info(LogTemplates.PLAYLIST_CREATED, playlist.name, len(playlist.mood_entry_ids))
        return playlist

    async def list_playlists(self) -> list[SavedPlaylist]:
        return await self._playlists.list_all()
