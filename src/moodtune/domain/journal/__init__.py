"""
Journal Bounded Context

Mood entries, AI reflections, stored recommendations and saved playlists.
"""

from moodtune.domain.journal.entities import (
    AiReflection,
    MoodAnalysis,
    MoodEntry,
    MoodEntryWithReflection,
    SavedPlaylist,
    TrackRecommendation,
)
from moodtune.domain.journal.repository import (
    MoodEntryRepository,
    PlaylistRepository,
    RecommendationRepository,
    ReflectionRepository,
)

__all__ = [
    # Entities
    "AiReflection",
    "MoodAnalysis",
    "MoodEntry",
    "MoodEntryWithReflection",
    "SavedPlaylist",
    "TrackRecommendation",
    # Repositories
    "MoodEntryRepository",
    "PlaylistRepository",
    "RecommendationRepository",
    "ReflectionRepository",
]
