"""Application services."""

from moodtune.application.services.journal_service import MoodJournalService
from moodtune.application.services.recommendation_service import RecommendationSelector

__all__ = [
    "MoodJournalService",
    "RecommendationSelector",
]
