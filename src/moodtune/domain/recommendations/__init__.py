"""
Recommendations Bounded Context

Domain logic for mood-driven music track selection.
"""

from moodtune.domain.recommendations.entities import (
    AccessToken,
    AudioFeatures,
    MoodSignal,
    RecommendationResult,
    RecommendedTrack,
    Track,
)
from moodtune.domain.recommendations.services import RecommendationDomainService

__all__ = [
    # Entities
    "AccessToken",
    "AudioFeatures",
    "MoodSignal",
    "RecommendationResult",
    "RecommendedTrack",
    "Track",
    # Services
    "RecommendationDomainService",
]
