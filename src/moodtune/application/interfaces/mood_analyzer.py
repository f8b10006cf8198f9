"""
Mood Analyzer Interface

Port interface for AI-generated mood analysis and affirmations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.journal.entities import MoodAnalysis


class MoodAnalyzer(ABC):
    """Abstract interface for AI text services.

    Both operations must never raise: implementations return a static
    fallback when the AI service is unavailable.
    """

    @abstractmethod
    async def analyze_mood(self, text: str, energy: float, valence: float) -> MoodAnalysis:
        """Analyze a mood entry.

        Args:
            text: Free-text mood description.
            energy: User energy on the 1-10 scale.
            valence: User valence on the 1-10 scale.

        Returns:
            The analysis, or a deterministic fallback.
        """
        ...

    @abstractmethod
    async def generate_affirmation(self, recent_moods: list[str]) -> str:
        """Generate a short affirmation from recent mood texts."""
        ...
