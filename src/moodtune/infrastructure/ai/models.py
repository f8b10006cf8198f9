"""Pydantic models for AI mood analysis output.

These are infrastructure-specific models for parsing the agent's structured
output before it becomes a domain ``MoodAnalysis``.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, Field

from moodtune.domain.journal.entities import MoodAnalysis
from moodtune.domain.shared.messages import FallbackTexts

AI_TIMEOUT: Final[float] = 20.0


class MoodAnalysisOutput(BaseModel):
    """Structured output returned by the mood analysis agent.

    Every field is optional; gaps are filled from the user's own values.
    """

    energy: float | None = Field(default=None, ge=1.0, le=10.0)
    valence: float | None = Field(default=None, ge=1.0, le=10.0)
    dominant_emotions: list[str] = Field(default_factory=list)
    suggested_genres: list[str] = Field(
        default_factory=list,
        description="Lower-case music genres that fit the mood, e.g. 'indie', 'jazz'.",
    )
    reflection: str = Field(default="", description="Two or three empathetic sentences.")

    def to_domain(self, energy: float, valence: float) -> MoodAnalysis:
        return MoodAnalysis(
            energy=self.energy or energy,
            valence=self.valence or valence,
            dominant_emotions=self.dominant_emotions or ["neutral"],
            suggested_genres=self.suggested_genres or ["pop"],
            reflection=self.reflection.strip() or FallbackTexts.REFLECTION,
        )
