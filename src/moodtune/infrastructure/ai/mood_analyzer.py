"""AI mood analysis and daily affirmations, powered by pydantic-ai."""

from __future__ import annotations

import logging

from pydantic_ai import Agent

from moodtune.application.interfaces.mood_analyzer import MoodAnalyzer
from moodtune.config.settings import AISettings
from moodtune.domain.journal.entities import MoodAnalysis
from moodtune.domain.shared.messages import ErrorMessages, FallbackTexts, LogTemplates
from moodtune.infrastructure.ai.models import AI_TIMEOUT, MoodAnalysisOutput

logger = logging.getLogger(__name__)

ANALYSIS_SYSTEM_PROMPT = """You are an empathetic AI counselor.
Analyze the user's mood and suggest music genres.

Return:
- energy: the mood's energy on a 1-10 scale
- valence: the mood's positivity on a 1-10 scale
- dominant_emotions: two or three single-word emotions
- suggested_genres: two or three lower-case music genres that fit the mood
- reflection: a short, warm reflection addressed to the user
"""

AFFIRMATION_SYSTEM_PROMPT = (
    "Generate a short daily affirmation based on mood patterns. "
    "Reply with the affirmation only, one or two sentences."
)

HIGH_VALENCE = 7
LOW_VALENCE = 3


def fallback_analysis(energy: float, valence: float) -> MoodAnalysis:
    """Deterministic analysis used when the AI service is unavailable."""
    if valence >= HIGH_VALENCE:
        genres, emotions = ["pop", "dance"], ["happy", "energetic"]
    elif valence <= LOW_VALENCE:
        genres, emotions = ["blues", "folk"], ["sad", "reflective"]
    else:
        genres, emotions = ["pop", "rock"], ["neutral", "contemplative"]

    return MoodAnalysis(
        energy=energy,
        valence=valence,
        dominant_emotions=emotions,
        suggested_genres=genres,
        reflection=FallbackTexts.REFLECTION,
    )


class AgentMoodAnalyzer(MoodAnalyzer):
    def __init__(self, settings: AISettings | None = None) -> None:
        self._settings = settings or AISettings()
        self._agent: Agent[None, MoodAnalysisOutput] | None = None
        self._affirmation_agent: Agent[None, str] | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._settings.api_key.get_secret_value())

    def _get_agent(self) -> Agent[None, MoodAnalysisOutput]:
        if self._agent is not None:
            return self._agent

        self._agent = Agent(
            self._settings.model,
            output_type=MoodAnalysisOutput,
            system_prompt=ANALYSIS_SYSTEM_PROMPT,
        )
        logger.info(LogTemplates.AI_CLIENT_INITIALIZED, self._settings.model, AI_TIMEOUT)
        return self._agent

    def _get_affirmation_agent(self) -> Agent[None, str]:
        if self._affirmation_agent is not None:
            return self._affirmation_agent

        self._affirmation_agent = Agent(
            self._settings.model,
            output_type=str,
            system_prompt=AFFIRMATION_SYSTEM_PROMPT,
        )
        return self._affirmation_agent

    async def analyze_mood(self, text: str, energy: float, valence: float) -> MoodAnalysis:
        if not self.enabled:
            logger.debug(LogTemplates.AI_DISABLED, "mood analysis")
            return fallback_analysis(energy, valence)

        user_prompt = f'Analyze: "{text}" Energy: {energy}/10 Positivity: {valence}/10.'
        try:
            result = await self._get_agent().run(
                user_prompt,
                model_settings={
                    "max_tokens": self._settings.max_tokens,
                    "temperature": self._settings.temperature,
                    "timeout": AI_TIMEOUT,
                },
            )
            return result.output.to_domain(energy, valence)
        except Exception as e:
            logger.warning(LogTemplates.AI_ANALYSIS_FAILED, e)
            return fallback_analysis(energy, valence)

    async def generate_affirmation(self, recent_moods: list[str]) -> str:
        if not self.enabled:
            logger.debug(LogTemplates.AI_DISABLED, "affirmation")
            return FallbackTexts.AFFIRMATION

        user_prompt = f"Based on moods: {', '.join(recent_moods)}, create a short affirmation."
        try:
            result = await self._get_affirmation_agent().run(
                user_prompt,
                model_settings={
                    "max_tokens": self._settings.affirmation_max_tokens,
                    "temperature": self._settings.affirmation_temperature,
                    "timeout": AI_TIMEOUT,
                },
            )
            affirmation = (result.output or "").strip()
            if not affirmation:
                raise ValueError(ErrorMessages.EMPTY_API_RESPONSE)
            return affirmation
        except Exception as e:
            logger.warning(LogTemplates.AI_AFFIRMATION_FAILED, e)
            return FallbackTexts.AFFIRMATION
