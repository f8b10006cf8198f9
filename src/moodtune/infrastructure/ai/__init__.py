"""AI infrastructure."""

from moodtune.infrastructure.ai.mood_analyzer import AgentMoodAnalyzer, fallback_analysis

__all__ = ["AgentMoodAnalyzer", "fallback_analysis"]
