"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters.
"""

from moodtune.application.interfaces.catalog_client import CatalogClient
from moodtune.application.interfaces.mood_analyzer import MoodAnalyzer

__all__ = [
    "CatalogClient",
    "MoodAnalyzer",
]
