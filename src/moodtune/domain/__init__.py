"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, messages and exceptions
- journal/: Mood entries, reflections, stored recommendations and playlists
- recommendations/: Mood signal to track selection rules
"""

from moodtune.domain.shared.exceptions import DomainError

__all__ = ["DomainError"]
