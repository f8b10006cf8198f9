"""Persistence infrastructure (aiosqlite)."""

from moodtune.infrastructure.persistence.database import Database

__all__ = ["Database"]
