"""Centralized constants for database schema, upstream endpoints, and other shared values."""

from __future__ import annotations


class DatabaseTables:
    """Database table names."""

    MOOD_ENTRIES = "mood_entries"
    AI_REFLECTIONS = "ai_reflections"
    TRACK_RECOMMENDATIONS = "track_recommendations"
    SAVED_PLAYLISTS = "saved_playlists"


class SQLPragmas:
    """SQLite PRAGMA statements for database configuration.

    These pragmas are applied to each connection to ensure consistent behavior.
    """

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    FOREIGN_KEYS_ON = "PRAGMA foreign_keys=ON"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"


class CatalogEndpoints:
    """Paths of the upstream catalog API, relative to the API base URL."""

    TOKEN = "/api/token"
    RECOMMENDATIONS = "/recommendations"
    SEARCH = "/search"
    AUDIO_FEATURES = "/audio-features"
    GENRE_SEEDS = "/recommendations/available-genre-seeds"
