"""Centralized message constants for error messages, validation, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Time/Date validation
    TIMEZONE_REQUIRED_UTC_DATETIME = "UtcDateTime requires a timezone-aware datetime"

    # Settings validation
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # HTTP responses
    INTERNAL_ERROR = "Internal server error"

    # Catalog
    CATALOG_CREDENTIALS_MISSING = "Catalog client id/secret are not configured"
    EMPTY_API_RESPONSE = "Empty response from API"


class FallbackTexts:
    """Static texts returned when the AI service is unavailable."""

    REFLECTION = (
        "Thank you for sharing your feelings. I'm here to listen and help you "
        "explore your emotions through music."
    )
    AFFIRMATION = (
        "Every feeling you experience is valid and brings you closer to understanding yourself."
    )


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application lifecycle
    APP_STARTING = "Starting MoodTune server (environment=%s)"
    APP_STOPPED = "MoodTune server stopped"
    APP_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    APP_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
    CONTAINER_SHUTDOWN_FAILED = "Failed closing %s: %r"

    # Database lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"
    DATABASE_PING_FAILED = "Database health check failed: %s"
    DATABASE_ROLLBACK_FAILED = "Rollback failed: %s"

    # Journal
    MOOD_ENTRY_CREATED = "Created mood entry %s (energy=%s, valence=%s)"
    REFLECTION_SAVED = "Saved reflection for mood entry %s"
    RECOMMENDATIONS_SAVED = "Saved %d recommendations for mood entry %s"
    PLAYLIST_CREATED = "Created playlist '%s' with %d entries"

    # Catalog authentication
    CATALOG_TOKEN_CACHED = "Reusing cached catalog token (expires in %.0fs)"
    CATALOG_TOKEN_FETCHED = "Fetched new catalog token (valid for %ss)"
    CATALOG_AUTH_FAILED = "Catalog authentication failed: %s"

    # Catalog requests
    CATALOG_REQUEST = "Catalog request: GET %s %s"
    CATALOG_RESPONSE = "Catalog response: %s %s"
    CATALOG_REQUEST_FAILED = "Catalog request failed: %s"
    CATALOG_GENRES_FALLBACK = "Failed to get available genres, using fallback list: %s"
    CATALOG_TRACK_SKIPPED = "Skipping malformed track %s from %s: %s"
    CATALOG_CLIENT_CLOSED = "Catalog HTTP client closed"

    # Recommendation selection
    SELECT_QUERY_ATTEMPT = "Trying structured recommendations (seeds=%s, energy=%.2f, valence=%.2f)"
    SELECT_QUERY_FAILED = "Structured recommendations failed, will try search fallback: %s"
    SELECT_FALLBACK = "Structured recommendations empty, using search fallback"
    SELECT_SEARCH_PHRASE_FAILED = "Search failed for term '%s': %s"
    SELECT_COMPLETED = "Selected %d tracks via %s strategy"
    SELECT_EMPTY = "No recommendations available from either strategy"
    SELECT_FAILED = "Failed to get any recommendations: %r"
    AUDIO_FEATURES_FAILED = "Failed to get audio features: %s"

    # AI
    AI_CLIENT_INITIALIZED = "AI agent initialized (model=%s, timeout=%.1fs)"
    AI_ANALYSIS_FAILED = "AI mood analysis failed, using fallback: %r"
    AI_AFFIRMATION_FAILED = "Affirmation generation failed, using fallback: %r"
    AI_DISABLED = "AI API key not configured, using fallback %s"

    # HTTP
    HTTP_REQUEST = "%s %s %s in %dms"
    HTTP_UNHANDLED_ERROR = "Unhandled error on %s %s"
