"""Music catalog infrastructure (Spotify Web API)."""

from moodtune.infrastructure.catalog.spotify_client import FALLBACK_GENRES, SpotifyCatalogClient

__all__ = ["FALLBACK_GENRES", "SpotifyCatalogClient"]
