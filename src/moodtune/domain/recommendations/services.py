"""
Recommendations Domain Services

Pure rules that turn a mood signal into catalog query parameters:
scale conversion, seed-genre selection, search-phrase derivation and
order-preserving deduplication. No I/O happens here.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from typing import Final

from moodtune.domain.recommendations.entities import MAX_RECOMMENDATIONS, Track

MAX_SEED_GENRES: Final[int] = 2
MAX_SEARCH_CALLS: Final[int] = 3

VALID_SEED_GENRES: Final[frozenset[str]] = frozenset(
    {
        "acoustic",
        "blues",
        "classical",
        "country",
        "dance",
        "electronic",
        "folk",
        "hip-hop",
        "indie",
        "jazz",
        "latin",
        "pop",
        "punk",
        "reggae",
        "rock",
        "soul",
        "world-music",
    }
)
DEFAULT_GENRE: Final[str] = "pop"

_NON_GENRE_CHARS = re.compile(r"[^a-z-]")


class RecommendationDomainService:
    """Domain service for mood-to-catalog mapping rules."""

    # Quadrant thresholds on the 0-1 catalog scale
    HIGH_THRESHOLD = 0.7
    LOW_THRESHOLD = 0.3

    # Quadrant thresholds on the 1-10 user scale
    HIGH_MOOD = 7
    LOW_MOOD = 3

    @staticmethod
    def rescale(value: float) -> float:
        """Map a 1-10 mood value onto the catalog's 0-1 scale, clamped."""
        return max(0.0, min(1.0, value / 10))

    @classmethod
    def normalize_genre_hints(cls, hints: Iterable[str]) -> list[str]:
        """Keep at most two hints that are known catalog seed genres.

        Hints are lower-cased and stripped of anything outside ``[a-z-]``
        before the whitelist check.
        """
        seeds: list[str] = []
        for hint in hints:
            genre = _NON_GENRE_CHARS.sub("", hint.lower())
            if genre in VALID_SEED_GENRES:
                seeds.append(genre)
            if len(seeds) == MAX_SEED_GENRES:
                break
        return seeds

    @classmethod
    def default_seed_genres(cls, energy: float, valence: float) -> list[str]:
        """Quadrant defaults for scaled energy/valence.

        Order matters: high/high first, then low valence, then low energy.
        """
        if valence >= cls.HIGH_THRESHOLD and energy >= cls.HIGH_THRESHOLD:
            return ["pop", "dance"]
        if valence <= cls.LOW_THRESHOLD:
            return ["blues", "folk"]
        if energy <= cls.LOW_THRESHOLD:
            return ["acoustic", "classical"]
        return ["pop", "rock"]

    @classmethod
    def seed_genres_for(cls, energy: float, valence: float, hints: Iterable[str]) -> list[str]:
        """Resolve the seed genres for a structured query (scaled inputs)."""
        seeds = cls.normalize_genre_hints(hints)
        if not seeds:
            seeds = cls.default_seed_genres(energy, valence)
        if not seeds:
            seeds = [DEFAULT_GENRE]
        return seeds[:MAX_SEED_GENRES]

    @classmethod
    def search_phrases_for(
        cls, energy: float, valence: float, hints: Iterable[str] = ()
    ) -> list[str]:
        """Free-text search phrases for a 1-10 mood, followed by the raw hints."""
        high, low = cls.HIGH_MOOD, cls.LOW_MOOD

        if valence >= high and energy >= high:
            phrases = ["happy upbeat", "dance party", "energetic"]
        elif valence >= high:
            phrases = ["happy", "feel good", "positive"]
        elif valence <= low and energy <= low:
            phrases = ["sad slow", "melancholy", "emotional"]
        elif valence <= low:
            phrases = ["sad", "blues", "heartbreak"]
        elif energy >= high:
            phrases = ["energetic", "workout", "pump up"]
        elif energy <= low:
            phrases = ["calm", "relaxing", "chill"]
        else:
            phrases = ["popular", "hits", "good vibes"]

        phrases.extend(hint.lower() for hint in hints if hint)
        return phrases

    @staticmethod
    def per_phrase_limit(phrase_count: int) -> int:
        """Search result cap per phrase, spread over every derived phrase."""
        return math.ceil(MAX_RECOMMENDATIONS / max(1, phrase_count))

    @staticmethod
    def deduplicate(tracks: Sequence[Track], limit: int = MAX_RECOMMENDATIONS) -> list[Track]:
        """Drop repeated track ids keeping first-seen order, then truncate."""
        seen: set[str] = set()
        unique: list[Track] = []
        for track in tracks:
            if track.id in seen:
                continue
            seen.add(track.id)
            unique.append(track)
        return unique[:limit]
