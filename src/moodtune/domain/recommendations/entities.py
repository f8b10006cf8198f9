"""Core domain entities for the recommendations bounded context."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from moodtune.domain.shared.types import HttpUrlStr, MoodScale, NonEmptyStr, UnitInterval

MAX_RECOMMENDATIONS: Final[int] = 10
NEUTRAL_FEATURE_VALUE: Final[float] = 0.5
UNKNOWN_ARTIST: Final[str] = "Unknown Artist"


class MoodSignal(BaseModel):
    """User-reported mood driving track selection (1-10 scale)."""

    model_config = ConfigDict(frozen=True)

    energy: MoodScale
    valence: MoodScale
    genre_hints: tuple[str, ...] = ()

    @field_validator("genre_hints", mode="before")
    @classmethod
    def _coerce_hints(cls, v: object) -> object:
        if isinstance(v, list):
            return tuple(v)
        return v


class AccessToken(BaseModel):
    """Catalog bearer token cached in process memory."""

    model_config = ConfigDict(frozen=True)

    value: NonEmptyStr
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class Track(BaseModel):
    """Immutable catalog track."""

    model_config = ConfigDict(frozen=True)

    id: NonEmptyStr
    name: str
    primary_artist: str = UNKNOWN_ARTIST
    album_art_url: HttpUrlStr | None = None
    preview_url: HttpUrlStr | None = None


class AudioFeatures(BaseModel):
    """Per-track energy/valence on the catalog's 0-1 scale."""

    model_config = ConfigDict(frozen=True)

    track_id: NonEmptyStr
    energy: UnitInterval
    valence: UnitInterval

    @classmethod
    def neutral(cls, track_id: str) -> AudioFeatures:
        """Stand-in for tracks the catalog returned no features for."""
        return cls(track_id=track_id, energy=NEUTRAL_FEATURE_VALUE, valence=NEUTRAL_FEATURE_VALUE)


class RecommendedTrack(BaseModel):
    """A selected track paired with its audio features."""

    model_config = ConfigDict(frozen=True)

    track: Track
    features: AudioFeatures


class RecommendationResult(BaseModel):
    """Ordered, deduplicated selection of at most ten tracks."""

    model_config = ConfigDict(frozen=True)

    items: tuple[RecommendedTrack, ...] = Field(default_factory=tuple)
    strategy: str | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> RecommendationResult:
        if len(self.items) > MAX_RECOMMENDATIONS:
            raise ValueError(f"At most {MAX_RECOMMENDATIONS} recommendations allowed")
        ids = [item.track.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("Recommendation track ids must be unique")
        return self

    @classmethod
    def empty(cls) -> RecommendationResult:
        return cls()

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def tracks(self) -> list[Track]:
        return [item.track for item in self.items]

    def __len__(self) -> int:
        return len(self.items)
