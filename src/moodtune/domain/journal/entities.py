"""Core domain entities for the mood journal bounded context."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from moodtune.domain.recommendations.entities import RecommendedTrack
from moodtune.domain.shared.datetime_utils import utcnow
from moodtune.domain.shared.types import (
    EntityIdStr,
    HttpUrlStr,
    MoodScale,
    NonEmptyStr,
    UnitInterval,
    UtcDatetimeField,
)


def new_entity_id() -> str:
    return uuid4().hex


class MoodEntry(BaseModel):
    """A single journal entry as written by the user."""

    model_config = ConfigDict(frozen=True)

    id: EntityIdStr = Field(default_factory=new_entity_id)
    text: NonEmptyStr
    emoji: NonEmptyStr
    quick_mood: NonEmptyStr
    energy: MoodScale
    valence: MoodScale
    created_at: UtcDatetimeField = Field(default_factory=utcnow)


class MoodAnalysis(BaseModel):
    """AI reading of a mood entry."""

    energy: float
    valence: float
    dominant_emotions: list[str] = Field(default_factory=lambda: ["neutral"])
    suggested_genres: list[str] = Field(default_factory=lambda: ["pop"])
    reflection: str


class AiReflection(BaseModel):
    """Reflective text generated for a mood entry."""

    model_config = ConfigDict(frozen=True)

    id: EntityIdStr = Field(default_factory=new_entity_id)
    mood_entry_id: EntityIdStr
    content: NonEmptyStr
    created_at: UtcDatetimeField = Field(default_factory=utcnow)


class TrackRecommendation(BaseModel):
    """A recommended track stored against the mood entry it was chosen for."""

    model_config = ConfigDict(frozen=True)

    id: EntityIdStr = Field(default_factory=new_entity_id)
    mood_entry_id: EntityIdStr
    track_id: NonEmptyStr
    track_name: str
    artist_name: str
    album_image_url: HttpUrlStr | None = None
    preview_url: HttpUrlStr | None = None
    energy: UnitInterval
    valence: UnitInterval
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    @classmethod
    def from_recommended(cls, mood_entry_id: str, item: RecommendedTrack) -> TrackRecommendation:
        track = item.track
        return cls(
            mood_entry_id=mood_entry_id,
            track_id=track.id,
            track_name=track.name,
            artist_name=track.primary_artist,
            album_image_url=track.album_art_url,
            preview_url=track.preview_url,
            energy=item.features.energy,
            valence=item.features.valence,
        )


class SavedPlaylist(BaseModel):
    """A named collection of mood entries."""

    model_config = ConfigDict(frozen=True)

    id: EntityIdStr = Field(default_factory=new_entity_id)
    name: NonEmptyStr
    description: str | None = None
    mood_entry_ids: tuple[EntityIdStr, ...] = ()
    created_at: UtcDatetimeField = Field(default_factory=utcnow)


class MoodEntryWithReflection(BaseModel):
    """Aggregate returned after logging a mood."""

    mood_entry: MoodEntry
    reflection: AiReflection | None = None
    recommendations: list[TrackRecommendation] = Field(default_factory=list)
