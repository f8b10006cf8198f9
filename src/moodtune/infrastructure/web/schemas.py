"""Request and response bodies for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from moodtune.domain.journal.entities import (
    AiReflection,
    MoodEntry,
    MoodEntryWithReflection,
    SavedPlaylist,
    TrackRecommendation,
)
from moodtune.domain.shared.types import EntityIdStr, MoodScale, NonEmptyStr


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ────────────────────────────────────────────────────────


class MoodEntryCreate(ApiModel):
    text: NonEmptyStr
    emoji: NonEmptyStr
    quick_mood: NonEmptyStr
    energy: MoodScale
    valence: MoodScale


class PlaylistCreate(ApiModel):
    name: NonEmptyStr
    description: str | None = None
    mood_entry_ids: list[EntityIdStr] = Field(default_factory=list)


# ── Responses ───────────────────────────────────────────────────────


class MoodEntryResponse(ApiModel):
    id: str
    text: str
    emoji: str
    quick_mood: str
    energy: float
    valence: float
    created_at: datetime

    @classmethod
    def from_domain(cls, entry: MoodEntry) -> MoodEntryResponse:
        return cls(
            id=entry.id,
            text=entry.text,
            emoji=entry.emoji,
            quick_mood=entry.quick_mood,
            energy=entry.energy,
            valence=entry.valence,
            created_at=entry.created_at,
        )


class ReflectionResponse(ApiModel):
    id: str
    mood_entry_id: str
    content: str
    created_at: datetime

    @classmethod
    def from_domain(cls, reflection: AiReflection) -> ReflectionResponse:
        return cls(
            id=reflection.id,
            mood_entry_id=reflection.mood_entry_id,
            content=reflection.content,
            created_at=reflection.created_at,
        )


class RecommendationResponse(ApiModel):
    id: str
    mood_entry_id: str
    spotify_track_id: str
    track_name: str
    artist_name: str
    album_image_url: str | None = None
    preview_url: str | None = None
    energy: float
    valence: float
    created_at: datetime

    @classmethod
    def from_domain(cls, rec: TrackRecommendation) -> RecommendationResponse:
        return cls(
            id=rec.id,
            mood_entry_id=rec.mood_entry_id,
            spotify_track_id=rec.track_id,
            track_name=rec.track_name,
            artist_name=rec.artist_name,
            album_image_url=rec.album_image_url,
            preview_url=rec.preview_url,
            energy=rec.energy,
            valence=rec.valence,
            created_at=rec.created_at,
        )


class MoodEntryWithReflectionResponse(ApiModel):
    mood_entry: MoodEntryResponse
    ai_reflection: ReflectionResponse | None = None
    recommendations: list[RecommendationResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, aggregate: MoodEntryWithReflection) -> MoodEntryWithReflectionResponse:
        reflection = aggregate.reflection
        return cls(
            mood_entry=MoodEntryResponse.from_domain(aggregate.mood_entry),
            ai_reflection=ReflectionResponse.from_domain(reflection) if reflection else None,
            recommendations=[
                RecommendationResponse.from_domain(rec) for rec in aggregate.recommendations
            ],
        )


class PlaylistResponse(ApiModel):
    id: str
    name: str
    description: str | None = None
    mood_entry_ids: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, playlist: SavedPlaylist) -> PlaylistResponse:
        return cls(
            id=playlist.id,
            name=playlist.name,
            description=playlist.description,
            mood_entry_ids=list(playlist.mood_entry_ids),
            created_at=playlist.created_at,
        )


class AffirmationResponse(ApiModel):
    affirmation: str


class GenresResponse(ApiModel):
    genres: list[str]


class HealthResponse(ApiModel):
    status: str
    timestamp: datetime
    database: str


class ErrorResponse(ApiModel):
    message: str
