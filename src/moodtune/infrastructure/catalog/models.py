"""Pydantic models for parsing Spotify Web API payloads.

These are infrastructure-specific models; only the fields the journal uses
are declared, everything else in the payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from moodtune.domain.recommendations.entities import UNKNOWN_ARTIST, AudioFeatures, Track


class _SpotifyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyTokenResponse(_SpotifyModel):
    """Client-credentials grant response."""

    access_token: str = Field(..., min_length=1)
    token_type: str = "Bearer"
    expires_in: int = Field(..., ge=0)


class SpotifyArtist(_SpotifyModel):
    name: str


class SpotifyImage(_SpotifyModel):
    url: str
    width: int | None = None
    height: int | None = None


class SpotifyAlbum(_SpotifyModel):
    name: str = ""
    images: list[SpotifyImage] = Field(default_factory=list)


class SpotifyTrack(_SpotifyModel):
    id: str = Field(..., min_length=1)
    name: str
    artists: list[SpotifyArtist] = Field(default_factory=list)
    album: SpotifyAlbum | None = None
    preview_url: str | None = None

    def to_domain(self) -> Track:
        artist = self.artists[0].name if self.artists else UNKNOWN_ARTIST
        image = None
        if self.album is not None and self.album.images:
            image = self.album.images[0].url
        return Track(
            id=self.id,
            name=self.name,
            primary_artist=artist,
            album_art_url=image,
            preview_url=self.preview_url,
        )


class SpotifyTrackPage(_SpotifyModel):
    items: list[SpotifyTrack] = Field(default_factory=list)


class SpotifySearchResponse(_SpotifyModel):
    tracks: SpotifyTrackPage = Field(default_factory=SpotifyTrackPage)


class SpotifyRecommendationsResponse(_SpotifyModel):
    tracks: list[SpotifyTrack] = Field(default_factory=list)


class SpotifyAudioFeatures(_SpotifyModel):
    id: str = Field(..., min_length=1)
    energy: float = Field(..., ge=0.0, le=1.0)
    valence: float = Field(..., ge=0.0, le=1.0)

    def to_domain(self) -> AudioFeatures:
        return AudioFeatures(track_id=self.id, energy=self.energy, valence=self.valence)


class SpotifyAudioFeaturesResponse(_SpotifyModel):
    # Unknown ids come back as null entries.
    audio_features: list[SpotifyAudioFeatures | None] = Field(default_factory=list)


class SpotifyGenreSeedsResponse(_SpotifyModel):
    genres: list[str] = Field(default_factory=list)
