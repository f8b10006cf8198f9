"""Spotify Web API catalog client with a cached client-credentials token."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any, Final, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from moodtune.application.interfaces.catalog_client import CatalogClient
from moodtune.config.settings import CatalogSettings
from moodtune.domain.recommendations.entities import AccessToken, AudioFeatures, Track
from moodtune.domain.shared.constants import CatalogEndpoints
from moodtune.domain.shared.exceptions import AuthenticationError, UpstreamRequestError
from moodtune.domain.shared.messages import ErrorMessages, LogTemplates
from moodtune.infrastructure.catalog.models import (
    SpotifyAudioFeaturesResponse,
    SpotifyGenreSeedsResponse,
    SpotifyRecommendationsResponse,
    SpotifySearchResponse,
    SpotifyTokenResponse,
    SpotifyTrack,
)

logger = logging.getLogger(__name__)

# Tokens are treated as expired this many seconds before the server says so.
TOKEN_EXPIRY_MARGIN_S: Final[float] = 60.0

FALLBACK_GENRES: Final[tuple[str, ...]] = (
    "acoustic",
    "afrobeat",
    "alt-rock",
    "alternative",
    "ambient",
    "blues",
    "bossanova",
    "brazil",
    "breakbeat",
    "british",
    "chill",
    "classical",
    "country",
    "dance",
    "electronic",
    "folk",
    "funk",
    "hip-hop",
    "house",
    "indie",
    "jazz",
    "latin",
    "pop",
    "punk",
    "r-n-b",
    "reggae",
    "rock",
    "soul",
    "world-music",
)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class SpotifyCatalogClient(CatalogClient):
    """Catalog client backed by one ``httpx.AsyncClient``.

    The token cache is a plain attribute. Concurrent first callers may each
    run the token exchange; the result is the same either way.
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings or CatalogSettings()
        self._clock = clock
        self._token: AccessToken | None = None
        self._http = httpx.AsyncClient(
            timeout=self._settings.request_timeout_s,
            transport=transport,
        )

    @property
    def cached_token(self) -> AccessToken | None:
        return self._token

    async def get_access_token(self) -> str:
        now = self._clock()
        if self._token is not None and self._token.is_valid(now):
            logger.debug(LogTemplates.CATALOG_TOKEN_CACHED, self._token.expires_at - now)
            return self._token.value

        if not self._settings.has_credentials:
            raise AuthenticationError(
                "missing credentials", message=ErrorMessages.CATALOG_CREDENTIALS_MISSING
            )

        try:
            response = await self._http.post(
                f"{self._settings.accounts_url}{CatalogEndpoints.TOKEN}",
                data={"grant_type": "client_credentials"},
                auth=(
                    self._settings.client_id.get_secret_value(),
                    self._settings.client_secret.get_secret_value(),
                ),
            )
        except httpx.HTTPError as e:
            logger.error(LogTemplates.CATALOG_AUTH_FAILED, e)
            raise AuthenticationError(str(e)) from e

        if not response.is_success:
            logger.error(LogTemplates.CATALOG_AUTH_FAILED, response.reason_phrase)
            raise AuthenticationError(response.reason_phrase)

        try:
            payload = SpotifyTokenResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise AuthenticationError(ErrorMessages.EMPTY_API_RESPONSE) from e

        self._token = AccessToken(
            value=payload.access_token,
            expires_at=now + payload.expires_in - TOKEN_EXPIRY_MARGIN_S,
        )
        logger.info(LogTemplates.CATALOG_TOKEN_FETCHED, payload.expires_in)
        return self._token.value

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> Any:
        token = await self.get_access_token()
        url = f"{self._settings.api_url}{path}"

        logger.debug(LogTemplates.CATALOG_REQUEST, path, params or {})
        try:
            response = await self._http.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            logger.warning(LogTemplates.CATALOG_REQUEST_FAILED, e)
            raise UpstreamRequestError(path, status_text=str(e)) from e

        logger.debug(LogTemplates.CATALOG_RESPONSE, response.status_code, response.reason_phrase)
        if not response.is_success:
            error = UpstreamRequestError(path, response.status_code, response.reason_phrase)
            logger.warning(LogTemplates.CATALOG_REQUEST_FAILED, error)
            raise error

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamRequestError(path, response.status_code, "invalid JSON") from e

    @staticmethod
    def _parse(model: type[_ModelT], path: str, data: Any) -> _ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise UpstreamRequestError(path, status_text="unexpected payload") from e

    @staticmethod
    def _to_tracks(path: str, items: Sequence[SpotifyTrack]) -> list[Track]:
        tracks: list[Track] = []
        for item in items:
            try:
                tracks.append(item.to_domain())
            except PydanticValidationError as e:
                logger.warning(LogTemplates.CATALOG_TRACK_SKIPPED, item.id, path, e)
        return tracks

    async def get_recommendations(
        self,
        *,
        seed_genres: Sequence[str],
        target_energy: float,
        target_valence: float,
        limit: int,
    ) -> list[Track]:
        path = CatalogEndpoints.RECOMMENDATIONS
        data = await self._request(
            path,
            {
                "seed_genres": ",".join(seed_genres),
                "target_energy": target_energy,
                "target_valence": target_valence,
                "limit": limit,
                "market": self._settings.market,
            },
        )
        payload = self._parse(SpotifyRecommendationsResponse, path, data)
        return self._to_tracks(path, payload.tracks)

    async def search_tracks(self, query: str, limit: int) -> list[Track]:
        path = CatalogEndpoints.SEARCH
        data = await self._request(
            path,
            {
                "q": query,
                "type": "track",
                "limit": limit,
                "market": self._settings.market,
            },
        )
        payload = self._parse(SpotifySearchResponse, path, data)
        return self._to_tracks(path, payload.tracks.items)

    async def get_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        if not track_ids:
            return []

        path = CatalogEndpoints.AUDIO_FEATURES
        data = await self._request(path, {"ids": ",".join(track_ids)})
        payload = self._parse(SpotifyAudioFeaturesResponse, path, data)

        by_id = {
            features.id: features.to_domain()
            for features in payload.audio_features
            if features is not None
        }
        return [by_id.get(track_id) for track_id in track_ids]

    async def get_available_genres(self) -> list[str]:
        path = CatalogEndpoints.GENRE_SEEDS
        try:
            data = await self._request(path)
            payload = self._parse(SpotifyGenreSeedsResponse, path, data)
        except Exception as e:
            logger.warning(LogTemplates.CATALOG_GENRES_FALLBACK, e)
            return list(FALLBACK_GENRES)

        return payload.genres

    async def aclose(self) -> None:
        await self._http.aclose()
        logger.debug(LogTemplates.CATALOG_CLIENT_CLOSED)
