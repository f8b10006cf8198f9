"""
Catalog Client Interface

Port interface for the upstream music catalog.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.recommendations.entities import AudioFeatures, Track


class CatalogClient(ABC):
    """Abstract interface for music catalog access.

    Implementations should handle:
    - Client-credentials authentication with a cached token
    - Translating catalog JSON into domain Track/AudioFeatures
    - Raising UpstreamRequestError on non-2xx responses
    """

    @abstractmethod
    async def get_access_token(self) -> str:
        """Return a valid bearer token, fetching one if the cache is stale.

        Raises:
            AuthenticationError: If the credential exchange fails.
        """
        ...

    @abstractmethod
    async def get_recommendations(
        self,
        *,
        seed_genres: Sequence[str],
        target_energy: float,
        target_valence: float,
        limit: int,
    ) -> list[Track]:
        """Run a structured recommendation query.

        Args:
            seed_genres: Catalog genre seeds.
            target_energy: Target energy on the 0-1 scale.
            target_valence: Target valence on the 0-1 scale.
            limit: Maximum number of tracks.

        Returns:
            Tracks in catalog order, possibly empty.

        Raises:
            UpstreamRequestError: On a failed request.
        """
        ...

    @abstractmethod
    async def search_tracks(self, query: str, limit: int) -> list[Track]:
        """Run a free-text track search.

        Raises:
            UpstreamRequestError: On a failed request.
        """
        ...

    @abstractmethod
    async def get_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        """Fetch audio features for many tracks in one request.

        Returns:
            One entry per input id, in input order; None where the catalog
            has no features for that track.

        Raises:
            UpstreamRequestError: On a failed request.
        """
        ...

    @abstractmethod
    async def get_available_genres(self) -> list[str]:
        """Return the catalog's genre seeds, or a fallback list on failure."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
        ...
