"""Mood-driven track selection: structured query first, text search as fallback."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...domain.recommendations.entities import (
    MAX_RECOMMENDATIONS,
    AudioFeatures,
    MoodSignal,
    RecommendationResult,
    RecommendedTrack,
    Track,
)
from ...domain.recommendations.services import MAX_SEARCH_CALLS, RecommendationDomainService
from ...domain.shared.exceptions import UpstreamRequestError
from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

STRATEGY_QUERY = "query"
STRATEGY_SEARCH = "search"


class RecommendationSelector:
    """Turns a mood signal into at most ten unique catalog tracks.

    ``get_recommendations`` and ``get_audio_features`` never raise; an
    unreachable catalog degrades to an empty or neutral result.
    """

    def __init__(self, *, catalog_client: CatalogClient) -> None:
        self._catalog = catalog_client

    async def select_by_query(self, signal: MoodSignal) -> list[Track]:
        """Structured recommendation query seeded by genre.

        A failed request counts as "no results" so the search fallback can run.
        Authentication failures propagate.
        """
        energy = RecommendationDomainService.rescale(signal.energy)
        valence = RecommendationDomainService.rescale(signal.valence)
        seeds = RecommendationDomainService.seed_genres_for(energy, valence, signal.genre_hints)

        logger.debug(LogTemplates.SELECT_QUERY_ATTEMPT, seeds, energy, valence)
        try:
            return await self._catalog.get_recommendations(
                seed_genres=seeds,
                target_energy=energy,
                target_valence=valence,
                limit=MAX_RECOMMENDATIONS,
            )
        except UpstreamRequestError as e:
            logger.info(LogTemplates.SELECT_QUERY_FAILED, e)
            return []

    async def select_by_search(self, signal: MoodSignal) -> list[Track]:
        """Free-text search over mood phrases, deduplicated and capped at ten."""
        phrases = RecommendationDomainService.search_phrases_for(
            signal.energy, signal.valence, signal.genre_hints
        )
        per_phrase = RecommendationDomainService.per_phrase_limit(len(phrases))

        collected: list[Track] = []
        for phrase in phrases[:MAX_SEARCH_CALLS]:
            try:
                collected.extend(await self._catalog.search_tracks(phrase, per_phrase))
            except UpstreamRequestError as e:
                logger.warning(LogTemplates.SELECT_SEARCH_PHRASE_FAILED, phrase, e)
                continue
            if len(collected) >= MAX_RECOMMENDATIONS:
                break

        return RecommendationDomainService.deduplicate(collected, MAX_RECOMMENDATIONS)

    async def select_tracks(self, signal: MoodSignal) -> tuple[list[Track], str | None]:
        """Run the two-step pipeline and report which strategy produced the tracks."""
        tracks = await self.select_by_query(signal)
        if tracks:
            return RecommendationDomainService.deduplicate(tracks), STRATEGY_QUERY

        logger.info(LogTemplates.SELECT_FALLBACK)
        tracks = await self.select_by_search(signal)
        if tracks:
            return tracks, STRATEGY_SEARCH

        return [], None

    async def get_recommendations(self, signal: MoodSignal) -> RecommendationResult:
        """Select tracks for a mood and pair each with its audio features."""
        try:
            tracks, strategy = await self.select_tracks(signal)
        except Exception as e:
            logger.error(LogTemplates.SELECT_FAILED, e)
            return RecommendationResult.empty()

        if not tracks:
            logger.info(LogTemplates.SELECT_EMPTY)
            return RecommendationResult.empty()

        features = await self.get_audio_features([track.id for track in tracks])
        by_id = {feature.track_id: feature for feature in features if feature is not None}
        items = tuple(
            RecommendedTrack(
                track=track, features=by_id.get(track.id) or AudioFeatures.neutral(track.id)
            )
            for track in tracks
        )

        logger.info(LogTemplates.SELECT_COMPLETED, len(items), strategy)
        return RecommendationResult(items=items, strategy=strategy)

    async def get_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        """Audio features aligned with ``track_ids``; None marks a missing entry."""
        if not track_ids:
            return []

        try:
            return await self._catalog.get_audio_features(track_ids)
        except Exception as e:
            logger.warning(LogTemplates.AUDIO_FEATURES_FAILED, e)
            return [None] * len(track_ids)
