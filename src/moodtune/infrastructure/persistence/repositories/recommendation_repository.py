"""SQLite implementation of the track recommendation repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from moodtune.domain.journal.entities import TrackRecommendation
from moodtune.domain.journal.repository import RecommendationRepository
from moodtune.domain.shared.datetime_utils import UtcDateTime

if TYPE_CHECKING:
    from ..database import Database


class SQLiteRecommendationRepository(RecommendationRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def save_many(
        self, recommendations: list[TrackRecommendation]
    ) -> list[TrackRecommendation]:
        if not recommendations:
            return []

        # All rows commit together.
        async with self._db.transaction() as conn:
            await conn.executemany(
                """
                INSERT OR REPLACE INTO track_recommendations (
                    id, mood_entry_id, track_id, track_name, artist_name,
                    album_image_url, preview_url, energy, valence, position, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        rec.id,
                        rec.mood_entry_id,
                        rec.track_id,
                        rec.track_name,
                        rec.artist_name,
                        rec.album_image_url,
                        rec.preview_url,
                        rec.energy,
                        rec.valence,
                        position,
                        UtcDateTime(rec.created_at).iso,
                    )
                    for position, rec in enumerate(recommendations)
                ],
            )
        return list(recommendations)

    async def list_by_mood_entry(self, mood_entry_id: str) -> list[TrackRecommendation]:
        rows = await self._db.fetch_all(
            """
            SELECT * FROM track_recommendations
            WHERE mood_entry_id = ?
            ORDER BY position ASC
            """,
            (mood_entry_id,),
        )
        return [self._row_to_recommendation(row) for row in rows]

    @staticmethod
    def _row_to_recommendation(row: dict[str, Any]) -> TrackRecommendation:
        return TrackRecommendation(
            id=row["id"],
            mood_entry_id=row["mood_entry_id"],
            track_id=row["track_id"],
            track_name=row["track_name"],
            artist_name=row["artist_name"],
            album_image_url=row["album_image_url"],
            preview_url=row["preview_url"],
            energy=row["energy"],
            valence=row["valence"],
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
