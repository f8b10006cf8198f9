"""SQLite implementation of the saved playlist repository."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from moodtune.domain.journal.entities import SavedPlaylist
from moodtune.domain.journal.repository import PlaylistRepository
from moodtune.domain.shared.datetime_utils import UtcDateTime

if TYPE_CHECKING:
    from ..database import Database


class SQLitePlaylistRepository(PlaylistRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def save(self, playlist: SavedPlaylist) -> SavedPlaylist:
        await self._db.execute(
            """
            INSERT OR REPLACE INTO saved_playlists (
                id, name, description, mood_entry_ids_json, created_at
            ) VALUES (?, ?, ?, ?, ?)
            """,
            (
                playlist.id,
                playlist.name,
                playlist.description,
                json.dumps(list(playlist.mood_entry_ids)),
                UtcDateTime(playlist.created_at).iso,
            ),
        )
        return playlist

    async def list_all(self) -> list[SavedPlaylist]:
        rows = await self._db.fetch_all(
            "SELECT * FROM saved_playlists ORDER BY created_at DESC, rowid DESC"
        )
        return [self._row_to_playlist(row) for row in rows]

    @staticmethod
    def _row_to_playlist(row: dict[str, Any]) -> SavedPlaylist:
        return SavedPlaylist(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            mood_entry_ids=tuple(json.loads(row["mood_entry_ids_json"] or "[]")),
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
