"""SQLite implementation of the mood entry repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from moodtune.domain.journal.entities import MoodEntry
from moodtune.domain.journal.repository import MoodEntryRepository
from moodtune.domain.shared.datetime_utils import UtcDateTime

if TYPE_CHECKING:
    from ..database import Database


class SQLiteMoodEntryRepository(MoodEntryRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def save(self, entry: MoodEntry) -> MoodEntry:
        await self._db.execute(
            """
            INSERT OR REPLACE INTO mood_entries (
                id, text, emoji, quick_mood, energy, valence, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry.id,
                entry.text,
                entry.emoji,
                entry.quick_mood,
                entry.energy,
                entry.valence,
                UtcDateTime(entry.created_at).iso,
            ),
        )
        return entry

    async def get(self, entry_id: str) -> MoodEntry | None:
        row = await self._db.fetch_one("SELECT * FROM mood_entries WHERE id = ?", (entry_id,))
        return self._row_to_entry(row) if row else None

    async def list_all(self) -> list[MoodEntry]:
        rows = await self._db.fetch_all(
            "SELECT * FROM mood_entries ORDER BY created_at DESC, rowid DESC"
        )
        return [self._row_to_entry(row) for row in rows]

    async def list_recent(self, limit: int = 10) -> list[MoodEntry]:
        rows = await self._db.fetch_all(
            """
            SELECT * FROM mood_entries
            ORDER BY created_at DESC, rowid DESC
            LIMIT ?
            """,
            (limit,),
        )
        return [self._row_to_entry(row) for row in rows]

    @staticmethod
    def _row_to_entry(row: dict[str, Any]) -> MoodEntry:
        return MoodEntry(
            id=row["id"],
            text=row["text"],
            emoji=row["emoji"],
            quick_mood=row["quick_mood"],
            energy=row["energy"],
            valence=row["valence"],
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
