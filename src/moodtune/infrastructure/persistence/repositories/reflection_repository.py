"""SQLite implementation of the AI reflection repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from moodtune.domain.journal.entities import AiReflection
from moodtune.domain.journal.repository import ReflectionRepository
from moodtune.domain.shared.datetime_utils import UtcDateTime

if TYPE_CHECKING:
    from ..database import Database


class SQLiteReflectionRepository(ReflectionRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def save(self, reflection: AiReflection) -> AiReflection:
        await self._db.execute(
            """
            INSERT OR REPLACE INTO ai_reflections (id, mood_entry_id, content, created_at)
            VALUES (?, ?, ?, ?)
            """,
            (
                reflection.id,
                reflection.mood_entry_id,
                reflection.content,
                UtcDateTime(reflection.created_at).iso,
            ),
        )
        return reflection

    async def get_by_mood_entry(self, mood_entry_id: str) -> AiReflection | None:
        # Latest wins if a reflection was ever regenerated.
        row = await self._db.fetch_one(
            """
            SELECT * FROM ai_reflections
            WHERE mood_entry_id = ?
            ORDER BY created_at DESC, rowid DESC
            LIMIT 1
            """,
            (mood_entry_id,),
        )
        return self._row_to_reflection(row) if row else None

    @staticmethod
    def _row_to_reflection(row: dict[str, Any]) -> AiReflection:
        return AiReflection(
            id=row["id"],
            mood_entry_id=row["mood_entry_id"],
            content=row["content"],
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
