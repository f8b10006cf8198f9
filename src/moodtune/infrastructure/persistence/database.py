"""SQLite database with per-operation connections and WAL mode."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiosqlite

from moodtune.domain.shared.constants import DatabaseTables, SQLPragmas
from moodtune.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.settings import DatabaseSettings

logger = logging.getLogger(__name__)

MEMORY_URI = "file:moodtune?mode=memory&cache=shared"


class Database:
    def __init__(self, url: str, settings: DatabaseSettings | None = None) -> None:
        if url.startswith("sqlite:///"):
            self._db_path = url[10:]  # Remove "sqlite:///"
        else:
            self._db_path = url

        self._initialized = False
        self._keepalive_conn: aiosqlite.Connection | None = None
        self._busy_timeout = settings.busy_timeout_ms if settings else 5000
        self._connection_timeout = settings.connection_timeout_s if settings else 10

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        if self._initialized:
            return

        if self._db_path != ":memory:":
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)

        # The shared in-memory DB disappears with its last connection.
        if self._db_path == ":memory:" and self._keepalive_conn is None:
            self._keepalive_conn = await self._connect()

        conn = self._keepalive_conn
        if conn is None:
            async with self.transaction() as conn2:
                await self._ensure_schema(conn2)
        else:
            await self._ensure_schema(conn)
            await conn.commit()

        self._initialized = True
        logger.info(LogTemplates.DATABASE_INITIALIZED, self._db_path)

    async def _ensure_schema(self, conn: aiosqlite.Connection) -> None:
        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {DatabaseTables.MOOD_ENTRIES} (
                id TEXT PRIMARY KEY,
                text TEXT NOT NULL,
                emoji TEXT NOT NULL,
                quick_mood TEXT NOT NULL,
                energy REAL NOT NULL,
                valence REAL NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        await conn.execute(
            f"CREATE INDEX IF NOT EXISTS idx_mood_entries_created "
            f"ON {DatabaseTables.MOOD_ENTRIES}(created_at)"
        )

        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {DatabaseTables.AI_REFLECTIONS} (
                id TEXT PRIMARY KEY,
                mood_entry_id TEXT NOT NULL,
                content TEXT NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(mood_entry_id) REFERENCES {DatabaseTables.MOOD_ENTRIES}(id)
                    ON DELETE CASCADE
            )
            """
        )
        await conn.execute(
            f"CREATE INDEX IF NOT EXISTS idx_ai_reflections_entry "
            f"ON {DatabaseTables.AI_REFLECTIONS}(mood_entry_id)"
        )

        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {DatabaseTables.TRACK_RECOMMENDATIONS} (
                id TEXT PRIMARY KEY,
                mood_entry_id TEXT NOT NULL,
                track_id TEXT NOT NULL,
                track_name TEXT NOT NULL,
                artist_name TEXT NOT NULL,
                album_image_url TEXT,
                preview_url TEXT,
                energy REAL NOT NULL,
                valence REAL NOT NULL,
                position INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(mood_entry_id) REFERENCES {DatabaseTables.MOOD_ENTRIES}(id)
                    ON DELETE CASCADE
            )
            """
        )
        await conn.execute(
            f"CREATE INDEX IF NOT EXISTS idx_track_recommendations_entry_pos "
            f"ON {DatabaseTables.TRACK_RECOMMENDATIONS}(mood_entry_id, position)"
        )

        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {DatabaseTables.SAVED_PLAYLISTS} (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                description TEXT,
                mood_entry_ids_json TEXT NOT NULL DEFAULT '[]',
                created_at TEXT NOT NULL
            )
            """
        )

    async def _connect(self) -> aiosqlite.Connection:
        # SQLite ":memory:" is per-connection, so use a shared URI to allow
        # multiple connections to see the same in-memory database.
        if self._db_path == ":memory:":
            db_path = MEMORY_URI
            uri = True
        else:
            db_path = self._db_path
            uri = False

        conn = await aiosqlite.connect(
            db_path,
            # detect_types=0 because our ISO 8601 timestamps use 'T' separator,
            # but SQLite's built-in converter expects space-separated format.
            detect_types=0,
            uri=uri,
            timeout=self._connection_timeout,
        )
        conn.row_factory = aiosqlite.Row

        await conn.execute(SQLPragmas.JOURNAL_MODE_WAL)
        await conn.execute(SQLPragmas.FOREIGN_KEYS_ON)
        await conn.execute(SQLPragmas.BUSY_TIMEOUT.format(timeout=self._busy_timeout))

        return conn

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        conn = await self._connect()
        try:
            yield conn
        except Exception:
            try:
                await conn.rollback()
            except aiosqlite.Error as e:
                logger.debug(LogTemplates.DATABASE_ROLLBACK_FAILED, e)
            raise
        finally:
            await conn.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Get a transaction context manager with auto-commit/rollback."""
        async with self.connection() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def execute(
        self, sql: str, parameters: tuple[Any, ...] | None = None
    ) -> aiosqlite.Cursor:
        """Execute a SQL statement.

        Note:
            This always runs in its own transaction. If you need multiple
            statements to commit/rollback together, use `transaction()` and the
            returned connection directly.
        """
        async with self.transaction() as conn:
            if parameters is not None:
                cursor = await conn.execute(sql, parameters)
            else:
                cursor = await conn.execute(sql)
            return cursor

    async def fetch_one(
        self, sql: str, parameters: tuple[Any, ...] | None = None
    ) -> dict[str, Any] | None:
        """Fetch a single row."""
        async with self.connection() as conn:
            if parameters is not None:
                cursor = await conn.execute(sql, parameters)
            else:
                cursor = await conn.execute(sql)
            row = await cursor.fetchone()
            return dict(row) if row else None

    async def fetch_all(
        self, sql: str, parameters: tuple[Any, ...] | None = None
    ) -> list[dict[str, Any]]:
        """Fetch all rows."""
        async with self.connection() as conn:
            if parameters is not None:
                cursor = await conn.execute(sql, parameters)
            else:
                cursor = await conn.execute(sql)
            rows = await cursor.fetchall()
            return [dict(row) for row in rows]

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds."""
        try:
            row = await self.fetch_one("SELECT 1 AS ok")
        except Exception as e:
            logger.warning(LogTemplates.DATABASE_PING_FAILED, e)
            return False
        return row is not None and row["ok"] == 1

    async def close(self) -> None:
        """Close the database manager.

        For file-based DBs this is mostly a no-op. For in-memory DBs we also
        close the keepalive connection.
        """
        if self._keepalive_conn is not None:
            try:
                await self._keepalive_conn.close()
            finally:
                self._keepalive_conn = None
        self._initialized = False
        logger.info(LogTemplates.DATABASE_CLOSED)
