"""SQLite implementation of the append-only play history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from music_streaming_player.domain.music.entities import HistoryEntry
from music_streaming_player.domain.music.repository import TrackHistoryRepository
from music_streaming_player.domain.music.value_objects import ContextType, TrackId
from music_streaming_player.domain.shared.datetime_utils import UtcDateTime
from music_streaming_player.domain.shared.exceptions import HistoryUnavailableError
from music_streaming_player.domain.shared.messages import LogTemplates
from music_streaming_player.infrastructure.persistence.database import store_errors

if TYPE_CHECKING:
    from ..database import Database

logger = logging.getLogger(__name__)


class SQLiteHistoryRepository(TrackHistoryRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def record_play(self, entry: HistoryEntry) -> None:
        with store_errors(HistoryUnavailableError):
            await self._db.execute(
                """
                INSERT INTO play_history (user_id, track_id, context_type, context_id, played_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    entry.user_id,
                    entry.track_id.value,
                    entry.context_type.value if entry.context_type else None,
                    entry.context_id,
                    UtcDateTime(entry.played_at).iso,
                ),
            )
        logger.debug(LogTemplates.HISTORY_RECORDED, entry.track_id, entry.user_id)

    async def get_recent(self, user_id: str, limit: int = 20) -> list[HistoryEntry]:
        with store_errors(HistoryUnavailableError):
            rows = await self._db.fetch_all(
                """
                SELECT * FROM play_history
                WHERE user_id = ?
                ORDER BY played_at DESC, id DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
        return [self._row_to_entry(row) for row in rows]

    async def get_play_count(self, user_id: str, track_id: TrackId) -> int:
        with store_errors(HistoryUnavailableError):
            row = await self._db.fetch_one(
                """
                SELECT COUNT(*) as count FROM play_history
                WHERE user_id = ? AND track_id = ?
                """,
                (user_id, track_id.value),
            )
        return row["count"] if row else 0

    async def get_most_played(self, user_id: str, limit: int = 10) -> list[tuple[TrackId, int]]:
        with store_errors(HistoryUnavailableError):
            rows = await self._db.fetch_all(
                """
                SELECT track_id, COUNT(*) as play_count
                FROM play_history
                WHERE user_id = ?
                GROUP BY track_id
                ORDER BY play_count DESC, MAX(played_at) DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
        return [(TrackId(row["track_id"]), row["play_count"]) for row in rows]

    def _row_to_entry(self, row: dict[str, Any]) -> HistoryEntry:
        context_type = row.get("context_type")
        return HistoryEntry(
            user_id=row["user_id"],
            track_id=TrackId(row["track_id"]),
            played_at=UtcDateTime.from_iso(row["played_at"]).dt,
            context_type=ContextType(context_type) if context_type else None,
            context_id=row.get("context_id"),
        )
