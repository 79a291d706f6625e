"""SQLite implementation of the catalog repository."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from music_streaming_player.domain.music.entities import PlaybackContext, Track
from music_streaming_player.domain.music.repository import CatalogRepository
from music_streaming_player.domain.music.value_objects import ContextType, TrackId
from music_streaming_player.domain.shared.constants import PlayerConstants
from music_streaming_player.domain.shared.datetime_utils import UtcDateTime
from music_streaming_player.domain.shared.exceptions import (
    CatalogUnavailableError,
    ValidationError,
)
from music_streaming_player.domain.shared.messages import ErrorMessages, LogTemplates
from music_streaming_player.infrastructure.persistence.database import store_errors

if TYPE_CHECKING:
    from ..database import Database

logger = logging.getLogger(__name__)

# Stay well below SQLite's host-parameter limit for IN (...) lookups.
_LOOKUP_CHUNK = 500


class SQLiteCatalogRepository(CatalogRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get_track(self, track_id: TrackId) -> Track | None:
        with store_errors(CatalogUnavailableError):
            row = await self._db.fetch_one(
                "SELECT * FROM tracks WHERE track_id = ?",
                (track_id.value,),
            )
        return self._row_to_track(row) if row else None

    async def get_tracks(self, track_ids: Sequence[TrackId]) -> dict[TrackId, Track]:
        unique_ids = list(dict.fromkeys(t.value for t in track_ids))
        found: dict[TrackId, Track] = {}
        with store_errors(CatalogUnavailableError):
            for start in range(0, len(unique_ids), _LOOKUP_CHUNK):
                chunk = unique_ids[start : start + _LOOKUP_CHUNK]
                placeholders = ", ".join("?" for _ in chunk)
                rows = await self._db.fetch_all(
                    f"SELECT * FROM tracks WHERE track_id IN ({placeholders})",  # noqa: S608
                    tuple(chunk),
                )
                for row in rows:
                    track = self._row_to_track(row)
                    found[track.id] = track
        return found

    async def save_track(self, track: Track) -> None:
        with store_errors(CatalogUnavailableError):
            await self._db.execute(
                """
                INSERT INTO tracks (track_id, title, duration_seconds, artist, album, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(track_id) DO UPDATE SET
                    title = excluded.title,
                    duration_seconds = excluded.duration_seconds,
                    artist = excluded.artist,
                    album = excluded.album,
                    updated_at = excluded.updated_at
                """,
                (
                    track.id.value,
                    track.title,
                    track.duration_seconds,
                    track.artist,
                    track.album,
                    UtcDateTime.now().iso,
                ),
            )
        logger.debug(LogTemplates.TRACK_SAVED, track.id)

    async def get_context(
        self, context_type: ContextType, context_id: str
    ) -> PlaybackContext | None:
        # One connection for both reads so the snapshot is consistent.
        with store_errors(CatalogUnavailableError):
            async with self._db.connection() as conn:
                cursor = await conn.execute(
                    """
                    SELECT 1 FROM playback_contexts
                    WHERE context_type = ? AND context_id = ?
                    """,
                    (context_type.value, context_id),
                )
                if await cursor.fetchone() is None:
                    return None

                cursor = await conn.execute(
                    """
                    SELECT track_id FROM context_tracks
                    WHERE context_type = ? AND context_id = ?
                    ORDER BY position ASC
                    """,
                    (context_type.value, context_id),
                )
                rows = await cursor.fetchall()

        return PlaybackContext(
            context_type=context_type,
            context_id=context_id,
            track_ids=tuple(TrackId(row["track_id"]) for row in rows),
        )

    async def save_context(self, context: PlaybackContext) -> None:
        if context.length > PlayerConstants.MAX_CONTEXT_TRACKS:
            raise ValidationError(
                ErrorMessages.CONTEXT_TOO_LARGE.format(
                    max_tracks=PlayerConstants.MAX_CONTEXT_TRACKS
                ),
                field="track_ids",
            )

        known = await self.get_tracks(context.track_ids)
        missing = sorted({t.value for t in context.track_ids if t not in known})
        if missing:
            raise ValidationError(
                ErrorMessages.UNKNOWN_CONTEXT_TRACKS.format(track_ids=", ".join(missing)),
                field="track_ids",
            )

        kind = context.context_type.value
        with store_errors(CatalogUnavailableError):
            async with self._db.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO playback_contexts (context_type, context_id, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(context_type, context_id) DO UPDATE SET
                        updated_at = excluded.updated_at
                    """,
                    (kind, context.context_id, UtcDateTime.now().iso),
                )
                await conn.execute(
                    "DELETE FROM context_tracks WHERE context_type = ? AND context_id = ?",
                    (kind, context.context_id),
                )
                await conn.executemany(
                    """
                    INSERT INTO context_tracks (context_type, context_id, position, track_id)
                    VALUES (?, ?, ?, ?)
                    """,
                    [
                        (kind, context.context_id, position, track_id.value)
                        for position, track_id in enumerate(context.track_ids)
                    ],
                )

        logger.info(LogTemplates.CONTEXT_SAVED, kind, context.context_id, context.length)

    async def delete_context(self, context_type: ContextType, context_id: str) -> bool:
        with store_errors(CatalogUnavailableError):
            row = await self._db.fetch_one(
                """
                SELECT COUNT(*) as count FROM playback_contexts
                WHERE context_type = ? AND context_id = ?
                """,
                (context_type.value, context_id),
            )
            if not row or row["count"] == 0:
                return False

            await self._db.execute(
                "DELETE FROM playback_contexts WHERE context_type = ? AND context_id = ?",
                (context_type.value, context_id),
            )

        logger.info(LogTemplates.CONTEXT_DELETED, context_type.value, context_id)
        return True

    def _row_to_track(self, row: dict[str, Any]) -> Track:
        return Track.model_validate(
            {
                "id": TrackId(row["track_id"]),
                "title": row["title"],
                "duration_seconds": row["duration_seconds"],
                "artist": row.get("artist"),
                "album": row.get("album"),
            }
        )
