"""Command and handler for appending a play to the history log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, model_validator

from music_streaming_player.domain.music.entities import HistoryEntry
from music_streaming_player.domain.music.value_objects import ContextType, TrackIdField
from music_streaming_player.domain.shared.datetime_utils import utcnow
from music_streaming_player.domain.shared.exceptions import EntityNotFoundError
from music_streaming_player.domain.shared.types import (
    IdentifierStr,
    NonEmptyStr,
    UtcDatetimeField,
)

if TYPE_CHECKING:
    from ...domain.music.repository import CatalogRepository, TrackHistoryRepository


class RecordPlayCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    track_id: TrackIdField
    played_at: UtcDatetimeField | None = None
    context_type: ContextType | None = None
    context_id: IdentifierStr | None = None

    @model_validator(mode="after")
    def _context_fields_together(self) -> RecordPlayCommand:
        if (self.context_type is None) != (self.context_id is None):
            raise ValueError("context_type and context_id must be given together")
        return self


class RecordPlayHandler:
    """Appends plays to the history log.

    Independent of next/previous resolution: the client decides when a track
    counts as played, so skipping quickly through a queue leaves no entries.
    """

    def __init__(
        self,
        *,
        history_repository: TrackHistoryRepository,
        catalog_repository: CatalogRepository,
    ) -> None:
        self._history_repo = history_repository
        self._catalog = catalog_repository

    async def handle(self, command: RecordPlayCommand) -> HistoryEntry:
        if await self._catalog.get_track(command.track_id) is None:
            raise EntityNotFoundError("Track", command.track_id.value)

        entry = HistoryEntry(
            user_id=command.user_id,
            track_id=command.track_id,
            played_at=command.played_at or utcnow(),
            context_type=command.context_type,
            context_id=command.context_id,
        )
        await self._history_repo.record_play(entry)
        return entry
