"""Commands and handlers for writing tracks and contexts to the catalog."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from music_streaming_player.domain.music.entities import PlaybackContext, Track
from music_streaming_player.domain.music.value_objects import ContextType, TrackIdField
from music_streaming_player.domain.shared.types import (
    DurationSeconds,
    IdentifierStr,
    NonEmptyStr,
    TrackTitleStr,
)

if TYPE_CHECKING:
    from ...domain.music.repository import CatalogRepository


class PublishTrackCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    track_id: TrackIdField
    title: TrackTitleStr
    duration_seconds: DurationSeconds
    artist: NonEmptyStr | None = None
    album: NonEmptyStr | None = None

    def to_track(self) -> Track:
        return Track(
            id=self.track_id,
            title=self.title,
            duration_seconds=self.duration_seconds,
            artist=self.artist,
            album=self.album,
        )


class SaveContextCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    context_type: ContextType
    context_id: IdentifierStr
    track_ids: tuple[TrackIdField, ...] = ()

    def to_context(self) -> PlaybackContext:
        return PlaybackContext(
            context_type=self.context_type,
            context_id=self.context_id,
            track_ids=self.track_ids,
        )


class DeleteContextCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    context_type: ContextType
    context_id: IdentifierStr


class DeleteStatus(Enum):
    """Status codes for context deletion."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"


class CatalogHandler:
    """Handles catalog writes. Authorization happens before these are called."""

    def __init__(self, *, catalog_repository: CatalogRepository) -> None:
        self._catalog = catalog_repository

    async def publish_track(self, command: PublishTrackCommand) -> Track:
        track = command.to_track()
        await self._catalog.save_track(track)
        return track

    async def save_context(self, command: SaveContextCommand) -> PlaybackContext:
        context = command.to_context()
        await self._catalog.save_context(context)
        return context

    async def delete_context(self, command: DeleteContextCommand) -> DeleteStatus:
        deleted = await self._catalog.delete_context(command.context_type, command.context_id)
        return DeleteStatus.DELETED if deleted else DeleteStatus.NOT_FOUND
