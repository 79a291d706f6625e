"""Queries for reading tracks and context snapshots from the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from music_streaming_player.domain.music.entities import PlaybackContext, Track
from music_streaming_player.domain.music.value_objects import ContextType, TrackIdField
from music_streaming_player.domain.shared.exceptions import EntityNotFoundError
from music_streaming_player.domain.shared.types import IdentifierStr, NonNegativeInt

if TYPE_CHECKING:
    from ...domain.music.repository import CatalogRepository


class GetContextQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    context_type: ContextType
    context_id: IdentifierStr


class GetTrackQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    track_id: TrackIdField


class ContextInfo(BaseModel):

    context: PlaybackContext
    tracks: list[Track] = Field(default_factory=list)
    total_duration: NonNegativeInt = 0

    @property
    def length(self) -> int:
        return self.context.length


class GetCatalogHandler:

    def __init__(self, *, catalog_repository: CatalogRepository) -> None:
        self._catalog = catalog_repository

    async def get_context(self, query: GetContextQuery) -> ContextInfo:
        """Return a context snapshot with its tracks in context order.

        Raises:
            EntityNotFoundError: If the context does not exist.
        """
        context = await self._catalog.get_context(query.context_type, query.context_id)
        if context is None:
            raise EntityNotFoundError(
                "PlaybackContext", f"{query.context_type.value}/{query.context_id}"
            )

        by_id = await self._catalog.get_tracks(context.track_ids)
        tracks = [by_id[track_id] for track_id in context.track_ids if track_id in by_id]

        return ContextInfo(
            context=context,
            tracks=tracks,
            total_duration=sum(t.duration_seconds for t in tracks),
        )

    async def get_track(self, query: GetTrackQuery) -> Track:
        """Raises EntityNotFoundError if the track does not exist."""
        track = await self._catalog.get_track(query.track_id)
        if track is None:
            raise EntityNotFoundError("Track", query.track_id.value)
        return track
