"""Queries for a user's recent plays and play counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from music_streaming_player.domain.music.entities import HistoryEntry
from music_streaming_player.domain.music.value_objects import TrackIdField
from music_streaming_player.domain.shared.constants import PlayerConstants
from music_streaming_player.domain.shared.types import HistoryLimit, NonEmptyStr, NonNegativeInt

if TYPE_CHECKING:
    from ...domain.music.repository import TrackHistoryRepository


class GetHistoryQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    limit: HistoryLimit = PlayerConstants.DEFAULT_HISTORY_LIMIT


class GetMostPlayedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    limit: HistoryLimit = PlayerConstants.DEFAULT_HISTORY_LIMIT


class GetPlayCountQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    track_id: TrackIdField


class HistoryInfo(BaseModel):

    user_id: NonEmptyStr
    entries: list[HistoryEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries


class PlayCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    track_id: TrackIdField
    play_count: NonNegativeInt


class MostPlayedInfo(BaseModel):

    user_id: NonEmptyStr
    tracks: list[PlayCount] = Field(default_factory=list)


class GetHistoryHandler:

    def __init__(
        self,
        *,
        history_repository: TrackHistoryRepository,
        max_limit: int = PlayerConstants.MAX_HISTORY_LIMIT,
    ) -> None:
        self._history_repo = history_repository
        self._max_limit = max_limit

    async def handle(self, query: GetHistoryQuery) -> HistoryInfo:
        limit = min(query.limit, self._max_limit)
        entries = await self._history_repo.get_recent(query.user_id, limit=limit)
        return HistoryInfo(user_id=query.user_id, entries=entries)

    async def most_played(self, query: GetMostPlayedQuery) -> MostPlayedInfo:
        """Return the user's most played tracks, highest count first."""
        limit = min(query.limit, self._max_limit)
        rows = await self._history_repo.get_most_played(query.user_id, limit=limit)
        return MostPlayedInfo(
            user_id=query.user_id,
            tracks=[PlayCount(track_id=track_id, play_count=count) for track_id, count in rows],
        )

    async def play_count(self, query: GetPlayCountQuery) -> PlayCount:
        count = await self._history_repo.get_play_count(query.user_id, query.track_id)
        return PlayCount(track_id=query.track_id, play_count=count)
