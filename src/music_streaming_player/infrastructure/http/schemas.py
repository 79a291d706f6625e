"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from music_streaming_player.application.commands.advance_track import (
    AdvanceResult,
    AdvanceTrackCommand,
)
from music_streaming_player.application.queries.get_catalog import ContextInfo
from music_streaming_player.application.queries.get_history import PlayCount
from music_streaming_player.domain.music.entities import HistoryEntry, Track
from music_streaming_player.domain.music.value_objects import ContextType, Direction, RepeatMode
from music_streaming_player.domain.shared.types import (
    DurationSeconds,
    IdentifierStr,
    NonEmptyStr,
    QueuePositionInt,
    ShuffleSeedStr,
    TrackTitleStr,
    UtcDatetimeField,
)


class PlayerStateRequest(BaseModel):
    """Body of ``POST /player/next`` and ``POST /player/previous``."""

    model_config = ConfigDict(extra="forbid")

    current_track_id: NonEmptyStr
    context_type: ContextType
    context_id: IdentifierStr
    is_shuffling: bool = False
    repeat_mode: RepeatMode = RepeatMode.NONE
    shuffle_seed: ShuffleSeedStr | None = None
    position: QueuePositionInt | None = None
    reshuffle_on_wrap: bool = False

    def to_command(self, user_id: str, direction: Direction) -> AdvanceTrackCommand:
        return AdvanceTrackCommand(
            user_id=user_id,
            direction=direction,
            context_type=self.context_type,
            context_id=self.context_id,
            current_track_id=self.current_track_id,
            is_shuffling=self.is_shuffling,
            repeat_mode=self.repeat_mode,
            shuffle_seed=self.shuffle_seed,
            position=self.position,
            reshuffle_on_wrap=self.reshuffle_on_wrap,
        )


class RecordPlayRequest(BaseModel):
    """Body of ``POST /player/history``."""

    model_config = ConfigDict(extra="forbid")

    track_id: NonEmptyStr
    played_at: UtcDatetimeField | None = None
    context_type: ContextType | None = None
    context_id: IdentifierStr | None = None


class TrackPayload(BaseModel):
    """Body of ``PUT /catalog/tracks/{track_id}``."""

    model_config = ConfigDict(extra="forbid")

    title: TrackTitleStr
    duration_seconds: DurationSeconds
    artist: NonEmptyStr | None = None
    album: NonEmptyStr | None = None


class ContextPayload(BaseModel):
    """Body of ``PUT /catalog/contexts/{context_type}/{context_id}``."""

    model_config = ConfigDict(extra="forbid")

    track_ids: list[NonEmptyStr] = Field(default_factory=list)


class TrackResponse(BaseModel):
    id: str
    title: str
    duration_seconds: int
    artist: str | None = None
    album: str | None = None

    @classmethod
    def from_track(cls, track: Track) -> TrackResponse:
        return cls(
            id=track.id.value,
            title=track.title,
            duration_seconds=track.duration_seconds,
            artist=track.artist,
            album=track.album,
        )


class AdvanceResponse(BaseModel):
    track: TrackResponse
    position: int
    shuffle_seed: str | None = None
    wrapped: bool = False
    reshuffled: bool = False

    @classmethod
    def from_result(cls, result: AdvanceResult) -> AdvanceResponse:
        if result.track is None or result.position is None:
            raise ValueError(f"No track to render for status {result.status.value}")
        return cls(
            track=TrackResponse.from_track(result.track),
            position=result.position,
            shuffle_seed=result.shuffle_seed,
            wrapped=result.wrapped,
            reshuffled=result.reshuffled,
        )


class HistoryEntryResponse(BaseModel):
    track_id: str
    played_at: datetime
    context_type: ContextType | None = None
    context_id: str | None = None

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> HistoryEntryResponse:
        return cls(
            track_id=entry.track_id.value,
            played_at=entry.played_at,
            context_type=entry.context_type,
            context_id=entry.context_id,
        )


class HistoryResponse(BaseModel):
    user_id: str
    entries: list[HistoryEntryResponse] = Field(default_factory=list)


class PlayCountResponse(BaseModel):
    track_id: str
    play_count: int

    @classmethod
    def from_count(cls, count: PlayCount) -> PlayCountResponse:
        return cls(track_id=count.track_id.value, play_count=count.play_count)


class MostPlayedResponse(BaseModel):
    user_id: str
    tracks: list[PlayCountResponse] = Field(default_factory=list)


class ContextResponse(BaseModel):
    context_type: ContextType
    context_id: str
    track_ids: list[str] = Field(default_factory=list)
    tracks: list[TrackResponse] = Field(default_factory=list)
    total_duration: int = 0

    @classmethod
    def from_info(cls, info: ContextInfo) -> ContextResponse:
        return cls(
            context_type=info.context.context_type,
            context_id=info.context.context_id,
            track_ids=[t.value for t in info.context.track_ids],
            tracks=[TrackResponse.from_track(t) for t in info.tracks],
            total_duration=info.total_duration,
        )


class ErrorBody(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorBody
