"""Core domain entities for the music bounded context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from music_streaming_player.domain.music.value_objects import (
    ContextType,
    RepeatMode,
    TrackId,
    TrackIdField,
)
from music_streaming_player.domain.shared.datetime_utils import utcnow
from music_streaming_player.domain.shared.exceptions import InvalidStateError
from music_streaming_player.domain.shared.messages import ErrorMessages
from music_streaming_player.domain.shared.types import (
    DurationSeconds,
    IdentifierStr,
    NonEmptyStr,
    QueuePositionInt,
    ShuffleSeedStr,
    TrackTitleStr,
    UtcDatetimeField,
)


class Track(BaseModel):
    """Immutable catalog entry for a playable track."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: TrackIdField
    title: TrackTitleStr
    duration_seconds: DurationSeconds
    artist: NonEmptyStr | None = None
    album: NonEmptyStr | None = None

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def display_title(self) -> str:
        if self.artist:
            return f"{self.artist} - {self.title} [{self.duration_formatted}]"
        return f"{self.title} [{self.duration_formatted}]"


class PlaybackContext(BaseModel):
    """Ordered snapshot of track references a playback session draws from.

    A context is frozen for the duration of a session: edits to the underlying
    playlist produce a new snapshot and never reorder one already handed out.
    """

    model_config = ConfigDict(frozen=True)

    context_type: ContextType
    context_id: IdentifierStr
    track_ids: tuple[TrackIdField, ...] = ()

    @property
    def length(self) -> int:
        return len(self.track_ids)

    @property
    def is_empty(self) -> bool:
        return not self.track_ids

    def track_at(self, position: int) -> TrackId:
        return self.track_ids[position]

    def locate(self, track_id: TrackId, position: int | None = None) -> int:
        """Return the index of ``track_id`` in this context.

        ``position`` pins a specific occurrence when the track appears more
        than once; without it the first occurrence is used.

        Raises:
            InvalidStateError: If the track is not at ``position`` or not in the context.
        """
        if position is not None:
            if not 0 <= position < self.length:
                raise InvalidStateError(
                    track_id.value,
                    ErrorMessages.POSITION_OUT_OF_RANGE.format(
                        position=position, length=self.length
                    ),
                )
            actual = self.track_ids[position]
            if actual != track_id:
                raise InvalidStateError(
                    track_id.value,
                    ErrorMessages.POSITION_TRACK_MISMATCH.format(
                        position=position, actual=actual.value, expected=track_id.value
                    ),
                )
            return position

        try:
            return self.track_ids.index(track_id)
        except ValueError:
            raise InvalidStateError(track_id.value) from None


class PlaybackState(BaseModel):
    """Client-held player state. Never persisted by the resolver."""

    model_config = ConfigDict(frozen=True)

    current_track_id: TrackIdField
    context: PlaybackContext
    is_shuffling: bool = False
    repeat_mode: RepeatMode = RepeatMode.NONE
    shuffle_seed: ShuffleSeedStr | None = None
    position: QueuePositionInt | None = None
    reshuffle_on_wrap: bool = False

    @model_validator(mode="after")
    def _require_seed_when_shuffling(self) -> PlaybackState:
        if self.is_shuffling and self.shuffle_seed is None:
            raise ValueError(ErrorMessages.SHUFFLE_SEED_REQUIRED)
        return self


class ResolvedTrack(BaseModel):
    """Outcome of a successful next/previous resolution."""

    model_config = ConfigDict(frozen=True)

    track_id: TrackIdField
    position: QueuePositionInt
    shuffle_seed: ShuffleSeedStr | None = None
    wrapped: bool = False
    reshuffled: bool = False


class HistoryEntry(BaseModel):
    """Append-only record that a user played a track."""

    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    track_id: TrackIdField
    played_at: UtcDatetimeField = Field(default_factory=utcnow)
    context_type: ContextType | None = None
    context_id: IdentifierStr | None = None
