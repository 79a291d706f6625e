"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from music_streaming_player.domain.shared.messages import ErrorMessages


@dataclass(frozen=True)
class TrackId:
    """Catalog identifier of a track."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_TRACK_ID)

    def __str__(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)


# Serializes as plain string in JSON, stores as TrackId in the model.
TrackIdField = Annotated[
    TrackId,
    PlainValidator(lambda v: TrackId(v) if isinstance(v, str) else v),
    PlainSerializer(lambda v: v.value, return_type=str),
    WithJsonSchema({"type": "string", "minLength": 1}),
]


class ContextType(StrEnum):
    """Kind of collection a playback session draws from."""

    PLAYLIST = "playlist"
    ALBUM = "album"
    ARTIST = "artist"

    @property
    def is_curated(self) -> bool:
        """Albums and artist catalogs are published, playlists are user-edited."""
        return self in {ContextType.ALBUM, ContextType.ARTIST}


class RepeatMode(StrEnum):
    """Repeat settings for context playback."""

    NONE = "none"
    ONE = "one"  # Pin the current track
    ALL = "all"  # Wrap around the effective ordering

    @property
    def wraps(self) -> bool:
        return self == RepeatMode.ALL


class Direction(StrEnum):
    """Traversal direction through the effective ordering."""

    NEXT = "next"
    PREVIOUS = "previous"

    @property
    def step(self) -> int:
        return 1 if self == Direction.NEXT else -1


class QueueBoundary(Enum):
    """Terminal signals of a finite traversal. Not errors."""

    END_OF_QUEUE = "end_of_queue"
    START_OF_QUEUE = "start_of_queue"

    @classmethod
    def for_direction(cls, direction: Direction) -> QueueBoundary:
        if direction == Direction.NEXT:
            return cls.END_OF_QUEUE
        return cls.START_OF_QUEUE
