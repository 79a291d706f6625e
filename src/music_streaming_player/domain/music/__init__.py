"""
Music Bounded Context

Domain logic for tracks, playback contexts, and next/previous resolution.
"""

from music_streaming_player.domain.music.entities import (
    HistoryEntry,
    PlaybackContext,
    PlaybackState,
    ResolvedTrack,
    Track,
)
from music_streaming_player.domain.music.repository import (
    CatalogRepository,
    TrackHistoryRepository,
)
from music_streaming_player.domain.music.services import QueueResolver
from music_streaming_player.domain.music.value_objects import (
    ContextType,
    Direction,
    QueueBoundary,
    RepeatMode,
    TrackId,
)

__all__ = [
    # Entities
    "Track",
    "PlaybackContext",
    "PlaybackState",
    "ResolvedTrack",
    "HistoryEntry",
    # Value Objects
    "TrackId",
    "ContextType",
    "RepeatMode",
    "Direction",
    "QueueBoundary",
    # Repositories
    "CatalogRepository",
    "TrackHistoryRepository",
    # Services
    "QueueResolver",
]
