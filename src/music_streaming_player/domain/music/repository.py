"""
Music Domain Repository Interfaces

Abstract base classes defining the contracts for data persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from music_streaming_player.domain.music.entities import HistoryEntry, PlaybackContext, Track
from music_streaming_player.domain.music.value_objects import ContextType, TrackId


class CatalogRepository(ABC):
    """Abstract repository for catalog tracks and playback contexts.

    Every context returned is a consistent snapshot at read time. No guarantee
    is made that two reads return the same snapshot.
    """

    @abstractmethod
    async def get_track(self, track_id: TrackId) -> Track | None:
        """Retrieve a track by ID.

        Args:
            track_id: The track identifier.

        Returns:
            The track if found, None otherwise.
        """
        ...

    @abstractmethod
    async def get_tracks(self, track_ids: Sequence[TrackId]) -> dict[TrackId, Track]:
        """Retrieve several tracks at once.

        Args:
            track_ids: Identifiers to look up. Duplicates are allowed.

        Returns:
            Mapping of the identifiers that exist to their tracks.
        """
        ...

    @abstractmethod
    async def save_track(self, track: Track) -> None:
        """Insert or replace a track.

        Args:
            track: The track to save.
        """
        ...

    @abstractmethod
    async def get_context(
        self, context_type: ContextType, context_id: str
    ) -> PlaybackContext | None:
        """Retrieve a snapshot of a playback context.

        Args:
            context_type: Playlist, album, or artist.
            context_id: The context identifier.

        Returns:
            The context snapshot if found, None otherwise.
        """
        ...

    @abstractmethod
    async def save_context(self, context: PlaybackContext) -> None:
        """Replace the ordered track list of a context.

        Args:
            context: The new snapshot.

        Raises:
            ValidationError: If the context references unknown tracks.
        """
        ...

    @abstractmethod
    async def delete_context(self, context_type: ContextType, context_id: str) -> bool:
        """Delete a context.

        Returns:
            True if the context was deleted, False if it didn't exist.
        """
        ...


class TrackHistoryRepository(ABC):
    """Abstract repository for the append-only play log.

    Entries are write-once: this repository offers no update or delete.
    """

    @abstractmethod
    async def record_play(self, entry: HistoryEntry) -> None:
        """Append a play to the log.

        Args:
            entry: The play to record.
        """
        ...

    @abstractmethod
    async def get_recent(self, user_id: str, limit: int = 20) -> list[HistoryEntry]:
        """Get recently played entries for a user.

        Args:
            user_id: The user identifier.
            limit: Maximum number of entries to return.

        Returns:
            Entries, most recent first.
        """
        ...

    @abstractmethod
    async def get_play_count(self, user_id: str, track_id: TrackId) -> int:
        """Get the number of times a user played a track."""
        ...

    @abstractmethod
    async def get_most_played(self, user_id: str, limit: int = 10) -> list[tuple[TrackId, int]]:
        """Get a user's most played tracks.

        Returns:
            List of (track_id, play_count) tuples, sorted by play count descending.
        """
        ...
