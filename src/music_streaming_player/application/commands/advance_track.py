"""
Advance Track Command

Command and handler for resolving the next or previous track of a
client-held playback state against a fresh catalog snapshot.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from music_streaming_player.domain.music.entities import PlaybackState, ResolvedTrack, Track
from music_streaming_player.domain.music.services import QueueResolver
from music_streaming_player.domain.music.shuffle import new_seed
from music_streaming_player.domain.music.value_objects import (
    ContextType,
    Direction,
    QueueBoundary,
    RepeatMode,
    TrackIdField,
)
from music_streaming_player.domain.shared.exceptions import EntityNotFoundError
from music_streaming_player.domain.shared.messages import LogTemplates
from music_streaming_player.domain.shared.types import (
    IdentifierStr,
    NonEmptyStr,
    QueuePositionInt,
    ShuffleSeedStr,
)

if TYPE_CHECKING:
    from ...domain.music.repository import CatalogRepository

logger = logging.getLogger(__name__)


class AdvanceStatus(Enum):
    """Status codes for advance results."""

    TRACK = "track"
    END_OF_QUEUE = "end_of_queue"
    START_OF_QUEUE = "start_of_queue"


class AdvanceTrackCommand(BaseModel):
    """Command to move a player forward or backward through its context.

    Mirrors the client's player state; nothing here is stored server-side.
    """

    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    direction: Direction
    context_type: ContextType
    context_id: IdentifierStr
    current_track_id: TrackIdField
    is_shuffling: bool = False
    repeat_mode: RepeatMode = RepeatMode.NONE
    shuffle_seed: ShuffleSeedStr | None = None
    position: QueuePositionInt | None = None
    reshuffle_on_wrap: bool = False


class AdvanceResult(BaseModel):
    """Result of an advance track command."""

    status: AdvanceStatus
    track: Track | None = None
    position: QueuePositionInt | None = None
    shuffle_seed: ShuffleSeedStr | None = None
    wrapped: bool = False
    reshuffled: bool = False

    @property
    def has_track(self) -> bool:
        return self.status == AdvanceStatus.TRACK

    @classmethod
    def resolved(cls, track: Track, resolution: ResolvedTrack) -> AdvanceResult:
        return cls(
            status=AdvanceStatus.TRACK,
            track=track,
            position=resolution.position,
            shuffle_seed=resolution.shuffle_seed,
            wrapped=resolution.wrapped,
            reshuffled=resolution.reshuffled,
        )

    @classmethod
    def boundary(cls, boundary: QueueBoundary) -> AdvanceResult:
        if boundary == QueueBoundary.END_OF_QUEUE:
            return cls(status=AdvanceStatus.END_OF_QUEUE)
        return cls(status=AdvanceStatus.START_OF_QUEUE)


class AdvanceTrackHandler:
    """Handler for AdvanceTrackCommand.

    Fetches the context snapshot, delegates ordering to the resolver, and
    hydrates the resolved identifier into a full track. The fetch and the
    resolution are not atomic: a context edited between two calls is simply
    read fresh on the next one.
    """

    def __init__(
        self,
        *,
        catalog_repository: CatalogRepository,
        queue_resolver: type[QueueResolver] = QueueResolver,
    ) -> None:
        self._catalog = catalog_repository
        self._resolver = queue_resolver

    async def handle(self, command: AdvanceTrackCommand) -> AdvanceResult:
        """Execute the advance track command.

        Raises:
            EntityNotFoundError: If the context or the resolved track is unknown.
            EmptyContextError: If the context has no tracks.
            InvalidStateError: If the current track is not in the context.
        """
        context = await self._catalog.get_context(command.context_type, command.context_id)
        if context is None:
            raise EntityNotFoundError(
                "PlaybackContext", f"{command.context_type.value}/{command.context_id}"
            )

        shuffle_seed = command.shuffle_seed
        if command.is_shuffling and shuffle_seed is None:
            shuffle_seed = new_seed()
            logger.info(
                LogTemplates.SHUFFLE_SEED_MINTED,
                command.user_id,
                command.context_type.value,
                command.context_id,
            )

        state = PlaybackState(
            current_track_id=command.current_track_id,
            context=context,
            is_shuffling=command.is_shuffling,
            repeat_mode=command.repeat_mode,
            shuffle_seed=shuffle_seed,
            position=command.position,
            reshuffle_on_wrap=command.reshuffle_on_wrap,
        )

        outcome = self._resolver.resolve(state, command.direction)

        if isinstance(outcome, QueueBoundary):
            logger.debug(
                LogTemplates.QUEUE_BOUNDARY,
                outcome.value,
                command.user_id,
                command.context_type.value,
                command.context_id,
            )
            return AdvanceResult.boundary(outcome)

        if outcome.reshuffled:
            logger.info(
                LogTemplates.QUEUE_RESHUFFLED, command.context_type.value, command.context_id
            )

        track = await self._catalog.get_track(outcome.track_id)
        if track is None:
            raise EntityNotFoundError("Track", outcome.track_id.value)

        logger.debug(
            LogTemplates.QUEUE_RESOLVED,
            command.direction.value,
            command.user_id,
            command.context_type.value,
            command.context_id,
            track.display_title,
        )
        return AdvanceResult.resolved(track, outcome)
