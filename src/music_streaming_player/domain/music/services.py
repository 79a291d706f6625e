"""
Music Domain Services

Domain services containing business logic that doesn't naturally fit
within a single entity or value object.
"""

from __future__ import annotations

from music_streaming_player.domain.music.entities import (
    PlaybackContext,
    PlaybackState,
    ResolvedTrack,
)
from music_streaming_player.domain.music.shuffle import derive_seed, shuffle_order
from music_streaming_player.domain.music.value_objects import (
    Direction,
    QueueBoundary,
    RepeatMode,
)
from music_streaming_player.domain.shared.constants import PlayerConstants
from music_streaming_player.domain.shared.exceptions import EmptyContextError


class QueueResolver:
    """Resolves the next or previous track of a playback state.

    The resolver is a pure function of its input: it reads the context
    snapshot carried by the state, never touches history, and never mutates
    the state it is given. Callers persist whatever they need from the result.
    """

    @classmethod
    def resolve_next(cls, state: PlaybackState) -> ResolvedTrack | QueueBoundary:
        """Resolve the track after the current one.

        Returns:
            The resolved track, or ``QueueBoundary.END_OF_QUEUE`` when the
            effective ordering is exhausted and repeat mode does not wrap.

        Raises:
            EmptyContextError: If the context has no tracks.
            InvalidStateError: If the current track is not in the context.
        """
        return cls.resolve(state, Direction.NEXT)

    @classmethod
    def resolve_previous(cls, state: PlaybackState) -> ResolvedTrack | QueueBoundary:
        """Resolve the track before the current one.

        Returns:
            The resolved track, or ``QueueBoundary.START_OF_QUEUE`` when the
            current track is first in the effective ordering and repeat mode
            does not wrap.

        Raises:
            EmptyContextError: If the context has no tracks.
            InvalidStateError: If the current track is not in the context.
        """
        return cls.resolve(state, Direction.PREVIOUS)

    @classmethod
    def resolve(cls, state: PlaybackState, direction: Direction) -> ResolvedTrack | QueueBoundary:
        context = state.context
        if context.is_empty:
            raise EmptyContextError(context.context_type.value, context.context_id)

        index = context.locate(state.current_track_id, state.position)

        if state.repeat_mode == RepeatMode.ONE:
            return ResolvedTrack(
                track_id=state.current_track_id,
                position=index,
                shuffle_seed=state.shuffle_seed,
            )

        order = cls.effective_order(state)
        target = order.index(index) + direction.step
        if 0 <= target < len(order):
            return cls._resolved(context, order[target], state.shuffle_seed)

        if not state.repeat_mode.wraps:
            return QueueBoundary.for_direction(direction)

        if direction == Direction.NEXT and state.is_shuffling and state.reshuffle_on_wrap:
            return cls._reshuffled(state)

        wrapped_index = order[0] if direction == Direction.NEXT else order[-1]
        return cls._resolved(context, wrapped_index, state.shuffle_seed, wrapped=True)

    @classmethod
    def effective_order(cls, state: PlaybackState) -> tuple[int, ...]:
        """Return the traversal order of context indices for ``state``."""
        if state.is_shuffling and state.shuffle_seed is not None:
            return shuffle_order(state.context, state.shuffle_seed)
        return tuple(range(state.context.length))

    @classmethod
    def _reshuffled(cls, state: PlaybackState) -> ResolvedTrack:
        context = state.context
        seed = state.shuffle_seed or ""
        order: tuple[int, ...] = ()
        for _ in range(PlayerConstants.MAX_RESHUFFLE_ATTEMPTS):
            seed = derive_seed(seed)
            order = shuffle_order(context, seed)
            if context.track_at(order[0]) != state.current_track_id:
                break

        return ResolvedTrack(
            track_id=context.track_at(order[0]),
            position=order[0],
            shuffle_seed=seed,
            wrapped=True,
            reshuffled=True,
        )

    @staticmethod
    def _resolved(
        context: PlaybackContext,
        position: int,
        shuffle_seed: str | None,
        *,
        wrapped: bool = False,
    ) -> ResolvedTrack:
        return ResolvedTrack(
            track_id=context.track_at(position),
            position=position,
            shuffle_seed=shuffle_seed,
            wrapped=wrapped,
        )
