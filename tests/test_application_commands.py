"""
Unit Tests for Application Command Handlers

Tests for:
- AdvanceTrackHandler: resolution, boundaries, seed minting, reshuffle, hydration
- RecordPlayHandler: append-only writes, unknown tracks
- CatalogHandler: publish track, save and delete contexts
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pydantic
import pytest

from music_streaming_player.application.commands.advance_track import (
    AdvanceResult,
    AdvanceStatus,
    AdvanceTrackCommand,
    AdvanceTrackHandler,
)
from music_streaming_player.application.commands.publish_catalog import (
    CatalogHandler,
    DeleteContextCommand,
    DeleteStatus,
    PublishTrackCommand,
    SaveContextCommand,
)
from music_streaming_player.application.commands.record_play import (
    RecordPlayCommand,
    RecordPlayHandler,
)
from music_streaming_player.domain.music.shuffle import shuffle_order
from music_streaming_player.domain.music.value_objects import (
    ContextType,
    Direction,
    RepeatMode,
    TrackId,
)
from music_streaming_player.domain.shared.exceptions import (
    EmptyContextError,
    EntityNotFoundError,
    InvalidStateError,
    ValidationError,
)


def _advance(current: str, direction: Direction = Direction.NEXT, **kwargs) -> AdvanceTrackCommand:
    return AdvanceTrackCommand(
        user_id="u1",
        direction=direction,
        context_type=kwargs.pop("context_type", ContextType.PLAYLIST),
        context_id=kwargs.pop("context_id", "p1"),
        current_track_id=current,
        **kwargs,
    )


# =============================================================================
# AdvanceTrackHandler
# =============================================================================


class TestAdvanceTrackHandler:
    @pytest.fixture
    def handler(self, seeded_catalog):
        return AdvanceTrackHandler(catalog_repository=seeded_catalog)

    async def test_next_returns_hydrated_track(self, handler, sample_tracks):
        result = await handler.handle(_advance("B"))

        assert result.status == AdvanceStatus.TRACK
        assert result.has_track
        assert result.track == sample_tracks[2]
        assert result.position == 2

    async def test_previous(self, handler):
        result = await handler.handle(_advance("B", Direction.PREVIOUS))

        assert result.track.id == TrackId("A")

    async def test_end_of_queue(self, handler):
        result = await handler.handle(_advance("C"))

        assert result.status == AdvanceStatus.END_OF_QUEUE
        assert not result.has_track
        assert result.track is None

    async def test_start_of_queue(self, handler):
        result = await handler.handle(_advance("A", Direction.PREVIOUS))

        assert result.status == AdvanceStatus.START_OF_QUEUE

    async def test_repeat_all_wraps(self, handler):
        result = await handler.handle(_advance("C", repeat_mode=RepeatMode.ALL))

        assert result.track.id == TrackId("A")
        assert result.wrapped is True

    async def test_mints_seed_when_shuffling_without_one(self, handler):
        result = await handler.handle(_advance("A", is_shuffling=True))

        assert result.shuffle_seed is not None
        assert len(result.shuffle_seed) == 32

    async def test_keeps_client_seed(self, handler, sample_context):
        order = shuffle_order(sample_context, "client-seed")
        current = sample_context.track_at(order[0]).value

        result = await handler.handle(
            _advance(current, is_shuffling=True, shuffle_seed="client-seed")
        )

        assert result.shuffle_seed == "client-seed"
        assert result.position == order[1]

    async def test_reshuffle_on_wrap(self, handler, sample_context):
        order = shuffle_order(sample_context, "s")
        last = sample_context.track_at(order[-1]).value

        result = await handler.handle(
            _advance(
                last,
                is_shuffling=True,
                shuffle_seed="s",
                repeat_mode=RepeatMode.ALL,
                reshuffle_on_wrap=True,
            )
        )

        assert result.reshuffled is True
        assert result.shuffle_seed != "s"
        assert result.track.id != TrackId(last)

    async def test_unknown_context(self, handler):
        with pytest.raises(EntityNotFoundError, match="playlist/nope"):
            await handler.handle(_advance("A", context_id="nope"))

    async def test_track_not_in_context(self, handler):
        with pytest.raises(InvalidStateError):
            await handler.handle(_advance("Z"))

    async def test_empty_context(self, seeded_catalog, make_context):
        await seeded_catalog.save_context(make_context(context_id="empty"))
        handler = AdvanceTrackHandler(catalog_repository=seeded_catalog)

        with pytest.raises(EmptyContextError):
            await handler.handle(_advance("A", context_id="empty"))

    async def test_resolved_track_missing_from_catalog(self, sample_context):
        catalog = AsyncMock()
        catalog.get_context.return_value = sample_context
        catalog.get_track.return_value = None
        handler = AdvanceTrackHandler(catalog_repository=catalog)

        with pytest.raises(EntityNotFoundError, match="Track"):
            await handler.handle(_advance("A"))

        catalog.get_track.assert_awaited_once_with(TrackId("B"))

    async def test_does_not_touch_history(self, sample_context, sample_tracks):
        """Resolution only reads the catalog."""
        catalog = AsyncMock()
        catalog.get_context.return_value = sample_context
        catalog.get_track.return_value = sample_tracks[1]
        handler = AdvanceTrackHandler(catalog_repository=catalog)

        await handler.handle(_advance("A"))

        assert {c[0] for c in catalog.method_calls} == {"get_context", "get_track"}


class TestAdvanceResult:
    def test_boundary_factory(self):
        from music_streaming_player.domain.music.value_objects import QueueBoundary

        assert AdvanceResult.boundary(QueueBoundary.END_OF_QUEUE).status == AdvanceStatus.END_OF_QUEUE
        assert (
            AdvanceResult.boundary(QueueBoundary.START_OF_QUEUE).status
            == AdvanceStatus.START_OF_QUEUE
        )

    def test_command_rejects_bad_repeat_mode(self):
        with pytest.raises(pydantic.ValidationError):
            _advance("A", repeat_mode="sometimes")


# =============================================================================
# RecordPlayHandler
# =============================================================================


class TestRecordPlayHandler:
    @pytest.fixture
    def handler(self, seeded_catalog, history_repository):
        return RecordPlayHandler(
            history_repository=history_repository, catalog_repository=seeded_catalog
        )

    async def test_appends_entry(self, handler, history_repository):
        played_at = datetime(2024, 3, 1, 8, 30, tzinfo=UTC)

        entry = await handler.handle(
            RecordPlayCommand(
                user_id="u1",
                track_id="A",
                played_at=played_at,
                context_type=ContextType.PLAYLIST,
                context_id="p1",
            )
        )

        assert entry.played_at == played_at
        assert await history_repository.get_recent("u1") == [entry]

    async def test_defaults_played_at(self, handler):
        before = datetime.now(UTC)

        entry = await handler.handle(RecordPlayCommand(user_id="u1", track_id="A"))

        assert entry.played_at >= before

    async def test_unknown_track(self, handler, history_repository):
        with pytest.raises(EntityNotFoundError):
            await handler.handle(RecordPlayCommand(user_id="u1", track_id="Z"))

        assert await history_repository.get_recent("u1") == []

    def test_context_fields_must_pair(self):
        with pytest.raises(pydantic.ValidationError, match="together"):
            RecordPlayCommand(user_id="u1", track_id="A", context_type=ContextType.ALBUM)


# =============================================================================
# CatalogHandler
# =============================================================================


class TestCatalogHandler:
    @pytest.fixture
    def handler(self, catalog_repository):
        return CatalogHandler(catalog_repository=catalog_repository)

    async def test_publish_track(self, handler, catalog_repository):
        track = await handler.publish_track(
            PublishTrackCommand(track_id="t1", title="Song", duration_seconds=99, artist="X")
        )

        assert await catalog_repository.get_track(TrackId("t1")) == track

    async def test_save_context(self, handler, catalog_repository):
        await handler.publish_track(PublishTrackCommand(track_id="t1", title="S", duration_seconds=1))

        context = await handler.save_context(
            SaveContextCommand(context_type=ContextType.ALBUM, context_id="al1", track_ids=("t1",))
        )

        assert await catalog_repository.get_context(ContextType.ALBUM, "al1") == context

    async def test_save_context_with_unknown_track(self, handler):
        with pytest.raises(ValidationError):
            await handler.save_context(
                SaveContextCommand(
                    context_type=ContextType.PLAYLIST, context_id="p9", track_ids=("ghost",)
                )
            )

    async def test_delete_context(self, handler):
        await handler.save_context(
            SaveContextCommand(context_type=ContextType.PLAYLIST, context_id="p9")
        )

        command = DeleteContextCommand(context_type=ContextType.PLAYLIST, context_id="p9")

        assert await handler.delete_context(command) == DeleteStatus.DELETED
        assert await handler.delete_context(command) == DeleteStatus.NOT_FOUND
