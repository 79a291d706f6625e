"""
Unit Tests for Music Domain Entities and Value Objects

Tests for:
- TrackId validation and equality
- ContextType, RepeatMode, Direction, QueueBoundary enums
- Track formatting helpers
- PlaybackContext lookups and locate()
- PlaybackState and HistoryEntry validation
"""

from datetime import UTC, datetime, timedelta, timezone

import pydantic
import pytest

from music_streaming_player.domain.music.entities import (
    HistoryEntry,
    PlaybackContext,
    PlaybackState,
    Track,
)
from music_streaming_player.domain.music.value_objects import (
    ContextType,
    Direction,
    QueueBoundary,
    RepeatMode,
    TrackId,
)
from music_streaming_player.domain.shared.exceptions import InvalidStateError

# =============================================================================
# Value Objects
# =============================================================================


class TestTrackId:
    def test_valid(self):
        track_id = TrackId("abc")
        assert track_id.value == "abc"
        assert str(track_id) == "abc"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_rejected(self, value):
        with pytest.raises(ValueError, match="cannot be empty"):
            TrackId(value)

    def test_equality_and_hash(self):
        assert TrackId("a") == TrackId("a")
        assert len({TrackId("a"), TrackId("a"), TrackId("b")}) == 2


class TestEnums:
    def test_curated_context_types(self):
        assert ContextType.ALBUM.is_curated
        assert ContextType.ARTIST.is_curated
        assert not ContextType.PLAYLIST.is_curated

    def test_only_repeat_all_wraps(self):
        assert [m for m in RepeatMode if m.wraps] == [RepeatMode.ALL]

    def test_direction_step(self):
        assert Direction.NEXT.step == 1
        assert Direction.PREVIOUS.step == -1

    def test_boundary_for_direction(self):
        assert QueueBoundary.for_direction(Direction.NEXT) is QueueBoundary.END_OF_QUEUE
        assert QueueBoundary.for_direction(Direction.PREVIOUS) is QueueBoundary.START_OF_QUEUE


# =============================================================================
# Track
# =============================================================================


class TestTrack:
    def test_accepts_string_id(self):
        track = Track(id="abc", title="Song", duration_seconds=10)
        assert track.id == TrackId("abc")

    def test_serializes_id_as_string(self, sample_track):
        assert sample_track.model_dump()["id"] == "test-track-123"

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (65, "1:05"), (3600, "1:00:00"), (3725, "1:02:05")],
    )
    def test_duration_formatted(self, make_track, seconds, expected):
        assert make_track("x", seconds).duration_formatted == expected

    def test_display_title_with_artist(self, sample_track):
        assert sample_track.display_title == "Test Artist - Test Track [3:00]"

    def test_display_title_without_artist(self, make_track):
        assert make_track("x", 61, title="Solo").display_title == "Solo [1:01]"

    def test_negative_duration_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Track(id="x", title="t", duration_seconds=-1)

    def test_empty_title_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Track(id="x", title="", duration_seconds=1)

    def test_frozen(self, sample_track):
        with pytest.raises(pydantic.ValidationError):
            sample_track.title = "Other"  # type: ignore[misc]


# =============================================================================
# PlaybackContext
# =============================================================================


class TestPlaybackContext:
    def test_basic_properties(self, sample_context):
        assert sample_context.length == 3
        assert not sample_context.is_empty
        assert sample_context.track_at(2) == TrackId("C")

    def test_empty(self, make_context):
        assert make_context().is_empty

    def test_invalid_identifier_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PlaybackContext(context_type=ContextType.PLAYLIST, context_id="has space")

    def test_locate_first_occurrence(self, make_context):
        context = make_context("A", "B", "A")
        assert context.locate(TrackId("A")) == 0

    def test_locate_with_position(self, make_context):
        context = make_context("A", "B", "A")
        assert context.locate(TrackId("A"), position=2) == 2

    def test_locate_missing_track(self, sample_context):
        with pytest.raises(InvalidStateError, match="not part of the playback context"):
            sample_context.locate(TrackId("Z"))

    def test_locate_position_out_of_range(self, sample_context):
        with pytest.raises(InvalidStateError, match="outside a context of 3 tracks"):
            sample_context.locate(TrackId("A"), position=3)

    def test_locate_position_mismatch(self, sample_context):
        with pytest.raises(InvalidStateError, match="holds 'B', not 'A'"):
            sample_context.locate(TrackId("A"), position=1)


# =============================================================================
# PlaybackState / HistoryEntry
# =============================================================================


class TestPlaybackState:
    def test_defaults(self, sample_context):
        state = PlaybackState(current_track_id="A", context=sample_context)

        assert state.is_shuffling is False
        assert state.repeat_mode == RepeatMode.NONE
        assert state.shuffle_seed is None
        assert state.reshuffle_on_wrap is False

    def test_shuffle_without_seed_rejected(self, sample_context):
        with pytest.raises(pydantic.ValidationError, match="shuffle seed is required"):
            PlaybackState(current_track_id="A", context=sample_context, is_shuffling=True)

    def test_negative_position_rejected(self, sample_context):
        with pytest.raises(pydantic.ValidationError):
            PlaybackState(current_track_id="A", context=sample_context, position=-1)


class TestHistoryEntry:
    def test_defaults_played_at_to_now_utc(self):
        before = datetime.now(UTC)
        entry = HistoryEntry(user_id="u1", track_id="A")

        assert entry.played_at.tzinfo is not None
        assert entry.played_at >= before

    def test_normalises_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        entry = HistoryEntry(
            user_id="u1",
            track_id="A",
            played_at=datetime(2024, 5, 1, 12, 0, tzinfo=plus_two),
        )

        assert entry.played_at == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)
        assert entry.played_at.utcoffset() == timedelta(0)

    def test_parses_iso_z(self):
        entry = HistoryEntry(user_id="u1", track_id="A", played_at="2024-05-01T10:00:00Z")
        assert entry.played_at == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    def test_naive_datetime_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            HistoryEntry(user_id="u1", track_id="A", played_at=datetime(2024, 5, 1))

    @pytest.mark.parametrize("played_at", [1700000000, 1.5, [1], {"a": 1}, None])
    def test_non_datetime_rejected(self, played_at):
        with pytest.raises(pydantic.ValidationError, match="ISO 8601"):
            HistoryEntry(user_id="u1", track_id="A", played_at=played_at)
