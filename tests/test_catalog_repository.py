"""
Integration Tests for SQLiteCatalogRepository

Tests for:
- Track upsert and lookup (single and batch)
- Context snapshots: save, replace, read back in order, delete
- Validation of unknown tracks and oversized contexts
- Storage failures surfaced as CatalogUnavailableError
"""

from unittest.mock import patch

import aiosqlite
import pytest

from music_streaming_player.domain.music.value_objects import ContextType, TrackId
from music_streaming_player.domain.shared.exceptions import (
    CatalogUnavailableError,
    ValidationError,
)


class TestTracks:
    async def test_save_and_get(self, catalog_repository, sample_track):
        await catalog_repository.save_track(sample_track)

        loaded = await catalog_repository.get_track(sample_track.id)

        assert loaded == sample_track

    async def test_get_missing_returns_none(self, catalog_repository):
        assert await catalog_repository.get_track(TrackId("missing")) is None

    async def test_save_is_upsert(self, catalog_repository, make_track):
        await catalog_repository.save_track(make_track("A", 100, title="Old"))
        await catalog_repository.save_track(make_track("A", 150, title="New"))

        loaded = await catalog_repository.get_track(TrackId("A"))

        assert loaded.title == "New"
        assert loaded.duration_seconds == 150

    async def test_optional_fields_round_trip_as_none(self, catalog_repository, make_track):
        await catalog_repository.save_track(make_track("A"))

        loaded = await catalog_repository.get_track(TrackId("A"))

        assert loaded.artist is None
        assert loaded.album is None

    async def test_get_tracks_returns_known_only(self, seeded_catalog):
        found = await seeded_catalog.get_tracks([TrackId("A"), TrackId("C"), TrackId("Z")])

        assert set(found) == {TrackId("A"), TrackId("C")}

    async def test_get_tracks_handles_duplicates_and_empty(self, seeded_catalog):
        assert await seeded_catalog.get_tracks([]) == {}

        found = await seeded_catalog.get_tracks([TrackId("A"), TrackId("A")])
        assert list(found) == [TrackId("A")]

    async def test_get_tracks_across_chunks(self, catalog_repository, make_track):
        ids = [f"t{i}" for i in range(1200)]
        for track_id in ids:
            await catalog_repository.save_track(make_track(track_id, 1))

        found = await catalog_repository.get_tracks([TrackId(t) for t in ids])

        assert len(found) == 1200


class TestContexts:
    async def test_save_and_get_preserves_order(self, seeded_catalog, sample_context):
        loaded = await seeded_catalog.get_context(ContextType.PLAYLIST, "p1")

        assert loaded == sample_context

    async def test_get_missing_returns_none(self, catalog_repository):
        assert await catalog_repository.get_context(ContextType.ALBUM, "nope") is None

    async def test_same_id_different_type_is_distinct(self, seeded_catalog):
        assert await seeded_catalog.get_context(ContextType.ALBUM, "p1") is None

    async def test_save_replaces_track_list(self, seeded_catalog, make_context):
        await seeded_catalog.save_context(make_context("C", "A"))

        loaded = await seeded_catalog.get_context(ContextType.PLAYLIST, "p1")

        assert loaded.track_ids == (TrackId("C"), TrackId("A"))

    async def test_duplicates_are_kept(self, seeded_catalog, make_context):
        await seeded_catalog.save_context(make_context("A", "B", "A"))

        loaded = await seeded_catalog.get_context(ContextType.PLAYLIST, "p1")

        assert loaded.track_ids == (TrackId("A"), TrackId("B"), TrackId("A"))

    async def test_empty_context_is_stored(self, catalog_repository, make_context):
        await catalog_repository.save_context(make_context(context_id="empty"))

        loaded = await catalog_repository.get_context(ContextType.PLAYLIST, "empty")

        assert loaded is not None
        assert loaded.is_empty

    async def test_unknown_tracks_rejected(self, seeded_catalog, make_context):
        with pytest.raises(ValidationError, match="unknown tracks: X, Y") as exc_info:
            await seeded_catalog.save_context(make_context("A", "Y", "X"))

        assert exc_info.value.field == "track_ids"
        # Existing snapshot untouched.
        loaded = await seeded_catalog.get_context(ContextType.PLAYLIST, "p1")
        assert loaded.length == 3

    async def test_oversized_context_rejected(self, catalog_repository, make_context):
        with patch(
            "music_streaming_player.infrastructure.persistence.repositories."
            "catalog_repository.PlayerConstants.MAX_CONTEXT_TRACKS",
            2,
        ):
            with pytest.raises(ValidationError, match="more than 2 tracks"):
                await catalog_repository.save_context(make_context("A", "B", "C"))

    async def test_delete(self, seeded_catalog):
        assert await seeded_catalog.delete_context(ContextType.PLAYLIST, "p1") is True
        assert await seeded_catalog.get_context(ContextType.PLAYLIST, "p1") is None

    async def test_delete_cascades_rows(self, seeded_catalog, in_memory_database):
        await seeded_catalog.delete_context(ContextType.PLAYLIST, "p1")

        row = await in_memory_database.fetch_one("SELECT COUNT(*) AS n FROM context_tracks")

        assert row["n"] == 0

    async def test_delete_missing(self, catalog_repository):
        assert await catalog_repository.delete_context(ContextType.PLAYLIST, "nope") is False


class TestStorageFailures:
    async def test_read_failure_is_catalog_unavailable(self, catalog_repository):
        with patch.object(
            catalog_repository._db, "fetch_one", side_effect=aiosqlite.OperationalError("locked")
        ):
            with pytest.raises(CatalogUnavailableError, match="locked") as exc_info:
                await catalog_repository.get_track(TrackId("A"))

        assert exc_info.value.code == "CATALOG_UNAVAILABLE"

    async def test_write_failure_is_catalog_unavailable(self, catalog_repository, sample_track):
        with patch.object(
            catalog_repository._db, "execute", side_effect=aiosqlite.OperationalError("disk I/O")
        ):
            with pytest.raises(CatalogUnavailableError):
                await catalog_repository.save_track(sample_track)
