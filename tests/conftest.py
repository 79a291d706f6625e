import pytest
import pytest_asyncio

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from music_streaming_player.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def catalog_repository(in_memory_database):
    """Create a catalog repository with in-memory database."""
    from music_streaming_player.infrastructure.persistence.repositories.catalog_repository import (
        SQLiteCatalogRepository,
    )

    return SQLiteCatalogRepository(in_memory_database)


@pytest_asyncio.fixture
async def history_repository(in_memory_database):
    """Create a history repository with in-memory database."""
    from music_streaming_player.infrastructure.persistence.repositories.history_repository import (
        SQLiteHistoryRepository,
    )

    return SQLiteHistoryRepository(in_memory_database)


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


def make_track(track_id: str, duration: int = 180, **kwargs):
    from music_streaming_player.domain.music.entities import Track
    from music_streaming_player.domain.music.value_objects import TrackId

    return Track(
        id=TrackId(track_id),
        title=kwargs.pop("title", f"Title {track_id}"),
        duration_seconds=duration,
        **kwargs,
    )


def make_context(*track_ids: str, context_type=None, context_id: str = "p1"):
    from music_streaming_player.domain.music.entities import PlaybackContext
    from music_streaming_player.domain.music.value_objects import ContextType, TrackId

    return PlaybackContext(
        context_type=context_type or ContextType.PLAYLIST,
        context_id=context_id,
        track_ids=tuple(TrackId(t) for t in track_ids),
    )


@pytest.fixture(name="make_track")
def make_track_fixture():
    """Factory for catalog tracks."""
    return make_track


@pytest.fixture(name="make_context")
def make_context_fixture():
    """Factory for playback contexts (playlist p1 by default)."""
    return make_context


@pytest.fixture
def sample_track():
    """Create a sample track for testing."""
    return make_track("test-track-123", title="Test Track", artist="Test Artist", album="Test Album")


@pytest.fixture
def sample_tracks():
    """Three catalog tracks A, B, C."""
    return [make_track("A", 120), make_track("B", 200), make_track("C", 95)]


@pytest.fixture
def sample_context():
    """Playlist p1 = [A, B, C]."""
    return make_context("A", "B", "C")


@pytest_asyncio.fixture
async def seeded_catalog(catalog_repository, sample_tracks, sample_context):
    """Catalog repository holding tracks A, B, C and playlist p1."""
    for track in sample_tracks:
        await catalog_repository.save_track(track)
    await catalog_repository.save_context(sample_context)
    return catalog_repository
