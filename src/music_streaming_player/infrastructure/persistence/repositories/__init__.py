"""SQLite repository implementations."""

from music_streaming_player.infrastructure.persistence.repositories.catalog_repository import (
    SQLiteCatalogRepository,
)
from music_streaming_player.infrastructure.persistence.repositories.history_repository import (
    SQLiteHistoryRepository,
)

__all__ = [
    "SQLiteCatalogRepository",
    "SQLiteHistoryRepository",
]
