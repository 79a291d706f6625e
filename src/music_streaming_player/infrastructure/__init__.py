"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (SQLite repositories)
- HTTP (FastAPI app, routers, error translation)
- Auth (static bearer-token identity provider)
"""

from music_streaming_player.infrastructure.http.app import create_app
from music_streaming_player.infrastructure.persistence.database import Database

__all__ = [
    "create_app",
    "Database",
]
