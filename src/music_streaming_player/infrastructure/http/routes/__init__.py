"""HTTP routers, one per resource."""

from music_streaming_player.infrastructure.http.routes.catalog import router as catalog_router
from music_streaming_player.infrastructure.http.routes.health import router as health_router
from music_streaming_player.infrastructure.http.routes.player import router as player_router

__all__ = ["catalog_router", "health_router", "player_router"]
