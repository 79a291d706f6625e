"""HTTP boundary: FastAPI app, routers, and error translation."""

from music_streaming_player.infrastructure.http.app import create_app

__all__ = ["create_app"]
