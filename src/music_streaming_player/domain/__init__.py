# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, messages, and exceptions
- music/: Tracks, playback contexts, and queue resolution
- access/: Roles and capabilities
"""

from music_streaming_player.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
