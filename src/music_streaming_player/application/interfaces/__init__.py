"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from music_streaming_player.application.interfaces.identity_provider import IdentityProvider

__all__ = [
    "IdentityProvider",
]
