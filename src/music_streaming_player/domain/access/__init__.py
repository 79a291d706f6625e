"""
Access Bounded Context

Role variants and the capability table checked at the authorization boundary.
"""

from music_streaming_player.domain.access.roles import (
    CAPABILITIES,
    Capability,
    Principal,
    Role,
    authorize,
    capability_for_context_edit,
)

__all__ = [
    "CAPABILITIES",
    "Capability",
    "Principal",
    "Role",
    "authorize",
    "capability_for_context_edit",
]
