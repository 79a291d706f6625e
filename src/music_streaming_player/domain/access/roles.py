"""Roles, capabilities, and the table that connects them."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from music_streaming_player.domain.music.value_objects import ContextType
from music_streaming_player.domain.shared.exceptions import PermissionDeniedError
from music_streaming_player.domain.shared.types import NonEmptyStr


class Role(StrEnum):
    """Closed set of account roles."""

    USER = "user"
    ARTIST = "artist"
    ADMIN = "admin"


class Capability(StrEnum):
    """Operations gated at the authorization boundary."""

    PLAYBACK = "playback"
    HISTORY_WRITE = "history_write"
    HISTORY_READ = "history_read"
    PLAYLIST_EDIT = "playlist_edit"
    CATALOG_READ = "catalog_read"
    CATALOG_PUBLISH = "catalog_publish"


_LISTENER = frozenset(
    {
        Capability.PLAYBACK,
        Capability.HISTORY_WRITE,
        Capability.HISTORY_READ,
        Capability.PLAYLIST_EDIT,
        Capability.CATALOG_READ,
    }
)

CAPABILITIES: MappingProxyType[Role, frozenset[Capability]] = MappingProxyType(
    {
        Role.USER: _LISTENER,
        Role.ARTIST: _LISTENER | {Capability.CATALOG_PUBLISH},
        Role.ADMIN: frozenset(Capability),
    }
)


class Principal(BaseModel):
    """Authenticated caller."""

    model_config = ConfigDict(frozen=True)

    user_id: NonEmptyStr
    role: Role

    def can(self, capability: Capability) -> bool:
        return capability in CAPABILITIES[self.role]


def authorize(principal: Principal, capability: Capability) -> Principal:
    """Return ``principal`` if its role grants ``capability``.

    Raises:
        PermissionDeniedError: If the role lacks the capability.
    """
    if not principal.can(capability):
        raise PermissionDeniedError(principal.role.value, capability.value)
    return principal


def capability_for_context_edit(context_type: ContextType) -> Capability:
    """Capability needed to replace the track list of a context."""
    if context_type.is_curated:
        return Capability.CATALOG_PUBLISH
    return Capability.PLAYLIST_EDIT
