"""
Shared Domain Kernel

Contains value objects and exceptions shared across all bounded contexts.
"""

from music_streaming_player.domain.shared.exceptions import (
    AuthenticationError,
    CatalogUnavailableError,
    DomainError,
    EmptyContextError,
    EntityNotFoundError,
    HistoryUnavailableError,
    InvalidStateError,
    PermissionDeniedError,
    StorageUnavailableError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "InvalidStateError",
    "EmptyContextError",
    "AuthenticationError",
    "PermissionDeniedError",
    "StorageUnavailableError",
    "CatalogUnavailableError",
    "HistoryUnavailableError",
]
