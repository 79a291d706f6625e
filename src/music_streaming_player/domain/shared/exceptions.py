"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class InvalidStateError(DomainError):
    """Raised when a playback state does not describe a position in its context."""

    def __init__(self, track_id: str, message: str | None = None) -> None:
        msg = message or f"Track '{track_id}' is not part of the playback context"
        super().__init__(msg, code="INVALID_STATE")
        self.track_id = track_id


class EmptyContextError(DomainError):
    """Raised when a playback context has no tracks to traverse."""

    def __init__(self, context_type: str, context_id: str, message: str | None = None) -> None:
        msg = message or f"Playback context {context_type}/{context_id} has no tracks"
        super().__init__(msg, code="EMPTY_CONTEXT")
        self.context_type = context_type
        self.context_id = context_id


class AuthenticationError(DomainError):
    """Raised when a request carries no valid credentials."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="UNAUTHENTICATED")


class PermissionDeniedError(DomainError):
    """Raised when a role lacks the capability an operation requires."""

    def __init__(self, role: str, capability: str, message: str | None = None) -> None:
        msg = message or f"Role '{role}' is not allowed to perform '{capability}'"
        super().__init__(msg, code="PERMISSION_DENIED")
        self.role = role
        self.capability = capability


class StorageUnavailableError(DomainError):
    """Raised when a backing store cannot be reached."""

    def __init__(self, message: str = "Storage is unavailable", code: str | None = None) -> None:
        super().__init__(message, code=code or "STORAGE_UNAVAILABLE")


class CatalogUnavailableError(StorageUnavailableError):
    """Raised when the catalog backing store cannot be reached."""

    def __init__(self, message: str = "Catalog is unavailable") -> None:
        super().__init__(message, code="CATALOG_UNAVAILABLE")


class HistoryUnavailableError(StorageUnavailableError):
    """Raised when the play history store cannot be reached."""

    def __init__(self, message: str = "Play history is unavailable") -> None:
        super().__init__(message, code="HISTORY_UNAVAILABLE")
