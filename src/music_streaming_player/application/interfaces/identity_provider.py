"""Port interface for turning request credentials into a principal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.access.roles import Principal


class IdentityProvider(ABC):
    """Interface for the identity layer that gates every endpoint."""

    @abstractmethod
    async def authenticate(self, token: str | None) -> "Principal":
        """Resolve a bearer token to a principal.

        Raises:
            AuthenticationError: If the token is missing or unknown.
        """
        ...
