"""FastAPI dependencies: container lookup, authentication, authorization."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, Request

from music_streaming_player.config.container import Container
from music_streaming_player.domain.access.roles import Capability, Principal, authorize
from music_streaming_player.domain.shared.constants import HttpHeaders
from music_streaming_player.domain.shared.exceptions import PermissionDeniedError
from music_streaming_player.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


def get_container(request: Request) -> Container:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)
    return container


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    if not authorization.lower().startswith(HttpHeaders.BEARER_PREFIX):
        return None
    return authorization[len(HttpHeaders.BEARER_PREFIX) :].strip() or None


async def get_principal(
    container: Annotated[Container, Depends(get_container)],
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    return await container.identity_provider.authenticate(bearer_token(authorization))


def check_capability(principal: Principal, capability: Capability) -> Principal:
    try:
        return authorize(principal, capability)
    except PermissionDeniedError:
        logger.info(
            LogTemplates.ACCESS_DENIED, capability.value, principal.user_id, principal.role.value
        )
        raise


def require(capability: Capability) -> Callable[..., Awaitable[Principal]]:
    """Build a dependency that authenticates and checks ``capability``."""

    async def _dependency(
        principal: Annotated[Principal, Depends(get_principal)],
    ) -> Principal:
        return check_capability(principal, capability)

    return _dependency


ContainerDep = Annotated[Container, Depends(get_container)]
PrincipalDep = Annotated[Principal, Depends(get_principal)]
