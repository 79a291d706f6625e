"""Identity provider backed by the static token table in settings."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from music_streaming_player.application.interfaces.identity_provider import IdentityProvider
from music_streaming_player.domain.access.roles import Principal
from music_streaming_player.domain.shared.exceptions import AuthenticationError
from music_streaming_player.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ...config.settings import TokenGrant

logger = logging.getLogger(__name__)


class StaticTokenIdentityProvider(IdentityProvider):
    def __init__(self, tokens: Mapping[str, TokenGrant]) -> None:
        self._tokens = dict(tokens)

    async def authenticate(self, token: str | None) -> Principal:
        if not token:
            logger.debug(LogTemplates.AUTH_REJECTED, ErrorMessages.MISSING_BEARER_TOKEN)
            raise AuthenticationError(ErrorMessages.MISSING_BEARER_TOKEN)

        for known, grant in self._tokens.items():
            if hmac.compare_digest(known.encode(), token.encode()):
                return Principal(user_id=grant.user_id, role=grant.role)

        logger.debug(LogTemplates.AUTH_REJECTED, ErrorMessages.UNKNOWN_BEARER_TOKEN)
        raise AuthenticationError(ErrorMessages.UNKNOWN_BEARER_TOKEN)
