"""
Client authentication session.

Mirrors the state a UI keeps about the current login: ``loading`` until the
stored token has been checked once, then ``auth`` holds the token's claims
(or None).
"""

import asyncio
import logging

from school_client.manager import TokenManager
from school_client.tokens import Claims

logger = logging.getLogger(__name__)


class AuthSession:
    def __init__(self, tokens: TokenManager):
        self.tokens = tokens
        self.auth: Claims | None = None
        self.loading = True
        self._ready = asyncio.Event()

    def initialize(self) -> Claims | None:
        """Check the stored token once and leave the loading state."""
        claims = self.tokens.is_authenticated()
        if claims is None and self.tokens.get_token():
            # Unreadable tokens are not cleared by the manager
            self.tokens.logout()
        self.auth = claims
        self.loading = False
        self._ready.set()
        return claims

    async def wait_until_ready(self) -> None:
        await self._ready.wait()

    def set_auth(self, token: str | None) -> None:
        """Adopt ``token`` if it is readable and unexpired, otherwise log out."""
        claims = self.tokens.decode(token)
        if token and claims is not None and not self.tokens.is_expired(claims):
            self.tokens.store(token)
            self.auth = claims
            return
        self.logout()

    def logout(self) -> None:
        self.auth = None
        self.tokens.logout()

    def is_authenticated(self) -> bool:
        """
        Re-read the stored token.

        The token may have been cleared elsewhere, e.g. by the API client after
        a 401 or 403, or may have expired; ``auth`` follows the store.
        """
        claims = self.tokens.is_authenticated()
        if claims is None and self.auth is not None:
            logger.info("Session ended")
        self.auth = claims
        return claims is not None
