"""
Session identity for anonymous callers.

A session is nothing more than an opaque token: the first request without one
gets a freshly minted token, every later request presents it back. There is no
server-side session table; the token is stored as the owner of each meal.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import uuid

logger = logging.getLogger("dailydiet.session")


@dataclass(frozen=True)
class SessionIdentity:
    """Resolved caller identity"""

    token: str
    is_new: bool = False


class SessionService:
    """Mints and resolves session tokens"""

    @staticmethod
    def mint_token() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def identify(token: Optional[str]) -> SessionIdentity:
        """
        Resolve the caller from the token it presented.

        Any non-blank token is accepted as-is; there is no lookup against
        previously issued tokens. Without a token a new one is minted and
        flagged so the boundary can hand it back to the client.
        """
        if token is not None and token.strip():
            return SessionIdentity(token=token)

        identity = SessionIdentity(token=SessionService.mint_token(), is_new=True)
        logger.info(f"session_minted session={identity.token}")
        return identity
