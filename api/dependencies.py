"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Request, Response
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import get_db_session
from services.session_service import SessionIdentity, SessionService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        path="/",
        max_age=settings.session_cookie_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def minted_session_token(request: Request) -> Optional[str]:
    """Token minted while serving this request, if any"""
    return getattr(request.state, "minted_session_token", None)


def get_session_identity(request: Request, response: Response) -> SessionIdentity:
    """
    Resolve the caller's session from its cookie.

    A caller without a session cookie gets a new token, written back on the
    response so later requests present it. The token is also kept on the
    request state so error responses built by the exception handlers carry
    the cookie too.
    """
    identity = SessionService.identify(request.cookies.get(settings.session_cookie_name))
    if identity.is_new:
        request.state.minted_session_token = identity.token
        set_session_cookie(response, identity.token)
    return identity
