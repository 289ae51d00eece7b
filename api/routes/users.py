"""User registration routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_session_identity
from api.responses import ErrorResponse
from domain.schemas.user_schemas import UserCreate, UserResponse
from services.session_service import SessionIdentity
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
def create_user(
    user: UserCreate,
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """
    Register a profile under the caller's session.

    A caller without a session cookie receives one with the response, which
    makes this the usual first call of a new client.
    """
    return UserService.register_user(db, caller, user)
