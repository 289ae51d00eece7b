from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from domain.schemas.user_schemas import UserCreate
from repositories import UserRepository
from services.session_service import SessionIdentity

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for user profiles"""

    @staticmethod
    def register_user(db: Session, caller: SessionIdentity, user_data: UserCreate) -> AppUser:
        """
        Register a profile under the caller's session.

        Raises:
            ConflictError: If the email is already registered
        """
        user = UserRepository(db).create_user(
            session_id=caller.token, name=user_data.name, email=user_data.email
        )
        logger.info(f"user_registered user_id={user.id} session={caller.token}")
        return user
