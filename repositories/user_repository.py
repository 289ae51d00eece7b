"""
User Repository - Data access layer for user profile operations
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: UUID) -> Optional[AppUser]:
        """Get user by ID"""
        with self.storage_guard():
            return self.db.query(AppUser).filter(AppUser.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email"""
        with self.storage_guard():
            return self.db.query(AppUser).filter(AppUser.email == email).first()

    def create_user(self, session_id: str, name: str, email: str) -> AppUser:
        """Create a new user"""
        user = AppUser(session_id=session_id, name=name, email=email)
        try:
            return self.create(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")
