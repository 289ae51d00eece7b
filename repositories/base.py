"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar, Optional, Type
from uuid import UUID
import logging
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StorageUnavailableError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("dailydiet.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common persistence helpers.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def storage_guard(self) -> Iterator[None]:
        """
        Translate driver connectivity failures into StorageUnavailableError.

        The session is rolled back so a failed write leaves no visible change.
        """
        try:
            yield
        except (OperationalError, InterfaceError) as e:
            self.db.rollback()
            logger.error(f"storage_unavailable model={self.model.__name__} error={e}")
            raise StorageUnavailableError(details={"model": self.model.__name__}) from e

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """
        Get entity by ID.

        Subclasses must override this method with their specific lookup.

        Args:
            entity_id: Entity UUID

        Returns:
            Entity or None if not found
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement get_by_id()"
        )

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        with self.storage_guard():
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def exists(self, entity_id: UUID) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
