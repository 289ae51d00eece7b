"""
Meal Repository - Data access layer for meal journal operations
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_id(self, meal_id: UUID, owner: Optional[str] = None) -> Optional[Meal]:
        """Get meal by ID, optionally restricted to one owner"""
        query = select(Meal).where(Meal.id == meal_id)
        if owner is not None:
            query = query.where(Meal.owner == owner)
        with self.storage_guard():
            return self.db.execute(query).scalars().first()

    def list_by_owner(self, owner: str) -> List[Meal]:
        """Get all meals of an owner in insertion order"""
        query = select(Meal).where(Meal.owner == owner).order_by(Meal.seq.asc())
        with self.storage_guard():
            return list(self.db.execute(query).scalars().all())

    def list_by_owner_most_recent_first(self, owner: str) -> List[Meal]:
        """
        Get all meals of an owner, most recent first.

        Meals sharing an occurred_at keep their insertion order.
        """
        query = (
            select(Meal)
            .where(Meal.owner == owner)
            .order_by(Meal.occurred_at.desc(), Meal.seq.asc())
        )
        with self.storage_guard():
            return list(self.db.execute(query).scalars().all())

    def create_meal(
        self,
        owner: str,
        name: str,
        description: str,
        occurred_at: int,
        is_on_diet: bool,
    ) -> Meal:
        """Create a new meal owned by the given session"""
        meal = Meal(
            owner=owner,
            name=name,
            description=description,
            occurred_at=occurred_at,
            is_on_diet=is_on_diet,
        )
        return self.create(meal)

    def update_meal(
        self,
        meal_id: UUID,
        owner: Optional[str] = None,
        **values,
    ) -> bool:
        """
        Replace the mutable fields of a meal in a single statement.

        Returns:
            True if a row matched and was updated, False otherwise
        """
        stmt = update(Meal).where(Meal.id == meal_id)
        if owner is not None:
            stmt = stmt.where(Meal.owner == owner)
        stmt = stmt.values(**values).execution_options(synchronize_session=False)
        with self.storage_guard():
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount > 0

    def delete_meal(self, meal_id: UUID, owner: Optional[str] = None) -> bool:
        """
        Delete a meal in a single statement.

        Returns:
            True if a row matched and was removed, False otherwise
        """
        stmt = delete(Meal).where(Meal.id == meal_id)
        if owner is not None:
            stmt = stmt.where(Meal.owner == owner)
        stmt = stmt.execution_options(synchronize_session=False)
        with self.storage_guard():
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount > 0
