from typing import List, Optional
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from app.config import settings
from app.exceptions import NotFoundError
from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealMetrics
from repositories import MealRepository
from services.metrics_service import summarize_meals
from services.session_service import SessionIdentity

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for the meal journal"""

    @staticmethod
    def _scope(caller: SessionIdentity) -> Optional[str]:
        """Owner filter for id-scoped operations, None when ownership is not enforced"""
        return caller.token if settings.enforce_meal_ownership else None

    @staticmethod
    def create_meal(db: Session, caller: SessionIdentity, meal_data: MealCreate) -> UUID:
        """
        Record a meal owned by the caller.

        Returns:
            The new meal id
        """
        meal = MealRepository(db).create_meal(
            owner=caller.token,
            name=meal_data.name,
            description=meal_data.description,
            occurred_at=meal_data.occurred_at,
            is_on_diet=meal_data.is_on_diet,
        )
        logger.info(
            f"meal_created meal_id={meal.id} owner={caller.token} "
            f"on_diet={meal.is_on_diet}"
        )
        return meal.id

    @staticmethod
    def list_meals(db: Session, caller: SessionIdentity) -> List[Meal]:
        """Return the caller's meals in the order they were recorded"""
        meals = MealRepository(db).list_by_owner(caller.token)
        logger.debug(f"meals_listed owner={caller.token} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, caller: SessionIdentity, meal_id: UUID) -> Meal:
        """
        Fetch a single meal.

        Raises:
            NotFoundError: If no meal with that id is visible to the caller
        """
        meal = MealRepository(db).get_by_id(meal_id, owner=MealService._scope(caller))
        if meal is None:
            logger.warning(f"meal_not_found meal_id={meal_id} caller={caller.token}")
            raise NotFoundError("Meal not found", details={"meal_id": str(meal_id)})
        return meal

    @staticmethod
    def update_meal(
        db: Session, caller: SessionIdentity, meal_id: UUID, meal_data: MealUpdate
    ) -> None:
        """
        Replace name, description, occurred_at and is_on_diet of a meal.
        The id and owner never change.

        Raises:
            NotFoundError: If no meal with that id is visible to the caller
        """
        updated = MealRepository(db).update_meal(
            meal_id,
            owner=MealService._scope(caller),
            name=meal_data.name,
            description=meal_data.description,
            occurred_at=meal_data.occurred_at,
            is_on_diet=meal_data.is_on_diet,
        )
        if not updated:
            logger.warning(f"meal_update_not_found meal_id={meal_id} caller={caller.token}")
            raise NotFoundError("Meal not found", details={"meal_id": str(meal_id)})
        logger.info(f"meal_updated meal_id={meal_id} caller={caller.token}")

    @staticmethod
    def delete_meal(db: Session, caller: SessionIdentity, meal_id: UUID) -> None:
        """
        Permanently remove a meal.

        Raises:
            NotFoundError: If no meal with that id is visible to the caller
        """
        deleted = MealRepository(db).delete_meal(meal_id, owner=MealService._scope(caller))
        if not deleted:
            logger.warning(f"meal_delete_not_found meal_id={meal_id} caller={caller.token}")
            raise NotFoundError("Meal not found", details={"meal_id": str(meal_id)})
        logger.info(f"meal_deleted meal_id={meal_id} caller={caller.token}")

    @staticmethod
    def get_metrics(db: Session, caller: SessionIdentity) -> MealMetrics:
        """Summarize the caller's full history, most recent meal first"""
        meals = MealRepository(db).list_by_owner_most_recent_first(caller.token)
        metrics = summarize_meals(meals)
        logger.info(
            f"metrics_computed owner={caller.token} total={metrics.total_meals} "
            f"on_diet={metrics.meals_on_diet} off_diet={metrics.meals_off_diet} "
            f"best_sequence={metrics.best_on_diet_sequence}"
        )
        return metrics
