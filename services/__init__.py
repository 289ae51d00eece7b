"""Services package - Business logic layer"""

from services.session_service import SessionService, SessionIdentity
from services.meal_service import MealService
from services.metrics_service import summarize_meals
from services.user_service import UserService

__all__ = [
    "SessionService",
    "SessionIdentity",
    "MealService",
    "summarize_meals",
    "UserService",
]
