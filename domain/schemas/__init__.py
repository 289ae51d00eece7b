"""
Domain schemas package - Pydantic request/response models.
"""

from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetrics,
)
from domain.schemas.user_schemas import UserCreate, UserResponse

__all__ = [
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealMetrics",
    "UserCreate",
    "UserResponse",
]
