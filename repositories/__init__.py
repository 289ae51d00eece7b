"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.meal_repository import MealRepository
from repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "MealRepository",
    "UserRepository",
]
