"""API routes package"""

from . import health, meals, users

__all__ = ["health", "meals", "users"]
