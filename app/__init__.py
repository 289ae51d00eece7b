"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    NotFoundError,
    ConflictError,
    StorageUnavailableError,
)

__all__ = [
    "settings",
    "ServiceError",
    "NotFoundError",
    "ConflictError",
    "StorageUnavailableError",
]
