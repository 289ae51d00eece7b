"""
User profile models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """Profile registered under a session token"""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    session_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
