"""
Meal journal models.
"""

from sqlalchemy import (
    Boolean,
    BigInteger,
    Column,
    Index,
    Integer,
    Text,
    TIMESTAMP,
    Uuid,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal recorded by an anonymous session"""

    __tablename__ = "meals"

    # Insertion order; breaks ties between meals sharing an occurred_at
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(Uuid(as_uuid=True), unique=True, nullable=False, default=uuid.uuid4)
    owner = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    occurred_at = Column(BigInteger, nullable=False)  # epoch milliseconds
    is_on_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (Index("ix_meals_owner_occurred_at", "owner", "occurred_at"),)

    def __repr__(self) -> str:
        return f"<Meal id={self.id} owner={self.owner} on_diet={self.is_on_diet}>"
