from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from typing import List
from datetime import datetime, timedelta, timezone
from uuid import UUID

# Range of a signed 64-bit INTEGER column
MIN_EPOCH_MILLIS = -(2**63)
MAX_EPOCH_MILLIS = 2**63 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_datetime_adapter = TypeAdapter(datetime)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to integer epoch milliseconds (naive values are UTC)"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


class MealWrite(BaseModel):
    """Body shared by meal creation and replacement"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Short display label")
    description: str = Field(..., description="Free text description")
    occurred_at: int = Field(
        ...,
        alias="occurredAt",
        ge=MIN_EPOCH_MILLIS,
        le=MAX_EPOCH_MILLIS,
        description="When the meal happened, epoch milliseconds or ISO-8601 datetime",
    )
    is_on_diet: bool = Field(..., alias="isOnDiet", strict=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("occurred_at", mode="before")
    @classmethod
    def coerce_occurred_at(cls, v):
        """Accept epoch milliseconds or an ISO-8601 datetime"""
        if isinstance(v, bool):
            raise ValueError("occurredAt must be epoch milliseconds or a datetime")
        if isinstance(v, str) and not v.strip().lstrip("-").isdigit():
            try:
                v = _datetime_adapter.validate_python(v)
            except ValidationError as e:
                raise ValueError("occurredAt must be epoch milliseconds or a datetime") from e
        if isinstance(v, datetime):
            return to_epoch_millis(v)
        return v


class MealCreate(MealWrite):
    """Schema for recording a new meal"""


class MealUpdate(MealWrite):
    """Schema for replacing the mutable fields of a meal"""


class MealResponse(BaseModel):
    """Schema for a stored meal"""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    description: str
    occurred_at: int = Field(..., alias="occurredAt")
    is_on_diet: bool = Field(..., alias="isOnDiet")


class MealListResponse(BaseModel):
    """All meals of the calling session"""

    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    """A single meal"""

    meal: MealResponse


class MealMetrics(BaseModel):
    """Nutrition summary over a session's meal history"""

    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(0, ge=0, alias="totalMeals")
    meals_on_diet: int = Field(0, ge=0, alias="mealsOnDiet")
    meals_off_diet: int = Field(0, ge=0, alias="mealsOffDiet")
    best_on_diet_sequence: int = Field(0, ge=0, alias="bestOnDietSequence")
