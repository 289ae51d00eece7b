"""Meal journal routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_db, get_session_identity
from api.responses import NOT_FOUND_RESPONSE, STORAGE_RESPONSE, VALIDATION_RESPONSE
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetrics,
)
from services.meal_service import MealService
from services.session_service import SessionIdentity

router = APIRouter(prefix="/meals", tags=["Meals"], responses=STORAGE_RESPONSE)


@router.get("", response_model=MealListResponse)
def list_meals(
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """List every meal recorded by the calling session."""
    meals = MealService.list_meals(db, caller)
    return MealListResponse(meals=[MealResponse.model_validate(m) for m in meals])


# Declared before /{meal_id} so "metrics" is not taken for an id
@router.get("/metrics", response_model=MealMetrics)
def get_metrics(
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """
    Summarize the calling session's meals.

    Returns total, on-diet and off-diet counts and the best on-diet sequence,
    the longest run of consecutive on-diet meals ordered most recent first.
    """
    return MealService.get_metrics(db, caller)


@router.get(
    "/{meal_id}",
    response_model=MealDetailResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def get_meal(
    meal_id: UUID,
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """Get a single meal by id."""
    meal = MealService.get_meal(db, caller, meal_id)
    return MealDetailResponse(meal=MealResponse.model_validate(meal))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=VALIDATION_RESPONSE,
)
def create_meal(
    meal_data: MealCreate,
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """Record a meal for the calling session. Responds 201 with no body."""
    MealService.create_meal(db, caller, meal_data)


@router.put(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_meal(
    meal_id: UUID,
    meal_data: MealUpdate,
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """Replace name, description, occurredAt and isOnDiet of a meal."""
    MealService.update_meal(db, caller, meal_id, meal_data)


@router.delete(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def delete_meal(
    meal_id: UUID,
    db: Session = Depends(get_db),
    caller: SessionIdentity = Depends(get_session_identity),
):
    """Permanently delete a meal."""
    MealService.delete_meal(db, caller, meal_id)
