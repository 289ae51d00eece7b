"""
On-diet streak and meal counts.

The summary is a pure fold over an explicit ordered sequence, so it can be
computed and tested without a database.
"""

from typing import Iterable, Protocol

from domain.schemas.meal_schemas import MealMetrics


class DietFlagged(Protocol):
    is_on_diet: bool


def summarize_meals(meals: Iterable[DietFlagged]) -> MealMetrics:
    """
    Summarize a meal history.

    The best on-diet sequence is the longest run of adjacent on-diet meals
    in the order given, not in calendar order. Callers fetching from the
    store pass meals most recent first.

    Args:
        meals: Ordered meals belonging to one owner

    Returns:
        MealMetrics with counts and the longest on-diet run
    """
    total = on_diet = off_diet = 0
    current = best = 0

    for meal in meals:
        total += 1
        if meal.is_on_diet:
            on_diet += 1
            current += 1
        else:
            off_diet += 1
            current = 0
        if current > best:
            best = current

    return MealMetrics(
        total_meals=total,
        meals_on_diet=on_diet,
        meals_off_diet=off_diet,
        best_on_diet_sequence=best,
    )
