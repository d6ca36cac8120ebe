"""Domain models for meal parsing and logging."""

from dataclasses import dataclass
from enum import Enum

from wellness_tracker.domain.nutrition import NutritionInfo


@dataclass
class ParsedFoodItem:
    """A single food recognised in a meal description."""

    name: str
    quantity: float = 1.0
    unit: str = "count"
    preparation: str | None = None
    weight: float | None = None


@dataclass(frozen=True)
class ParsedMeal:
    """Aggregated nutrition for a list of parsed items."""

    items: list[ParsedFoodItem]
    item_nutrition: list[NutritionInfo]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float
    total_weight: float


class MealType(str, Enum):
    """Meal slot within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Meal:
    """A committed meal as stored for a calendar day."""

    id: str
    type: MealType
    name: str
    calories: float
    fats: float
    carbs: float
    protein: float
    time: str
    description: str | None = None
