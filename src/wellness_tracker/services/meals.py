"""Meal aggregation: parse descriptions, resolve nutrition and sum totals."""

import logging
from dataclasses import dataclass, replace
from uuid import uuid4

from wellness_tracker.domain.llm import LLMParsedFood, LLMParsedMeal
from wellness_tracker.domain.meals import Meal, MealType, ParsedFoodItem, ParsedMeal
from wellness_tracker.domain.nutrition import NutritionInfo, round_tenth, round_whole
from wellness_tracker.services.llm import LlmMealService
from wellness_tracker.services.nutrition import NutritionService
from wellness_tracker.services.parser import MealParser
from wellness_tracker.services.weights import calculate_weight

RULE_BASED_CONFIDENCE = 70.0

_logger = logging.getLogger(__name__)


class NoFoodItemsError(ValueError):
    """Raised when a description yields no recognisable food items."""

    def __init__(self, description: str) -> None:
        super().__init__(
            "No food items found in the description. Try a different format, "
            'for example "2 eggs, 1 cup cooked rice, 1 tbsp olive oil".'
        )
        self.description = description


@dataclass
class MealService:
    """Turns meal descriptions into itemised nutrition and committed meals."""

    parser: MealParser
    nutrition_service: NutritionService
    llm_service: LlmMealService | None = None

    async def parse_meal(self, description: str) -> ParsedMeal:
        """Parse a description and compute its nutrition.

        Raises NoFoodItemsError when nothing in the description is recognised.
        """
        items = self.parser.parse_description(description)
        if not items:
            raise NoFoodItemsError(description)
        return await self.calculate_meal_nutrition(items)

    async def calculate_meal_nutrition(
        self, items: list[ParsedFoodItem]
    ) -> ParsedMeal:
        """Recompute weights and nutrition for every item and sum the totals.

        Items are resolved one at a time in order. An item whose lookup
        raises contributes zero instead of failing the meal.
        """
        item_nutrition: list[NutritionInfo] = []
        calories = protein = carbs = fats = weight_total = 0.0
        for item in items:
            weight = calculate_weight(item)
            item.weight = weight
            weight_total += weight
            try:
                nutrition = await self.nutrition_service.resolve(item.name, weight)
            except Exception:
                _logger.exception("Nutrition lookup failed for %s", item.name)
                nutrition = NutritionInfo.empty(weight)
            item_nutrition.append(nutrition)
            calories += nutrition.calories
            protein += nutrition.protein
            carbs += nutrition.carbs
            fats += nutrition.fats

        return ParsedMeal(
            items=list(items),
            item_nutrition=item_nutrition,
            total_calories=round_whole(calories),
            total_protein=round_tenth(protein),
            total_carbs=round_tenth(carbs),
            total_fats=round_tenth(fats),
            total_weight=round_whole(weight_total),
        )

    async def parse_meal_enhanced(self, description: str) -> LLMParsedMeal:
        """Parse with the LLM when available, else with the rule-based parser."""
        if self.llm_service is not None and self.llm_service.is_available:
            try:
                return await self.llm_service.parse_meal(description)
            except Exception as exc:
                _logger.warning(
                    "LLM parsing failed, falling back to rule-based parser: %s", exc
                )
        parsed = await self.parse_meal(description)
        return to_llm_meal(parsed)

    def build_meal(
        self,
        parsed: ParsedMeal,
        meal_type: MealType,
        time: str,
        name: str | None = None,
    ) -> Meal:
        """Create the committed meal record for a reviewed parse."""
        return Meal(
            id=uuid4().hex,
            type=meal_type,
            name=name or describe_items(parsed.items),
            description=f"Parsed meal with {len(parsed.items)} items",
            calories=parsed.total_calories,
            fats=parsed.total_fats,
            carbs=parsed.total_carbs,
            protein=parsed.total_protein,
            time=time,
        )

    def build_manual_meal(
        self,
        *,
        name: str,
        meal_type: MealType,
        time: str,
        fats: float,
        carbs: float,
        protein: float,
        description: str | None = None,
    ) -> Meal:
        """Create a meal entered by hand, deriving calories from its macros."""
        return Meal(
            id=uuid4().hex,
            type=meal_type,
            name=name.strip(),
            description=description.strip() if description else None,
            calories=macro_calories(fats=fats, carbs=carbs, protein=protein),
            fats=fats,
            carbs=carbs,
            protein=protein,
            time=time,
        )


def describe_items(items: list[ParsedFoodItem]) -> str:
    """Render items as "<quantity> <unit> <name>" joined by commas."""
    return ", ".join(f"{item.quantity:g} {item.unit} {item.name}" for item in items)


def to_llm_meal(parsed: ParsedMeal) -> LLMParsedMeal:
    """Convert a rule-based meal into the LLM result shape."""
    foods = [
        LLMParsedFood(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            preparation=item.preparation,
            weight=item.weight or 0.0,
            calories=nutrition.calories,
            protein=nutrition.protein,
            carbs=nutrition.carbs,
            fats=nutrition.fats,
        )
        for item, nutrition in zip(parsed.items, parsed.item_nutrition, strict=True)
    ]
    return LLMParsedMeal(
        foods=foods,
        total_calories=parsed.total_calories,
        total_protein=parsed.total_protein,
        total_carbs=parsed.total_carbs,
        total_fats=parsed.total_fats,
        total_weight=parsed.total_weight,
        confidence=RULE_BASED_CONFIDENCE,
        source="rule_based",
    )


def macro_calories(fats: float, carbs: float, protein: float) -> float:
    """Estimate calories from macros using 9/4/4 kcal per gram."""
    return fats * 9 + carbs * 4 + protein * 4


def copy_items(items: list[ParsedFoodItem]) -> list[ParsedFoodItem]:
    """Return independent copies of items so edits do not leak between meals."""
    return [replace(item) for item in items]
