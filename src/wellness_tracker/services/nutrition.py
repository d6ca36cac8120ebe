"""Nutrition resolution with an LLM, food-database and static-table fallback chain."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from wellness_tracker.adapters.edamam_client import FoodDatabaseClient
from wellness_tracker.domain.food_tables import DEFAULT_PER_100G, PER_100G_NUTRITION
from wellness_tracker.domain.nutrition import (
    MacroProfile,
    NutritionInfo,
    parse_number,
    round_tenth,
    round_whole,
)
from wellness_tracker.services.llm import LlmMealService

_EDAMAM_NUTRIENTS = {
    "calories": "ENERC_KCAL",
    "fats": "FAT",
    "carbs": "CHOCDF",
    "protein": "PROCNT",
}

_logger = logging.getLogger(__name__)

_Tier = Callable[[str, float | None], Awaitable[NutritionInfo | None]]


@dataclass
class NutritionService:
    """Resolve calories and macros for a food name and optional weight.

    Tiers are tried in order: LLM parse, hosted food database, static
    per-100 g table. A tier that is not configured or fails hands over to
    the next one; the static table always answers.
    """

    llm_service: LlmMealService | None = None
    food_database: FoodDatabaseClient | None = None
    debug: bool = False

    async def resolve(
        self, food_name: str, weight: float | None = None
    ) -> NutritionInfo:
        """Return nutrition for the food, scaled to weight grams when given."""
        tiers: list[tuple[str, _Tier]] = [
            ("llm", self._from_llm),
            ("food_database", self._from_food_database),
        ]
        for tier_name, tier in tiers:
            result = await tier(food_name, weight)
            if result is not None:
                if self.debug:
                    _logger.info(
                        "Nutrition resolved: food=%s weight=%s tier=%s",
                        food_name,
                        weight,
                        tier_name,
                    )
                return result
        return static_nutrition(food_name, weight)

    async def _from_llm(
        self, food_name: str, weight: float | None
    ) -> NutritionInfo | None:
        if self.llm_service is None or not self.llm_service.is_available:
            return None
        description = _with_weight(food_name, weight)
        try:
            parsed = await self.llm_service.parse_meal(description)
        except Exception as exc:
            _logger.warning(
                "LLM nutrition lookup failed for %s (status=%s): %s",
                food_name,
                _status_code_from_exception(exc),
                exc,
            )
            return None
        if not parsed.foods:
            return None

        calories = protein = carbs = fats = 0.0
        for food in parsed.foods:
            grams = food.weight or (100.0 if weight is None else weight)
            factor = grams / 100.0
            calories += food.calories * factor
            protein += food.protein * factor
            carbs += food.carbs * factor
            fats += food.fats * factor
        return NutritionInfo(
            calories=round_whole(calories),
            protein=round_tenth(protein),
            carbs=round_tenth(carbs),
            fats=round_tenth(fats),
            source="llm",
            serving_size=_serving(weight),
            weight=weight,
        )

    async def _from_food_database(
        self, food_name: str, weight: float | None
    ) -> NutritionInfo | None:
        if self.food_database is None:
            return None
        try:
            payload = await self.food_database.parse_ingredient(
                _with_weight(food_name, weight)
            )
        except Exception as exc:
            _logger.warning(
                "Food database lookup failed for %s (status=%s): %s",
                food_name,
                _status_code_from_exception(exc),
                exc,
            )
            return None

        parsed = payload.get("parsed") if isinstance(payload, dict) else None
        if not isinstance(parsed, list) or not parsed:
            return None

        totals = {key: 0.0 for key in _EDAMAM_NUTRIENTS}
        for entry in parsed:
            food = entry.get("food") if isinstance(entry, dict) else None
            nutrients = food.get("nutrients") if isinstance(food, dict) else None
            if not isinstance(nutrients, dict):
                continue
            for key, code in _EDAMAM_NUTRIENTS.items():
                totals[key] += parse_number(nutrients.get(code))

        return NutritionInfo(
            calories=round_whole(totals["calories"]),
            protein=round_tenth(totals["protein"]),
            carbs=round_tenth(totals["carbs"]),
            fats=round_tenth(totals["fats"]),
            source="food_database",
            serving_size=_serving(weight),
            weight=weight,
        )


def static_nutrition(food_name: str, weight: float | None = None) -> NutritionInfo:
    """Look up a food in the static per-100 g table.

    Every table entry contained in the name contributes to an average; with
    no match a generic default is used. Never fails.
    """
    per_100g = _match_static(food_name)
    if weight is not None:
        factor = weight / 100.0
        return NutritionInfo(
            calories=round_whole(per_100g.calories * factor),
            protein=round_tenth(per_100g.protein * factor),
            carbs=round_tenth(per_100g.carbs * factor),
            fats=round_tenth(per_100g.fats * factor),
            source="static",
            serving_size=f"{weight:g}g",
            weight=weight,
        )
    return NutritionInfo(
        calories=round_whole(per_100g.calories),
        protein=round_tenth(per_100g.protein),
        carbs=round_tenth(per_100g.carbs),
        fats=round_tenth(per_100g.fats),
        source="static",
        serving_size="100g",
        weight=100.0,
    )


def _match_static(food_name: str) -> MacroProfile:
    description = food_name.lower().replace("_", " ")
    matches = [
        profile for food, profile in PER_100G_NUTRITION.items() if food in description
    ]
    if not matches:
        return DEFAULT_PER_100G
    count = len(matches)
    return MacroProfile(
        calories=sum(profile.calories for profile in matches) / count,
        protein=sum(profile.protein for profile in matches) / count,
        carbs=sum(profile.carbs for profile in matches) / count,
        fats=sum(profile.fats for profile in matches) / count,
    )


def _serving(weight: float | None) -> str:
    return "1 serving" if weight is None else f"{weight:g}g"


def _with_weight(food_name: str, weight: float | None) -> str:
    return food_name if weight is None else f"{food_name} {weight:g}g"


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
