"""Tests for meal aggregation."""

import asyncio
from dataclasses import dataclass, field

import pytest

from tests.conftest import FakeChatClient, static_meal_service
from wellness_tracker.domain.meals import MealType, ParsedFoodItem
from wellness_tracker.domain.nutrition import NutritionInfo
from wellness_tracker.services.llm import LlmMealService
from wellness_tracker.services.meals import (
    MealService,
    NoFoodItemsError,
    describe_items,
    macro_calories,
)
from wellness_tracker.services.nutrition import NutritionService
from wellness_tracker.services.parser import MealParser


@dataclass
class ExplodingNutritionService:
    """Resolves statically except for one food that always raises."""

    broken: str
    seen: list[str] = field(default_factory=list)

    async def resolve(self, food_name: str, weight: float | None = None):
        self.seen.append(food_name)
        if food_name == self.broken:
            raise RuntimeError("lookup exploded")
        return NutritionInfo(
            calories=100,
            protein=10,
            carbs=10,
            fats=1,
            source="static",
            weight=weight,
        )


def test_parse_meal_totals() -> None:
    service = static_meal_service()

    meal = asyncio.run(service.parse_meal("2 eggs, 1 cup cooked rice"))

    assert [item.weight for item in meal.items] == pytest.approx([100.0, 158.0])
    assert [info.calories for info in meal.item_nutrition] == [200, 205]
    assert meal.total_calories == 405
    assert meal.total_protein == pytest.approx(14.3)
    assert meal.total_carbs == pytest.approx(69.2)
    assert meal.total_fats == pytest.approx(8.5)
    assert meal.total_weight == 258


def test_parse_meal_without_items_raises() -> None:
    service = static_meal_service()

    with pytest.raises(NoFoodItemsError) as exc_info:
        asyncio.run(service.parse_meal("and, with"))

    assert "2 eggs" in str(exc_info.value)
    assert exc_info.value.description == "and, with"


def test_recalculation_is_idempotent() -> None:
    service = static_meal_service()
    items = [
        ParsedFoodItem("salmon", 150, "g"),
        ParsedFoodItem("broccoli", 1, "cup"),
    ]

    first = asyncio.run(service.calculate_meal_nutrition(items))
    second = asyncio.run(service.calculate_meal_nutrition(items))

    assert first.total_calories == second.total_calories
    assert first.total_weight == second.total_weight
    assert first.item_nutrition == second.item_nutrition


def test_failed_item_contributes_zero() -> None:
    nutrition = ExplodingNutritionService(broken="tofu_firm")
    service = MealService(parser=MealParser(), nutrition_service=nutrition)

    meal = asyncio.run(service.parse_meal("1 cup tofu, 2 eggs"))

    assert nutrition.seen == ["tofu_firm", "egg_whole"]
    assert meal.item_nutrition[0].source == "none"
    assert meal.item_nutrition[0].calories == 0
    assert meal.total_calories == 100
    assert meal.total_weight == 353


def test_enhanced_parse_prefers_llm() -> None:
    llm_service = LlmMealService(client=FakeChatClient())
    service = MealService(
        parser=MealParser(),
        nutrition_service=NutritionService(),
        llm_service=llm_service,
    )

    meal = asyncio.run(service.parse_meal_enhanced("grilled chicken breast"))

    assert meal.source == "llm"
    assert meal.confidence == 92


def test_enhanced_parse_falls_back_to_rules() -> None:
    llm_service = LlmMealService(client=FakeChatClient(reply="I cannot help."))
    service = MealService(
        parser=MealParser(),
        nutrition_service=NutritionService(),
        llm_service=llm_service,
    )

    meal = asyncio.run(service.parse_meal_enhanced("2 eggs"))

    assert meal.source == "rule_based"
    assert meal.confidence == 70
    assert meal.foods[0].name == "egg_whole"
    assert meal.foods[0].weight == 100
    assert meal.total_calories == 200


def test_build_meal() -> None:
    service = static_meal_service()
    parsed = asyncio.run(service.parse_meal("2 eggs, 1 tbsp olive oil"))

    meal = service.build_meal(parsed, meal_type=MealType.BREAKFAST, time="08:30")

    assert meal.type is MealType.BREAKFAST
    assert meal.name == "2 count egg_whole, 1 tbsp olive_oil"
    assert meal.description == "Parsed meal with 2 items"
    assert meal.calories == parsed.total_calories
    assert meal.protein == parsed.total_protein
    assert meal.time == "08:30"
    assert meal.id


def test_describe_items_and_macro_calories() -> None:
    assert describe_items([ParsedFoodItem("apple", 0.5, "cup")]) == "0.5 cup apple"
    assert macro_calories(fats=10, carbs=20, protein=30) == 290


def test_zero_gram_item_contributes_nothing() -> None:
    service = static_meal_service()

    meal = asyncio.run(
        service.calculate_meal_nutrition([ParsedFoodItem("salmon", 0, "g")])
    )

    assert meal.total_weight == 0
    assert meal.total_calories == 0
    assert meal.item_nutrition[0].serving_size == "0g"


def test_build_manual_meal_derives_calories_from_macros() -> None:
    service = static_meal_service()

    meal = service.build_manual_meal(
        name="  Protein shake ",
        meal_type=MealType.SNACK,
        time="15:00",
        fats=10,
        carbs=20,
        protein=30,
    )

    assert meal.name == "Protein shake"
    assert meal.calories == 290
    assert meal.description is None
    assert meal.type is MealType.SNACK
