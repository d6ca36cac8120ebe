"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from wellness_tracker.adapters.edamam_client import FoodDatabaseClient
from wellness_tracker.config import Settings
from wellness_tracker.containers import AppContainer
from wellness_tracker.services.llm import ChatClient, LlmMealService
from wellness_tracker.services.meals import MealService
from wellness_tracker.services.nutrition import NutritionService
from wellness_tracker.services.parser import MealParser

CHICKEN_MEAL_RESPONSE = json.dumps(
    {
        "foods": [
            {
                "name": "chicken breast",
                "quantity": 1,
                "unit": "count",
                "preparation": "grilled",
                "weight": 200,
                "calories": 165,
                "protein": 31,
                "carbs": 0,
                "fats": 3.6,
            }
        ],
        "totalCalories": 330,
        "totalProtein": 62,
        "totalCarbs": 0,
        "totalFats": 7.2,
        "totalWeight": 200,
        "confidence": 92,
    }
)


@dataclass
class FakeChatClient(ChatClient):
    """Fake chat client that replays a fixed reply and records requests."""

    reply: str = CHICKEN_MEAL_RESPONSE
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        return self.reply


@dataclass
class FailingChatClient(ChatClient):
    """Chat client whose every request fails."""

    calls: int = 0

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls += 1
        raise RuntimeError("LLM unavailable")


@dataclass
class FakeFoodDatabaseClient(FoodDatabaseClient):
    """Fake food-database client with a canned parser response."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "parsed": [
                {
                    "food": {
                        "label": "Salmon",
                        "nutrients": {
                            "ENERC_KCAL": 312,
                            "PROCNT": 37.5,
                            "FAT": 18,
                            "CHOCDF": 0,
                        },
                    }
                }
            ]
        }
    )
    queries: list[str] = field(default_factory=list)

    async def parse_ingredient(self, ingredient: str) -> dict[str, object]:
        self.queries.append(ingredient)
        return self.payload


@dataclass
class FailingFoodDatabaseClient(FoodDatabaseClient):
    """Food-database client whose every request fails."""

    calls: int = 0

    async def parse_ingredient(self, ingredient: str) -> dict[str, object]:
        self.calls += 1
        raise RuntimeError("food database unavailable")


def static_meal_service() -> MealService:
    """Meal service that resolves everything from the static table."""
    return MealService(
        parser=MealParser(),
        nutrition_service=NutritionService(),
        llm_service=LlmMealService(client=None),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        openai_api_key=None,
        edamam_app_id=None,
        edamam_app_key=None,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    parser = MealParser()
    llm_service = LlmMealService(client=None, model=settings.openai_model)
    nutrition_service = NutritionService(llm_service=llm_service)
    meal_service = MealService(
        parser=parser,
        nutrition_service=nutrition_service,
        llm_service=llm_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        parser=parser,
        llm_service=llm_service,
        nutrition_service=nutrition_service,
        meal_service=meal_service,
        close_resources=close_resources,
    )
