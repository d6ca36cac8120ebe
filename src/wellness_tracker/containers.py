"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from wellness_tracker.adapters.edamam_client import HttpxEdamamClient
from wellness_tracker.adapters.openai_chat_client import OpenAIChatClient
from wellness_tracker.config import Settings, food_database_enabled, llm_enabled
from wellness_tracker.services.llm import LlmMealService
from wellness_tracker.services.meals import MealService
from wellness_tracker.services.nutrition import NutritionService
from wellness_tracker.services.parser import MealParser


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    parser: MealParser
    llm_service: LlmMealService
    nutrition_service: NutritionService
    meal_service: MealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Tiers without credentials are left unwired, so a bare environment
    resolves everything from the static table.
    """
    resolved_settings = settings or Settings()

    chat_client: OpenAIChatClient | None = None
    if llm_enabled(resolved_settings):
        chat_client = OpenAIChatClient.create(
            api_key=resolved_settings.openai_api_key or "",
            base_url=resolved_settings.openai_base_url,
        )
    edamam_client: HttpxEdamamClient | None = None
    if food_database_enabled(resolved_settings):
        edamam_client = HttpxEdamamClient.create(
            app_id=resolved_settings.edamam_app_id or "",
            app_key=resolved_settings.edamam_app_key or "",
            base_url=resolved_settings.edamam_base_url,
        )

    llm_service = LlmMealService(
        client=chat_client, model=resolved_settings.openai_model
    )
    nutrition_service = NutritionService(
        llm_service=llm_service,
        food_database=edamam_client,
        debug=resolved_settings.debug,
    )
    parser = MealParser()
    meal_service = MealService(
        parser=parser,
        nutrition_service=nutrition_service,
        llm_service=llm_service,
    )

    async def close_resources() -> None:
        if chat_client is not None:
            await chat_client.close()
        if edamam_client is not None:
            await edamam_client.close()

    return AppContainer(
        settings=resolved_settings,
        parser=parser,
        llm_service=llm_service,
        nutrition_service=nutrition_service,
        meal_service=meal_service,
        close_resources=close_resources,
    )
