"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wellness_tracker.api.models import (
    AnalysisRequest,
    CommitRequest,
    DescriptionRequest,
    ManualMealRequest,
    MealResponse,
    NutritionInfoModel,
    NutritionLookupRequest,
    ParsedMealResponse,
    RecalculateRequest,
    RecommendationsRequest,
    SuggestionsRequest,
    TextResponse,
)
from wellness_tracker.app_logging import configure_logging
from wellness_tracker.containers import AppContainer
from wellness_tracker.domain.llm import LLMParsedMeal, MealValidation
from wellness_tracker.services.meals import NoFoodItemsError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(NoFoodItemsError)
    async def no_food_items(request: Request, exc: NoFoodItemsError) -> JSONResponse:
        logger.info("No food items parsed from description: %r", exc.description)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/meals/parse")
    async def parse_meal(
        payload: DescriptionRequest, request: Request
    ) -> ParsedMealResponse:
        """Parse a description with the rule-based parser and resolve nutrition."""
        state_container: AppContainer = request.app.state.container
        meal = await state_container.meal_service.parse_meal(payload.description)
        return ParsedMealResponse.from_domain(meal)

    @app.post("/meals/parse/enhanced")
    async def parse_meal_enhanced(
        payload: DescriptionRequest, request: Request
    ) -> LLMParsedMeal:
        """Parse with the LLM, falling back to the rule-based parser."""
        state_container: AppContainer = request.app.state.container
        return await state_container.meal_service.parse_meal_enhanced(
            payload.description
        )

    @app.post("/meals/recalculate")
    async def recalculate_meal(
        payload: RecalculateRequest, request: Request
    ) -> ParsedMealResponse:
        """Recompute weights and totals for an edited item list."""
        state_container: AppContainer = request.app.state.container
        meal = await state_container.meal_service.calculate_meal_nutrition(
            [item.to_domain() for item in payload.items]
        )
        return ParsedMealResponse.from_domain(meal)

    @app.post("/meals/commit")
    async def commit_meal(payload: CommitRequest, request: Request) -> MealResponse:
        """Recompute the reviewed items and return the committed meal."""
        state_container: AppContainer = request.app.state.container
        items = [item.to_domain() for item in payload.items]
        if not items:
            raise NoFoodItemsError("")
        meal_service = state_container.meal_service
        parsed = await meal_service.calculate_meal_nutrition(items)
        meal = meal_service.build_meal(
            parsed, meal_type=payload.type, time=payload.time, name=payload.name
        )
        return MealResponse.from_domain(meal)

    @app.post("/meals/manual")
    async def manual_meal(payload: ManualMealRequest, request: Request) -> MealResponse:
        """Record a hand-entered meal with calories derived from its macros."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_service.build_manual_meal(
            name=payload.name,
            meal_type=payload.type,
            time=payload.time,
            fats=payload.fats,
            carbs=payload.carbs,
            protein=payload.protein,
            description=payload.description,
        )
        return MealResponse.from_domain(meal)

    @app.post("/nutrition/lookup")
    async def lookup_nutrition(
        payload: NutritionLookupRequest, request: Request
    ) -> NutritionInfoModel:
        """Resolve nutrition for one food name."""
        state_container: AppContainer = request.app.state.container
        info = await state_container.nutrition_service.resolve(
            payload.name, payload.weight
        )
        return NutritionInfoModel.from_domain(info)

    @app.post("/meals/validate")
    async def validate_meal(
        payload: DescriptionRequest, request: Request
    ) -> MealValidation:
        """Flag ambiguous quantities or names in a description."""
        state_container: AppContainer = request.app.state.container
        return await state_container.llm_service.validate_meal_description(
            payload.description
        )

    @app.post("/meals/suggestions")
    async def meal_suggestions(
        payload: SuggestionsRequest, request: Request
    ) -> TextResponse:
        state_container: AppContainer = request.app.state.container
        text = await state_container.llm_service.get_nutrition_suggestions(
            payload.description, payload.target_calories
        )
        return TextResponse(text=text)

    @app.post("/meals/analysis")
    async def meal_analysis(payload: AnalysisRequest, request: Request) -> TextResponse:
        state_container: AppContainer = request.app.state.container
        text = await state_container.llm_service.get_conversational_analysis(
            payload.description, payload.question
        )
        return TextResponse(text=text)

    @app.post("/meals/recommendations")
    async def meal_recommendations(
        payload: RecommendationsRequest, request: Request
    ) -> TextResponse:
        state_container: AppContainer = request.app.state.container
        text = await state_container.llm_service.get_meal_recommendations(
            payload.preferences, payload.restrictions
        )
        return TextResponse(text=text)

    return app
