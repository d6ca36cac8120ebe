"""Request and response models for the meal API."""

from pydantic import BaseModel, Field

from wellness_tracker.domain.meals import Meal, MealType, ParsedFoodItem, ParsedMeal
from wellness_tracker.domain.nutrition import NutritionInfo


class DescriptionRequest(BaseModel):
    description: str = Field(min_length=1)


class FoodItemModel(BaseModel):
    name: str = Field(min_length=1)
    quantity: float = Field(default=1.0, gt=0)
    unit: str = "count"
    preparation: str | None = None
    weight: float | None = None

    @classmethod
    def from_domain(cls, item: ParsedFoodItem) -> "FoodItemModel":
        return cls(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            preparation=item.preparation,
            weight=item.weight,
        )

    def to_domain(self) -> ParsedFoodItem:
        return ParsedFoodItem(
            name=self.name,
            quantity=self.quantity,
            unit=self.unit,
            preparation=self.preparation,
        )


class NutritionInfoModel(BaseModel):
    calories: float
    protein: float
    carbs: float
    fats: float
    source: str
    serving_size: str
    weight: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    @classmethod
    def from_domain(cls, info: NutritionInfo) -> "NutritionInfoModel":
        return cls(
            calories=info.calories,
            protein=info.protein,
            carbs=info.carbs,
            fats=info.fats,
            source=info.source,
            serving_size=info.serving_size,
            weight=info.weight,
            fiber=info.fiber,
            sugar=info.sugar,
            sodium=info.sodium,
        )


class ParsedMealResponse(BaseModel):
    items: list[FoodItemModel]
    item_nutrition: list[NutritionInfoModel]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float
    total_weight: float

    @classmethod
    def from_domain(cls, meal: ParsedMeal) -> "ParsedMealResponse":
        return cls(
            items=[FoodItemModel.from_domain(item) for item in meal.items],
            item_nutrition=[
                NutritionInfoModel.from_domain(info) for info in meal.item_nutrition
            ],
            total_calories=meal.total_calories,
            total_protein=meal.total_protein,
            total_carbs=meal.total_carbs,
            total_fats=meal.total_fats,
            total_weight=meal.total_weight,
        )


class RecalculateRequest(BaseModel):
    items: list[FoodItemModel]


class CommitRequest(BaseModel):
    items: list[FoodItemModel]
    type: MealType
    time: str
    name: str | None = None


class MealResponse(BaseModel):
    id: str
    type: MealType
    name: str
    description: str | None = None
    calories: float
    fats: float
    carbs: float
    protein: float
    time: str

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealResponse":
        return cls(
            id=meal.id,
            type=meal.type,
            name=meal.name,
            description=meal.description,
            calories=meal.calories,
            fats=meal.fats,
            carbs=meal.carbs,
            protein=meal.protein,
            time=meal.time,
        )


class ManualMealRequest(BaseModel):
    name: str = Field(min_length=1)
    type: MealType
    time: str
    fats: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    description: str | None = None


class NutritionLookupRequest(BaseModel):
    name: str = Field(min_length=1)
    weight: float | None = Field(default=None, gt=0)


class SuggestionsRequest(BaseModel):
    description: str = Field(min_length=1)
    target_calories: int | None = None


class AnalysisRequest(BaseModel):
    description: str = Field(min_length=1)
    question: str | None = None


class RecommendationsRequest(BaseModel):
    preferences: str | None = None
    restrictions: str | None = None


class TextResponse(BaseModel):
    text: str
