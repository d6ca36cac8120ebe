"""Models for LLM meal parsing results."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wellness_tracker.domain.nutrition import parse_number, parse_optional_number


class LLMParsedFood(BaseModel):
    """Single food item returned by the LLM, macros per 100 g."""

    name: str = ""
    quantity: float = 0.0
    unit: str = "count"
    preparation: str | None = None
    weight: float = 0.0
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value: object) -> str:
        return str(value) if value else "count"

    @field_validator("preparation", mode="before")
    @classmethod
    def _coerce_preparation(cls, value: object) -> str | None:
        if not value:
            return None
        return str(value)

    @field_validator(
        "quantity", "weight", "calories", "protein", "carbs", "fats", mode="before"
    )
    @classmethod
    def _coerce_number(cls, value: object) -> float:
        return parse_number(value)

    @field_validator("fiber", "sugar", "sodium", mode="before")
    @classmethod
    def _coerce_optional(cls, value: object) -> float | None:
        return parse_optional_number(value)


class LLMParsedMeal(BaseModel):
    """Structured meal returned by the LLM or by the rule-based fallback."""

    foods: list[LLMParsedFood] = Field(default_factory=list)
    total_calories: float = Field(default=0.0, alias="totalCalories")
    total_protein: float = Field(default=0.0, alias="totalProtein")
    total_carbs: float = Field(default=0.0, alias="totalCarbs")
    total_fats: float = Field(default=0.0, alias="totalFats")
    total_fiber: float | None = Field(default=None, alias="totalFiber")
    total_sugar: float | None = Field(default=None, alias="totalSugar")
    total_sodium: float | None = Field(default=None, alias="totalSodium")
    total_weight: float = Field(default=0.0, alias="totalWeight")
    confidence: float = 0.0
    source: str = "llm"

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("foods", mode="before")
    @classmethod
    def _coerce_foods(cls, value: object) -> list[object]:
        if not isinstance(value, list):
            return []
        return [food for food in value if isinstance(food, dict | LLMParsedFood)]

    @field_validator(
        "total_calories",
        "total_protein",
        "total_carbs",
        "total_fats",
        "total_weight",
        "confidence",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: object) -> float:
        return parse_number(value)

    @field_validator("total_fiber", "total_sugar", "total_sodium", mode="before")
    @classmethod
    def _coerce_optional(cls, value: object) -> float | None:
        return parse_optional_number(value)


class MealValidation(BaseModel):
    """LLM review of a meal description before parsing."""

    is_valid: bool = Field(default=True, alias="isValid")
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
