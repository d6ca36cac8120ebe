"""Nutrition domain models."""

import math
import re
from dataclasses import dataclass

_LEADING_NUMBER = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile, usually expressed per 100 g."""

    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class NutritionInfo:
    """Resolved nutrition for a food at a given weight (or per 100 g)."""

    calories: float
    protein: float
    carbs: float
    fats: float
    source: str
    serving_size: str = "100g"
    weight: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    @classmethod
    def empty(cls, weight: float | None = None) -> "NutritionInfo":
        """Return a zero-valued result for an item that could not be resolved."""
        serving = "1 serving" if weight is None else f"{weight:g}g"
        return cls(
            calories=0.0,
            protein=0.0,
            carbs=0.0,
            fats=0.0,
            source="none",
            serving_size=serving,
            weight=weight,
        )


def round_whole(value: float) -> float:
    """Round half up to a whole number."""
    return float(math.floor(value + 0.5))


def round_tenth(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def parse_number(value: object) -> float:
    """Parse a loosely formatted number, returning 0 when it cannot be read."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_optional_number(value: object) -> float | None:
    """Parse an optional nutrient; falsy values mean the nutrient is absent."""
    if not value:
        return None
    return parse_number(value)
