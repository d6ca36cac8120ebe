"""Rule-based parser for natural-language meal descriptions."""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from wellness_tracker.domain.food_tables import FOOD_ALIASES
from wellness_tracker.domain.meals import ParsedFoodItem
from wellness_tracker.domain.nutrition import parse_number

_SEPARATORS = re.compile(r"[,;]")
_STOP_WORDS = re.compile(r"\b(and|with|plus|including)\b")
_WHITESPACE = re.compile(r"\s+")

_FRACTIONS: dict[str, float] = {
    "half": 0.5,
    "1/2": 0.5,
    "quarter": 0.25,
    "1/4": 0.25,
    "third": 0.333,
    "1/3": 0.333,
    "two thirds": 0.667,
    "2/3": 0.667,
    "three quarters": 0.75,
    "3/4": 0.75,
}


@dataclass(frozen=True)
class _Extraction:
    food: str
    quantity: float = 1.0
    unit: str = "count"
    preparation: str | None = None


_Extractor = Callable[[re.Match[str]], _Extraction]


def parse_quantity(text: str) -> float:
    """Parse a quantity token, mapping fraction words to fixed decimals.

    Anything unreadable, zero or negative counts as 1.
    """
    cleaned = text.strip()
    if cleaned in _FRACTIONS:
        return _FRACTIONS[cleaned]
    value = parse_number(cleaned)
    return value if value > 0 else 1.0


def _count_of(match: re.Match[str]) -> _Extraction:
    # "2 eggs", "2 whole eggs"
    return _Extraction(food=match.group(3), quantity=parse_quantity(match.group(1)))


def _prepared(match: re.Match[str]) -> _Extraction:
    # "1 cup rice", "1 cup cooked rice"
    return _Extraction(
        food=match.group(4),
        quantity=parse_quantity(match.group(1)),
        unit=match.group(2),
        preparation=(match.group(3) or "").strip() or None,
    )


def _unit_phrase(match: re.Match[str]) -> _Extraction:
    # "1 tbsp olive oil"; the second token is always taken as the unit.
    return _Extraction(
        food=match.group(3),
        quantity=parse_quantity(match.group(1)),
        unit=match.group(2),
    )


def _fraction(match: re.Match[str]) -> _Extraction:
    # "half cup oats", "1/2 cup oats"
    return _Extraction(
        food=match.group(3),
        quantity=parse_quantity(match.group(1)),
        unit=match.group(2),
    )


def _sized(match: re.Match[str]) -> _Extraction:
    # "large apple"
    return _Extraction(food=match.group(2), unit=match.group(1))


def _bare(match: re.Match[str]) -> _Extraction:
    return _Extraction(food=match.group(1))


# Order matters: the first matching shape wins and the catch-all is last.
ITEM_PATTERNS: tuple[tuple[re.Pattern[str], _Extractor], ...] = (
    (re.compile(r"^(\d+(?:\.\d+)?)\s+(whole\s+)?(\w+)$"), _count_of),
    (re.compile(r"^(\d+(?:\.\d+)?)\s+(\w+)\s+(cooked\s+)?(\w+)$"), _prepared),
    (re.compile(r"^(\d+(?:\.\d+)?)\s+(\w+)\s+(\w+(?:\s+\w+)*)$"), _unit_phrase),
    (re.compile(r"^(half|quarter|third|1/2|1/4|1/3)\s+(\w+)\s+(\w+)$"), _fraction),
    (re.compile(r"^(large|medium|small)\s+(\w+)$"), _sized),
    (re.compile(r"^(\w+(?:\s+\w+)*)$"), _bare),
)


def canonical_food_name(
    food_name: str, aliases: Mapping[str, str] = FOOD_ALIASES
) -> str:
    """Map a food phrase to its canonical identifier.

    Direct matches win; otherwise the first alias (in table order) that
    contains the phrase or is contained in it is used. Unknown phrases are
    returned unchanged.
    """
    if food_name in aliases:
        return aliases[food_name]
    for alias, canonical in aliases.items():
        if food_name in alias or alias in food_name:
            return canonical
    return food_name


def clean_segment(text: str) -> str:
    """Lowercase a segment, drop filler words and collapse whitespace."""
    cleaned = _STOP_WORDS.sub("", text.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


@dataclass
class MealParser:
    """Split a meal description into structured food items."""

    aliases: Mapping[str, str] = field(default_factory=lambda: FOOD_ALIASES)

    def parse_description(self, description: str) -> list[ParsedFoodItem]:
        """Parse comma/semicolon separated items, dropping unrecognised ones."""
        items: list[ParsedFoodItem] = []
        for part in _SEPARATORS.split(description):
            segment = part.strip()
            if not segment:
                continue
            item = self.parse_food_item(segment)
            if item is not None:
                items.append(item)
        return items

    def parse_food_item(self, text: str) -> ParsedFoodItem | None:
        """Parse a single segment, or return None when no shape matches."""
        cleaned = clean_segment(text)
        for pattern, extract in ITEM_PATTERNS:
            match = pattern.match(cleaned)
            if match is None:
                continue
            extraction = extract(match)
            food = extraction.food.strip()
            if not food:
                return None
            return ParsedFoodItem(
                name=canonical_food_name(food, self.aliases),
                quantity=extraction.quantity,
                unit=extraction.unit,
                preparation=extraction.preparation,
            )
        return None
