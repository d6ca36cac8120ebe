"""Parse, review and commit cycle for a single meal."""

from dataclasses import dataclass, field

from wellness_tracker.domain.meals import Meal, MealType, ParsedFoodItem, ParsedMeal
from wellness_tracker.services.meals import MealService, copy_items
from wellness_tracker.services.parser import parse_quantity

REVIEWING = "REVIEWING"
COMMITTED = "COMMITTED"
CANCELLED = "CANCELLED"


class ReviewClosedError(RuntimeError):
    """Raised when a committed or cancelled review is modified."""


@dataclass
class MealReview:
    """State for one in-progress meal review.

    Every edit recomputes the whole meal so totals never go stale.
    """

    meal_service: MealService
    status: str = REVIEWING
    meal: ParsedMeal | None = None
    committed: Meal | None = None
    _items: list[ParsedFoodItem] = field(default_factory=list)

    @property
    def items(self) -> list[ParsedFoodItem]:
        """Return the items currently under review."""
        return list(self._items)

    async def start(self, description: str) -> ParsedMeal:
        """Parse a description and open it for review."""
        self._ensure_open()
        meal = await self.meal_service.parse_meal(description)
        self._items = copy_items(meal.items)
        self.meal = meal
        return meal

    async def edit_item(
        self, index: int, *, name: str, quantity: str | float, unit: str
    ) -> ParsedMeal:
        """Replace an item's name, quantity and unit, then recompute."""
        self._ensure_open()
        item = self._items[index]
        if isinstance(quantity, str):
            parsed_quantity = parse_quantity(quantity)
        else:
            parsed_quantity = _positive(quantity)
        self._items[index] = ParsedFoodItem(
            name=name.strip(),
            quantity=parsed_quantity,
            unit=unit.strip(),
            preparation=item.preparation,
        )
        return await self._recompute()

    async def add_item(
        self, name: str = "apple", quantity: float = 1.0, unit: str = "count"
    ) -> ParsedMeal:
        """Append a new item and recompute."""
        self._ensure_open()
        self._items.append(
            ParsedFoodItem(name=name, quantity=_positive(quantity), unit=unit)
        )
        return await self._recompute()

    async def remove_item(self, index: int) -> ParsedMeal:
        """Drop an item and recompute from the remaining ones."""
        self._ensure_open()
        del self._items[index]
        return await self._recompute()

    def commit(self, meal_type: MealType, time: str, name: str | None = None) -> Meal:
        """Close the review and return the committed meal."""
        self._ensure_open()
        if self.meal is None:
            raise ReviewClosedError("Nothing to commit; start a review first")
        self.committed = self.meal_service.build_meal(
            self.meal, meal_type=meal_type, time=time, name=name
        )
        self.status = COMMITTED
        return self.committed

    def cancel(self) -> None:
        """Discard the review."""
        self._ensure_open()
        self._items = []
        self.meal = None
        self.status = CANCELLED

    async def _recompute(self) -> ParsedMeal:
        self.meal = await self.meal_service.calculate_meal_nutrition(
            copy_items(self._items)
        )
        return self.meal

    def _ensure_open(self) -> None:
        if self.status != REVIEWING:
            raise ReviewClosedError(f"Review is {self.status.lower()}")


def _positive(quantity: float) -> float:
    value = float(quantity)
    return value if value > 0 else 1.0
