"""Tests for the meal review flow."""

import asyncio

import pytest

from tests.conftest import static_meal_service
from wellness_tracker.domain.meals import MealType
from wellness_tracker.services.review import (
    CANCELLED,
    COMMITTED,
    REVIEWING,
    MealReview,
    ReviewClosedError,
)

DESCRIPTION = "2 eggs, 1 cup cooked rice, 1 tbsp olive oil"


def test_start_parses_description() -> None:
    review = MealReview(meal_service=static_meal_service())

    meal = asyncio.run(review.start(DESCRIPTION))

    assert review.status == REVIEWING
    assert len(meal.items) == 3
    assert [item.name for item in review.items] == [
        "egg_whole",
        "rice_white_cooked",
        "olive_oil",
    ]


def test_remove_item_recomputes_from_remaining_items() -> None:
    service = static_meal_service()
    review = MealReview(meal_service=service)
    asyncio.run(review.start(DESCRIPTION))

    meal = asyncio.run(review.remove_item(1))
    expected = asyncio.run(service.parse_meal("2 eggs, 1 tbsp olive oil"))

    assert len(meal.items) == 2
    assert meal.total_calories == expected.total_calories
    assert meal.total_protein == expected.total_protein
    assert meal.total_fats == expected.total_fats
    assert meal.total_weight == expected.total_weight


def test_edit_item_recomputes_totals() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("2 eggs"))

    meal = asyncio.run(
        review.edit_item(0, name="egg_whole", quantity="4", unit="count")
    )

    assert meal.items[0].quantity == 4
    assert meal.total_weight == 200
    assert meal.total_calories == 400


def test_edit_item_with_unreadable_quantity_uses_one() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("1 cup cooked rice"))

    meal = asyncio.run(
        review.edit_item(0, name=" salmon ", quantity="some", unit="g")
    )

    assert meal.items[0].name == "salmon"
    assert meal.items[0].quantity == 1
    assert meal.items[0].preparation == "cooked"
    assert meal.total_weight == 1

    meal = asyncio.run(review.edit_item(0, name="salmon", quantity=0, unit="g"))
    assert meal.items[0].quantity == 1


def test_add_item_defaults_to_one_apple() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("2 eggs"))

    meal = asyncio.run(review.add_item())

    assert [item.name for item in meal.items] == ["egg_whole", "apple"]
    assert meal.items[1].weight == 182


def test_edits_do_not_touch_the_previous_meal() -> None:
    review = MealReview(meal_service=static_meal_service())
    first = asyncio.run(review.start("2 eggs, 1 tbsp olive oil"))

    asyncio.run(review.remove_item(0))

    assert len(first.items) == 2


def test_bad_index_raises() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("2 eggs"))

    with pytest.raises(IndexError):
        asyncio.run(review.remove_item(5))


def test_commit_closes_review() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("2 eggs"))

    meal = review.commit(MealType.SNACK, time="16:00", name="Eggs")

    assert review.status == COMMITTED
    assert review.committed == meal
    assert meal.name == "Eggs"
    assert meal.calories == 200
    with pytest.raises(ReviewClosedError):
        asyncio.run(review.add_item())


def test_commit_requires_a_started_review() -> None:
    review = MealReview(meal_service=static_meal_service())

    with pytest.raises(ReviewClosedError):
        review.commit(MealType.LUNCH, time="12:00")


def test_cancel_discards_review() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("2 eggs"))

    review.cancel()

    assert review.status == CANCELLED
    assert review.meal is None
    assert review.items == []
    with pytest.raises(ReviewClosedError):
        review.commit(MealType.DINNER, time="19:00")


def test_added_or_edited_items_never_have_non_positive_quantity() -> None:
    review = MealReview(meal_service=static_meal_service())
    asyncio.run(review.start("150 g salmon"))

    meal = asyncio.run(review.add_item("salmon", 0.0, "g"))

    assert meal.items[1].quantity == 1
    assert meal.total_weight == 151
    assert meal.total_calories == 314

    meal = asyncio.run(review.edit_item(1, name="salmon", quantity=-5, unit="g"))
    assert meal.items[1].quantity == 1

    meal = asyncio.run(review.edit_item(1, name="salmon", quantity="-5", unit="g"))
    assert meal.items[1].quantity == 1
    assert meal.total_calories == 314
