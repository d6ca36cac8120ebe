"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from wellness_tracker.api.app import create_app


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_meal(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/parse", json={"description": "2 eggs, 1 cup cooked rice"}
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["name"] for item in body["items"]] == [
        "egg_whole",
        "rice_white_cooked",
    ]
    assert body["items"][0]["weight"] == 100
    assert body["item_nutrition"][1]["source"] == "static"
    assert body["total_calories"] == 405
    assert body["total_weight"] == 258


def test_parse_meal_without_food_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/parse", json={"description": "and, with"})

    assert response.status_code == 422
    assert response.json()["detail"].startswith("No food items found")


def test_parse_meal_rejects_empty_description(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/parse", json={"description": ""})

    assert response.status_code == 422


def test_enhanced_parse_falls_back_without_llm(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/parse/enhanced", json={"description": "2 eggs"})

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "rule_based"
    assert body["confidence"] == 70
    assert body["totalCalories"] == 200
    assert body["foods"][0]["name"] == "egg_whole"


def test_recalculate_meal(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/recalculate",
        json={
            "items": [
                {"name": "egg_whole", "quantity": 3, "unit": "count"},
                {"name": "salmon", "quantity": 150, "unit": "g", "weight": 1},
            ]
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["weight"] for item in body["items"]] == [150, 150]
    assert body["total_calories"] == 612


def test_commit_meal(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/commit",
        json={
            "items": [{"name": "egg_whole", "quantity": 2, "unit": "count"}],
            "type": "breakfast",
            "time": "08:00",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "breakfast"
    assert body["time"] == "08:00"
    assert body["name"] == "2 count egg_whole"
    assert body["description"] == "Parsed meal with 1 items"
    assert body["calories"] == 200
    assert body["id"]


def test_commit_meal_without_items_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/commit", json={"items": [], "type": "lunch", "time": "12:00"}
    )

    assert response.status_code == 422


def test_commit_meal_rejects_unknown_meal_type(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/commit",
        json={
            "items": [{"name": "apple"}],
            "type": "brunch",
            "time": "11:00",
        },
    )

    assert response.status_code == 422


def test_nutrition_lookup(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition/lookup", json={"name": "chicken breast", "weight": 200}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["calories"] == 330
    assert body["protein"] == 62
    assert body["source"] == "static"
    assert body["serving_size"] == "200g"


def test_llm_features_without_key(container) -> None:
    client = TestClient(create_app(container))

    validation = client.post("/meals/validate", json={"description": "rice"})
    suggestions = client.post("/meals/suggestions", json={"description": "rice"})
    analysis = client.post("/meals/analysis", json={"description": "rice"})
    recommendations = client.post("/meals/recommendations", json={})

    assert validation.json()["isValid"] is True
    assert suggestions.json() == {
        "text": "LLM API key not configured for nutrition suggestions."
    }
    assert analysis.json() == {
        "text": "LLM API key not configured for conversational analysis."
    }
    assert recommendations.json() == {
        "text": "LLM API key not configured for meal recommendations."
    }


def test_recalculate_rejects_non_positive_quantities(container) -> None:
    client = TestClient(create_app(container))

    for quantity in (-100, 0):
        response = client.post(
            "/meals/recalculate",
            json={"items": [{"name": "salmon", "quantity": quantity, "unit": "g"}]},
        )
        assert response.status_code == 422


def test_commit_rejects_negative_quantity(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/commit",
        json={
            "items": [{"name": "salmon", "quantity": -1, "unit": "g"}],
            "type": "dinner",
            "time": "19:00",
        },
    )

    assert response.status_code == 422


def test_manual_meal(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/manual",
        json={
            "name": "Protein shake",
            "type": "snack",
            "time": "15:00",
            "fats": 10,
            "carbs": 20,
            "protein": 30,
            "description": "after the gym",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["calories"] == 290
    assert body["description"] == "after the gym"
    assert body["type"] == "snack"


def test_manual_meal_rejects_negative_macros(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/manual",
        json={"name": "Shake", "type": "snack", "time": "15:00", "fats": -1},
    )

    assert response.status_code == 422
