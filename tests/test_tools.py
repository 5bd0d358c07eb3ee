import json

import pytest
import requests
from google.genai import types

from conftest import TEST_USER_ID
from dietpal.tools import recipe_tools, web_search
from dietpal.tools.calculator import calculate
from dietpal.tools.call_function import build_tool_registry, call_function, tool_declarations
from dietpal.tools.database_tools import search_saved_recipes


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


@pytest.fixture
def fake_get(monkeypatch):
    requests_made = []
    responses = {}

    def get(url, params=None, timeout=None):
        requests_made.append({"url": url, "params": params})
        return responses.get(url, FakeResponse({}, 404))

    monkeypatch.setattr(recipe_tools.requests, "get", get)
    monkeypatch.setenv("SPOONACULAR_API_KEY", "spoon-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")
    monkeypatch.setenv("GOOGLE_CSE_ID", "cse-id")
    get.requests = requests_made
    get.responses = responses
    return get


def test_find_recipes_by_ingredients(fake_get):
    fake_get.responses["https://api.spoonacular.com/recipes/findByIngredients"] = FakeResponse([
        {"id": 1, "title": "Chicken Fried Rice",
         "usedIngredients": [{"name": "chicken"}, {"name": "rice"}],
         "missedIngredients": [{"name": "soy sauce"}]},
    ])

    result = json.loads(recipe_tools.find_recipes_by_ingredients(" chicken , rice,"))

    assert result == [{
        "id": 1,
        "title": "Chicken Fried Rice",
        "used_ingredients": ["chicken", "rice"],
        "missing_ingredients": ["soy sauce"],
    }]
    params = fake_get.requests[0]["params"]
    assert params["ingredients"] == "chicken,rice"
    assert params["apiKey"] == "spoon-key"


def test_halal_search_excludes_pork_and_alcohol(fake_get):
    fake_get.responses["https://api.spoonacular.com/recipes/complexSearch"] = FakeResponse({"results": [
        {"id": 5, "title": "Beef Rendang", "readyInMinutes": 90, "nutrition": {"nutrients": [
            {"name": "Calories", "amount": 512.34, "unit": "kcal"},
            {"name": "Protein", "amount": 38.0, "unit": "g"},
            {"name": "Sodium", "amount": 800, "unit": "mg"},
        ]}},
    ]})

    result = json.loads(recipe_tools.halal_recipe_search("rendang"))

    assert result[0]["nutrition_per_serving"] == {"calories": "512.3kcal", "protein": "38.0g"}
    excluded = fake_get.requests[0]["params"]["excludeIngredients"]
    assert "pork" in excluded and "alcohol" in excluded


def test_recipe_instructions_are_numbered(fake_get):
    fake_get.responses["https://api.spoonacular.com/recipes/42/analyzedInstructions"] = FakeResponse([
        {"steps": [{"step": "Boil water."}, {"step": "Add pasta. "}]},
        {"steps": [{"step": "Make the sauce."}]},
    ])

    result = json.loads(recipe_tools.get_recipe_instructions("42"))

    assert result["text"] == "1. Boil water.\n2. Add pasta.\n3. Make the sauce."


def test_recipe_information_needs_numeric_id(fake_get):
    with pytest.raises(ValueError):
        recipe_tools.get_recipe_information("salmon bowl")


def test_spoonacular_http_error_raises(fake_get):
    with pytest.raises(requests.HTTPError):
        recipe_tools.complex_recipe_search("pasta")


def test_google_search_targets_singapore(fake_get):
    fake_get.responses[web_search.GOOGLE_SEARCH_URL] = FakeResponse({"items": [
        {"title": "Ramen Keisuke", "link": "https://example.com/keisuke", "snippet": "Tonkotsu ramen", "kind": "x"},
    ]})

    result = json.loads(web_search.google_search("halal ramen"))

    assert result == [{"title": "Ramen Keisuke", "link": "https://example.com/keisuke", "snippet": "Tonkotsu ramen"}]
    assert fake_get.requests[0]["params"]["q"] == "halal ramen Singapore"


def test_calculate():
    assert json.loads(calculate("(2000 - 500) / 3"))["result"] == 500


def test_calculate_rejects_bad_expression():
    with pytest.raises(Exception):
        calculate("2000 -* / 3")


def test_call_function_isolates_tool_errors():
    def broken(input):
        raise RuntimeError("service unavailable")

    call = types.FunctionCall(id="call_1", name="complex_recipe_search", args={"input": "soup"})

    result = call_function(call, {"complex_recipe_search": broken})

    assert result == {
        "tool_call_id": "call_1",
        "role": "tool",
        "name": "complex_recipe_search",
        "content": "Error: service unavailable",
    }


def test_call_function_prefers_text_field():
    call = types.FunctionCall(name="get_recipe_instructions", args={"input": "42"})

    result = call_function(call, {"get_recipe_instructions": lambda input: json.dumps({"text": f"steps for {input}"})})

    assert result["content"] == "steps for 42"


def test_call_function_unknown_tool():
    call = types.FunctionCall(name="order_pizza", args={"input": "large"})
    assert call_function(call, {}) is None


def test_registry_declares_every_tool():
    registry = build_tool_registry(TEST_USER_ID)

    declarations = tool_declarations(registry)[0].function_declarations

    assert {d.name for d in declarations} == set(registry)
    assert "search_saved_recipes" in registry
    for declaration in declarations:
        assert declaration.parameters.required == ["input"]
        assert declaration.description


def test_search_saved_recipes(fake_db):
    fake_db.rows["recipes"] = [
        {"id": 3, "name": "Chicken Caesar Salad", "prep_time": 15, "ingredients": [
            {"name": "Chicken", "weight": 150, "protein": 46.5, "fat": 5.4, "carbohydrates": 0, "calories": 247.5},
            {"name": "Romaine", "weight": 80, "protein": 1.0, "fat": 0.2, "carbohydrates": 2.6, "calories": 14},
        ]},
        {"id": 2, "name": "Beef Stew", "prep_time": None, "ingredients": []},
    ]

    result = json.loads(search_saved_recipes("chicken salad", user_id=TEST_USER_ID))

    assert result["count"] == 1
    match = result["results"][0]
    assert match["name"] == "Chicken Caesar Salad"
    assert match["prep_time"] == 15
    assert match["total_nutrition"]["calories"] == pytest.approx(261.5)
    assert ("eq", ("user_id", TEST_USER_ID), {}) in fake_db.last_query("recipes").calls


def test_search_saved_recipes_without_recipes(fake_db):
    assert json.loads(search_saved_recipes("anything", user_id=TEST_USER_ID)) == {"count": 0, "results": []}
