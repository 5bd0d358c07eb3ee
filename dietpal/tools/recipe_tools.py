import os
import json
import requests
from dotenv import load_dotenv

SPOONACULAR_BASE_URL = "https://api.spoonacular.com"
REQUEST_TIMEOUT = 10

# Ingredients a halal search must never return
HALAL_EXCLUDED_INGREDIENTS = ["pork", "bacon", "ham", "lard", "gelatin", "wine", "beer", "alcohol"]

NUTRIENTS_OF_INTEREST = {"Calories", "Protein", "Fat", "Carbohydrates"}


def _spoonacular_get(path: str, params: dict = None):
    load_dotenv()
    api_key = os.environ.get("SPOONACULAR_API_KEY")
    if not api_key:
        raise ValueError("SPOONACULAR_API_KEY not found")

    query = dict(params or {})
    query["apiKey"] = api_key
    response = requests.get(f"{SPOONACULAR_BASE_URL}{path}", params=query, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def _recipe_id(value: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Expected a numeric recipe id, got '{value}'")


def _per_serving_nutrients(recipe: dict) -> dict:
    nutrients = (recipe.get("nutrition") or {}).get("nutrients") or []
    return {
        n["name"].lower(): f"{round(n.get('amount', 0), 1)}{n.get('unit', '')}"
        for n in nutrients
        if n.get("name") in NUTRIENTS_OF_INTEREST
    }


def find_recipes_by_ingredients(input: str) -> str:
    """Finds recipes that use the given ingredients. Input: a comma separated list of ingredients, e.g. 'chicken, rice, broccoli'."""
    ingredients = ",".join(part.strip() for part in (input or "").split(",") if part.strip())
    if not ingredients:
        raise ValueError("At least one ingredient is required")

    data = _spoonacular_get("/recipes/findByIngredients", {
        "ingredients": ingredients,
        "number": 5,
        "ranking": 1,
        "ignorePantry": True,
    })
    return json.dumps([
        {
            "id": r.get("id"),
            "title": r.get("title"),
            "used_ingredients": [i.get("name") for i in r.get("usedIngredients", [])],
            "missing_ingredients": [i.get("name") for i in r.get("missedIngredients", [])],
        }
        for r in data
    ])


def _complex_search(query: str, **extra) -> str:
    params = {
        "query": query,
        "number": 5,
        "addRecipeNutrition": True,
    }
    params.update(extra)
    data = _spoonacular_get("/recipes/complexSearch", params)
    return json.dumps([
        {
            "id": r.get("id"),
            "title": r.get("title"),
            "ready_in_minutes": r.get("readyInMinutes"),
            "nutrition_per_serving": _per_serving_nutrients(r),
        }
        for r in data.get("results", [])
    ])


def complex_recipe_search(input: str) -> str:
    """Searches recipes by cuisine, dish name or meal idea, e.g. 'thai curry' or 'high protein breakfast'. Returns ids, titles and nutrition per serving."""
    if not input or not input.strip():
        raise ValueError("A search query is required")
    return _complex_search(input.strip())


def halal_recipe_search(input: str) -> str:
    """Searches recipes suitable for a halal diet (no pork or alcohol). Input: cuisine, dish name or meal idea."""
    if not input or not input.strip():
        raise ValueError("A search query is required")
    return _complex_search(input.strip(), excludeIngredients=",".join(HALAL_EXCLUDED_INGREDIENTS))


def get_recipe_information(input: str) -> str:
    """Gets details for a recipe id: servings, ready time, calories and macros per serving, diets. Use it to check a recipe against the calorie budget."""
    recipe_id = _recipe_id(input)
    data = _spoonacular_get(f"/recipes/{recipe_id}/information", {"includeNutrition": True})
    return json.dumps({
        "id": data.get("id"),
        "title": data.get("title"),
        "servings": data.get("servings"),
        "ready_in_minutes": data.get("readyInMinutes"),
        "nutrition_per_serving": _per_serving_nutrients(data),
        "diets": data.get("diets", []),
        "source_url": data.get("sourceUrl"),
    })


def get_recipe_instructions(input: str) -> str:
    """Gets the step by step cooking instructions for a recipe id."""
    recipe_id = _recipe_id(input)
    data = _spoonacular_get(f"/recipes/{recipe_id}/analyzedInstructions")

    steps = []
    for section in data:
        for step in section.get("steps", []):
            steps.append(f"{len(steps) + 1}. {step.get('step', '').strip()}")

    if not steps:
        return json.dumps({"text": "No instructions available for this recipe."})
    return json.dumps({"text": "\n".join(steps)})
