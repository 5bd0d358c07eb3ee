"""Recipe nutrition helpers.

Ingredient records carry macros already scaled to their weight, so a recipe's
totals are a plain sum over its ingredients.
"""
from typing import Iterable, Mapping, Union

from dietpal.models.schemas import Ingredient, NutritionTotals

MACROS = ("protein", "fat", "carbohydrates", "calories")


def scale_ingredient(name: str, weight: float, per_100g: Mapping[str, float]) -> Ingredient:
    """Build an ingredient record for `weight` grams from per-100g macro values."""
    factor = weight / 100
    return Ingredient(
        name=name,
        weight=weight,
        **{macro: float(per_100g.get(macro, 0) or 0) * factor for macro in MACROS},
    )


def _macro(ingredient: Union[Ingredient, Mapping], macro: str) -> float:
    # Rows coming back from the database are plain dicts
    if isinstance(ingredient, Mapping):
        return float(ingredient.get(macro) or 0)
    return float(getattr(ingredient, macro, 0) or 0)


def calculate_total_nutrition(ingredients: Iterable[Union[Ingredient, Mapping]]) -> NutritionTotals:
    totals = {macro: 0.0 for macro in MACROS}
    for ingredient in ingredients or []:
        for macro in MACROS:
            totals[macro] += _macro(ingredient, macro)
    return NutritionTotals(**totals)


def format_nutrition(totals: NutritionTotals) -> str:
    return (
        f"Protein: {totals.protein:.2f}g, Fat: {totals.fat:.2f}g, "
        f"Carbs: {totals.carbohydrates:.2f}g, Calories: {totals.calories:.2f}"
    )
