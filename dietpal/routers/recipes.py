from fastapi import APIRouter, HTTPException, Depends

from dietpal.core.security import get_current_user, get_user_id
from dietpal.models.schemas import RecipeCreate, NutritionRequest
from dietpal.models.nutrition import calculate_total_nutrition
from dietpal.services.supabase_client import supabase

router = APIRouter(
    prefix="/api/recipes",
    tags=["Recipes"]
)


@router.get("")
def list_recipes(current_user=Depends(get_current_user)):
    """
    Returns the authenticated user's recipes, newest first.
    """
    try:
        user_id = get_user_id(current_user)

        response = supabase.table('recipes')\
            .select('*')\
            .eq('user_id', user_id)\
            .order('created_at', desc=True)\
            .execute()

        return response.data or []

    except Exception as e:
        print(f"❌ Error fetching recipes: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch recipes: {str(e)}")


@router.post("")
def create_recipe(recipe: RecipeCreate, current_user=Depends(get_current_user)):
    """
    Saves a new recipe for the authenticated user and returns the stored row.
    Name, at least one ingredient and instructions are required.
    """
    name = (recipe.name or "").strip()
    instructions = (recipe.instructions or "").strip()
    if not name or not recipe.ingredients or not instructions:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        user_id = get_user_id(current_user)

        record = {
            'user_id': user_id,
            'name': name,
            'ingredients': [ingredient.model_dump() for ingredient in recipe.ingredients],
            'instructions': instructions,
        }
        if recipe.prep_time is not None:
            record['prep_time'] = recipe.prep_time

        response = supabase.table('recipes')\
            .insert(record)\
            .execute()

        if not response.data:
            raise ValueError("Insert returned no data")

        print(f"✅ Recipe '{record['name']}' saved for user {user_id}")
        return response.data[0]

    except Exception as e:
        print(f"❌ Error creating recipe: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create recipe")


@router.post("/nutrition")
def recipe_nutrition(request: NutritionRequest, current_user=Depends(get_current_user)):
    """Aggregate nutrition of an ingredient list, for a recipe that is still being composed."""
    return calculate_total_nutrition(request.ingredients)


@router.get("/{recipe_id}")
def read_recipe(recipe_id: str, current_user=Depends(get_current_user)):
    try:
        user_id = get_user_id(current_user)

        response = supabase.table('recipes')\
            .select('*')\
            .eq('id', recipe_id)\
            .eq('user_id', user_id)\
            .limit(1)\
            .execute()

        if not response.data:
            raise HTTPException(status_code=404, detail="Recipe not found")

        recipe = response.data[0]
        recipe['total_nutrition'] = calculate_total_nutrition(recipe.get('ingredients') or []).model_dump()
        return recipe

    except HTTPException:
        raise
    except Exception as e:
        print(f"❌ Error fetching recipe {recipe_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch recipe: {str(e)}")
