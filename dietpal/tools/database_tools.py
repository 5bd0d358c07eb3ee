import json
import pandas as pd
from fuzzywuzzy import fuzz, process

from dietpal.services.supabase_client import supabase
from dietpal.models.nutrition import calculate_total_nutrition

MAX_RESULTS = 5


def load_user_recipes(user_id: str) -> pd.DataFrame:
    """Load the user's saved recipes into a DataFrame, newest first."""
    response = supabase.table('recipes')\
        .select('*')\
        .eq('user_id', user_id)\
        .order('created_at', desc=True)\
        .execute()
    return pd.DataFrame(response.data or [])


def search_saved_recipes(input: str, user_id: str, threshold: int = 70) -> str:
    """Fuzzy searches the user's own saved recipes by name and returns the matches with their total nutrition. Input: a recipe name or part of it, e.g. 'chicken salad'."""
    query = (input or "").strip()
    if not query:
        raise ValueError("A recipe name to search for is required")

    df = load_user_recipes(user_id)
    if df.empty:
        return json.dumps({"count": 0, "results": []})

    matches = process.extract(query, df['name'], scorer=fuzz.token_set_ratio, limit=len(df))
    matched_indices = [idx for (name, score, idx) in matches if score >= threshold]

    matched_df = df.loc[matched_indices].head(MAX_RESULTS)

    results = []
    for row in matched_df.to_dict(orient="records"):
        totals = calculate_total_nutrition(row.get("ingredients") or [])
        prep_time = row.get("prep_time")
        results.append({
            "id": row.get("id"),
            "name": row["name"],
            "prep_time": None if pd.isna(prep_time) else int(prep_time),
            "total_nutrition": totals.model_dump(),
        })

    return json.dumps({"count": len(results), "results": results}, default=str)
