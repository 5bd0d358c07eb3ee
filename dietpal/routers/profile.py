from fastapi import APIRouter, HTTPException, Depends

from dietpal.core.security import get_current_user, get_user_id
from dietpal.models.schemas import ProfileUpdate
from dietpal.models.user_logic import user, GOAL_MAP, map_workouts_to_activity_level
from dietpal.services.supabase_client import supabase

router = APIRouter(
    prefix="/api/user-data",
    tags=["Profile"]
)


def fetch_profile(user_id: str):
    """The stored profile row for a user, or None."""
    response = supabase.table('profiles')\
        .select('*')\
        .eq('id', user_id)\
        .limit(1)\
        .execute()
    return response.data[0] if response.data else None


@router.get("")
def get_user_data(current_user=Depends(get_current_user)):
    """
    Get the current user's profile: daily calorie target and biometrics.
    """
    try:
        profile = fetch_profile(get_user_id(current_user))
    except Exception as e:
        print(f"❌ Error retrieving profile: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error retrieving profile: {str(e)}")

    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found. Please complete onboarding.")
    return profile


@router.put("")
def update_user_data(profile_data: ProfileUpdate, current_user=Depends(get_current_user)):
    """
    Create or update the user's profile. The daily calorie target is derived
    from the biometrics and goal.
    """
    if profile_data.gender not in ['male', 'female']:
        raise HTTPException(status_code=400, detail="Gender must be 'male' or 'female'")

    if not 0 <= profile_data.workouts_per_week <= 7:
        raise HTTPException(status_code=400, detail="Workouts per week must be between 0 and 7")

    if profile_data.height <= 0 or profile_data.weight <= 0 or profile_data.age <= 0:
        raise HTTPException(status_code=400, detail="Height, weight, and age must be positive")

    goal = GOAL_MAP.get(profile_data.goal.strip().lower())
    if goal is None:
        raise HTTPException(status_code=400, detail=f"Goal must be one of: {', '.join(GOAL_MAP)}")

    try:
        user_instance = user(
            sex=profile_data.gender,
            height=profile_data.height,
            age=profile_data.age,
            weight=profile_data.weight,
            activity_level=map_workouts_to_activity_level(profile_data.workouts_per_week),
            planned_weekly_weight_loss=profile_data.planned_weekly_weight_loss,
        )
        target_calories = round(user_instance.target_calories(goal))
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))

    try:
        user_id = get_user_id(current_user)
        profile_record = {
            'id': user_id,
            'gender': profile_data.gender,
            'height': profile_data.height,
            'weight': profile_data.weight,
            'age': profile_data.age,
            'workouts_per_week': profile_data.workouts_per_week,
            'goal': goal,
            'target_calories': target_calories,
        }

        response = supabase.table('profiles')\
            .upsert(profile_record)\
            .execute()

        if not response.data:
            raise HTTPException(status_code=500, detail="Failed to save profile - empty response")

        print(f"✅ Profile saved for user {user_id}: {target_calories} kcal/day")
        return response.data[0]

    except HTTPException:
        raise
    except Exception as e:
        print(f"❌ Error saving profile: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error saving profile: {str(e)}")
