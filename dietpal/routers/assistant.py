from fastapi import APIRouter, HTTPException, Depends

from dietpal.core.security import get_current_user, get_user_id
from dietpal.models.schemas import ChatRequest, ChatResponse
from dietpal.routers.profile import fetch_profile
from dietpal.services.agent_service import start_conversation, respond_to_user

router = APIRouter(
    prefix="/assistant",
    tags=["Meal Assistant"]
)


def _load_profile(user_id: str) -> dict:
    try:
        profile = fetch_profile(user_id)
    except Exception as e:
        print(f"❌ Error fetching user data: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error retrieving profile: {str(e)}")

    if not profile or profile.get('target_calories') is None:
        raise HTTPException(status_code=404, detail="Profile not found. Please complete onboarding.")
    return profile


@router.post("/start")
def start_planning(current_user=Depends(get_current_user)):
    """
    Opens a meal planning conversation with a greeting that states the user's
    daily calorie target.
    """
    profile = _load_profile(get_user_id(current_user))
    return {
        "history": start_conversation(profile),
        "target_calories": profile['target_calories'],
    }


@router.post("/chat", response_model=ChatResponse)
def chat(request: ChatRequest, current_user=Depends(get_current_user)):
    """
    One conversation turn. The client owns the history and sends it back with
    every message; the server keeps no chat state.
    """
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    user_id = get_user_id(current_user)
    profile = _load_profile(user_id)

    history = respond_to_user(
        history=[message.model_dump() for message in request.history],
        user_input=request.message,
        target_calories=profile['target_calories'],
        user_id=user_id,
    )

    return {"reply": history[-1]["content"], "history": history}
