from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Literal


class Ingredient(BaseModel):
    """One ingredient line of a recipe. Macros are for the given weight, not per 100g."""
    name: str
    weight: float  # grams
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0
    calories: float = 0.0


class RecipeCreate(BaseModel):
    # Everything optional so the route can answer 400 "Missing required fields"
    # itself instead of pydantic's 422.
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    ingredients: Optional[List[Ingredient]] = None
    instructions: Optional[str] = None
    prep_time: Optional[int] = Field(default=None, alias="prepTime")  # minutes


class NutritionRequest(BaseModel):
    ingredients: List[Ingredient] = []


class NutritionTotals(BaseModel):
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0
    calories: float = 0.0


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    history: List[ChatMessage] = []


class ChatResponse(BaseModel):
    reply: str
    history: List[ChatMessage]


class ProfileUpdate(BaseModel):
    """Biometrics from the onboarding form; target_calories is derived from these."""
    gender: str  # "male" or "female"
    height: float  # cm
    weight: float  # kg
    age: int
    workouts_per_week: int  # 0-7
    goal: str  # "lose", "build", "maintain"
    planned_weekly_weight_loss: Optional[float] = 0.5


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    name: str


class Token(BaseModel):
    access_token: str
    token_type: str
