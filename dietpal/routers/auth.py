from fastapi import APIRouter, HTTPException, Depends
from fastapi.security import OAuth2PasswordRequestForm
from dotenv import load_dotenv
import os

from dietpal.models.schemas import UserCreate, Token
from dietpal.services.supabase_client import create_auth_client

router = APIRouter(
    tags=["Authentication"]
)

FRONTEND_URLS = {
    "dev": "http://localhost:3000",
    "prod": "https://dietpal.vercel.app",
}


@router.post("/signup", status_code=201, response_model=dict)
def sign_up(user_credentials: UserCreate):
    """
    Registers a new user with Supabase Auth. The user confirms by email and
    then logs in through /token.
    """
    load_dotenv()
    environment = os.getenv("ENVIRONMENT", "dev")
    frontend_url = FRONTEND_URLS.get(environment, FRONTEND_URLS["dev"])

    try:
        response = create_auth_client().auth.sign_up({
            "email": user_credentials.email,
            "password": user_credentials.password,
            "options": {
                "email_redirect_to": f"{frontend_url}/profile",
                "data": {"name": user_credentials.name}
            }
        })
    except Exception as e:
        print(f"❌ Signup failed: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    if not response.user:
        raise HTTPException(status_code=400, detail="Could not create user for an unknown reason.")

    print(f"✅ User created: {user_credentials.email}")
    return {"message": "User created successfully. Please check your email for verification."}


@router.post("/token", response_model=Token)
def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()):
    """
    Password login. Takes form data (not JSON) and returns the Supabase access token.
    """
    try:
        response = create_auth_client().auth.sign_in_with_password({
            "email": form_data.username,  # OAuth2 forms call the email field 'username'
            "password": form_data.password
        })
        return {
            "access_token": response.session.access_token,
            "token_type": "bearer"
        }
    except Exception:
        raise HTTPException(
            status_code=401,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
