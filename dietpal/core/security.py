from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from supabase import AuthApiError

from dietpal.services.supabase_client import supabase

# The bearer token is read from the 'Authorization' header. auto_error is off
# so a missing header gets our own message instead of FastAPI's default.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token", auto_error=False)


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)):
    """
    FastAPI dependency that resolves the Supabase user behind the bearer token.

    The returned object is Supabase's user response; the id lives at
    ``current_user.user.id``.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing auth token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return supabase.auth.get_user(token)
    except AuthApiError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_user_id(current_user) -> str:
    return str(current_user.user.id)
