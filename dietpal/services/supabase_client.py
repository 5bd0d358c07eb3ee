import os
from supabase import create_client, Client
from dotenv import load_dotenv

load_dotenv()

url: str = os.environ.get("SUPABASE_URL")
# Row access is filtered by user_id in the routers, so the service key is expected here.
key: str = os.environ.get("SUPABASE_SERVICE_KEY") or os.environ.get("SUPABASE_ANON_KEY")

if not url or not key:
    raise EnvironmentError("SUPABASE_URL and SUPABASE_SERVICE_KEY (or SUPABASE_ANON_KEY) must be set in .env file")

# Shared by the auth dependency, the recipe/profile routes and the saved-recipe search tool
supabase: Client = create_client(url, key)


def create_auth_client() -> Client:
    """
    A fresh client for sign-up and sign-in.

    Signing in on the shared client would switch its Authorization header to
    that user's JWT for every later query, so each auth request gets its own.
    """
    return create_client(url, key)
