import os
import json
import requests
from dotenv import load_dotenv

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
REQUEST_TIMEOUT = 10


def google_search(input: str) -> str:
    """Searches the web for restaurants in Singapore. Include the cuisine and any dietary preferences in the query, e.g. 'halal japanese restaurant'."""
    if not input or not input.strip():
        raise ValueError("A search query is required")

    load_dotenv()
    api_key = os.environ.get("GOOGLE_API_KEY")
    cse_id = os.environ.get("GOOGLE_CSE_ID")
    if not api_key or not cse_id:
        raise ValueError("GOOGLE_API_KEY and GOOGLE_CSE_ID must be set")

    query = input.strip()
    if "singapore" not in query.lower():
        query = f"{query} Singapore"

    response = requests.get(
        GOOGLE_SEARCH_URL,
        params={"key": api_key, "cx": cse_id, "q": query, "num": 5},
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()

    items = response.json().get("items", [])
    return json.dumps([
        {"title": item.get("title"), "link": item.get("link"), "snippet": item.get("snippet")}
        for item in items
    ])
