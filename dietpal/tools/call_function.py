import json
from functools import partial
from google.genai import types

from dietpal.tools.recipe_tools import (
    find_recipes_by_ingredients,
    complex_recipe_search,
    halal_recipe_search,
    get_recipe_information,
    get_recipe_instructions,
)
from dietpal.tools.web_search import google_search
from dietpal.tools.database_tools import search_saved_recipes
from dietpal.tools.calculator import calculate

# Name the model uses -> the callable, for tools that need no user context.
AVAILABLE_FUNCTIONS = {
    "find_recipes_by_ingredients": find_recipes_by_ingredients,
    "complex_recipe_search": complex_recipe_search,
    "halal_recipe_search": halal_recipe_search,
    "get_recipe_information": get_recipe_information,
    "get_recipe_instructions": get_recipe_instructions,
    "google_search": google_search,
    "calculate": calculate,
}

INPUT_DESCRIPTIONS = {
    "find_recipes_by_ingredients": "Comma separated ingredients, e.g. 'chicken, rice, broccoli'.",
    "complex_recipe_search": "Cuisine, dish or meal idea, e.g. 'mediterranean salad'.",
    "halal_recipe_search": "Cuisine, dish or meal idea, e.g. 'beef rendang'.",
    "get_recipe_information": "The numeric recipe id returned by a search tool.",
    "get_recipe_instructions": "The numeric recipe id returned by a search tool.",
    "google_search": "Restaurant search query including cuisine and dietary preferences.",
    "search_saved_recipes": "A recipe name or part of it.",
    "calculate": "The arithmetic expression to evaluate, e.g. '1850 - 640'.",
}


def build_tool_registry(user_id: str) -> dict:
    """All tools available in one assistant turn; search_saved_recipes is bound to the caller."""
    registry = dict(AVAILABLE_FUNCTIONS)
    registry["search_saved_recipes"] = partial(search_saved_recipes, user_id=user_id)
    return registry


def tool_declarations(registry: dict) -> list:
    """Describe every registered tool to Gemini. Each tool takes a single 'input' string."""
    declarations = []
    for name, func in registry.items():
        doc = getattr(func, "__doc__", None)
        if isinstance(func, partial):
            doc = func.func.__doc__
        declarations.append(types.FunctionDeclaration(
            name=name,
            description=(doc or name).strip(),
            parameters=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "input": types.Schema(type=types.Type.STRING, description=INPUT_DESCRIPTIONS.get(name, "Tool input.")),
                },
                required=["input"],
            ),
        ))
    return [types.Tool(function_declarations=declarations)]


def _tool_content(output) -> str:
    """Tool output is usually JSON text; a 'text' field wins when present."""
    if not isinstance(output, str):
        output = json.dumps(output, default=str)
    try:
        parsed = json.loads(output)
    except (TypeError, ValueError):
        return output
    if isinstance(parsed, dict) and parsed.get("text"):
        return str(parsed["text"])
    return output


def call_function(function_call: types.FunctionCall, registry: dict, verbose: bool = False):
    """
    Run one tool call requested by the model.

    Returns a result dict ``{"tool_call_id", "role", "name", "content"}``, or
    None when the model asked for a tool that is not registered. A failing tool
    does not raise: its error message becomes the content so the remaining
    calls still run.
    """
    function_name = function_call.name
    function_to_call = registry.get(function_name)

    if not function_to_call:
        print(f"⚠️ Model requested unknown tool '{function_name}', skipping")
        return None

    function_args = dict(function_call.args or {})

    if verbose:
        print(f"--- Calling Tool: {function_name} with args: {function_args} ---")

    try:
        content = _tool_content(function_to_call(function_args.get("input", "")))
    except Exception as e:
        print(f"❌ Error executing tool {function_name}: {e}")
        content = f"Error: {e}"

    if verbose:
        print(f"--- Tool Response: {content[:200]} ---")

    return {
        "tool_call_id": function_call.id,
        "role": "tool",
        "name": function_name,
        "content": content,
    }
