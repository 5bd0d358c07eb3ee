import os
from google import genai
from google.genai import types
from dotenv import load_dotenv

from dietpal.core.prompts import (
    GREETING,
    DEFAULT_APOLOGY,
    ERROR_APOLOGY,
    TOOL_SUMMARY_PROMPT,
    build_system_prompt,
)
from dietpal.tools.call_function import build_tool_registry, tool_declarations, call_function

DEFAULT_MODEL = "gemini-2.5-flash"
TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 1000

# Chat history roles -> Gemini content roles
ROLE_MAP = {"user": "user", "assistant": "model"}


def start_conversation(profile: dict) -> list:
    """Open a meal planning chat. The greeting needs the user's calorie target."""
    if not profile or profile.get("target_calories") is None:
        raise ValueError("A profile with target_calories is required to start meal planning")
    return [{
        "role": "assistant",
        "content": GREETING.format(target_calories=profile["target_calories"]),
    }]


def build_contents(history: list, new_input: str) -> list:
    contents = []
    for message in history:
        role = ROLE_MAP.get(message["role"])
        if role is None or not message.get("content"):
            continue
        contents.append(types.Content(role=role, parts=[types.Part(text=message["content"])]))
    contents.append(types.Content(role="user", parts=[types.Part(text=new_input)]))
    return contents


def split_response(response):
    """Return (function_calls, text) from the first candidate of a Gemini response."""
    if not response.candidates:
        return [], ""
    candidate = response.candidates[0]
    if not candidate.content or not candidate.content.parts:
        return [], ""

    function_calls = []
    text_parts = []
    for part in candidate.content.parts:
        if part.function_call and part.function_call.name:
            function_calls.append(part.function_call)
        elif part.text and not part.thought:
            text_parts.append(part.text)
    return function_calls, "\n".join(text_parts).strip()


def _create_client():
    load_dotenv()
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise ValueError("Gemini API key not found in environment variables.")
    return genai.Client(api_key=api_key)


def run_tool_calls(function_calls: list, registry: dict) -> list:
    """Execute every requested tool in order, one at a time. Unknown tools are skipped."""
    tool_results = []
    for function_call in function_calls:
        result = call_function(function_call, registry, verbose=True)
        if result is not None:
            tool_results.append(result)
    return tool_results


def respond_to_user(history: list, user_input: str, target_calories, user_id: str, client=None) -> list:
    """
    Run one assistant turn and return the new history.

    One model call with the tools bound; if the model asks for tools they are
    run and a second call summarizes their output. Whatever happens, the
    returned history ends with the user turn followed by an assistant turn.

    Args:
        history: previous turns, dicts with 'role' ('user' or 'assistant') and 'content'
        user_input: the new user message; a blank message leaves history untouched
        target_calories: the user's remaining calorie budget for the day
        user_id: owner of the saved recipes the assistant may search
        client: a genai.Client, created from GEMINI_API_KEY when omitted
    """
    previous = [dict(message) for message in history]
    if not user_input or not user_input.strip():
        return previous

    user_turn = {"role": "user", "content": user_input}

    try:
        if client is None:
            client = _create_client()

        registry = build_tool_registry(user_id)
        model = os.environ.get("GEMINI_MODEL", DEFAULT_MODEL)
        config = types.GenerateContentConfig(
            system_instruction=build_system_prompt(target_calories),
            tools=tool_declarations(registry),
            temperature=TEMPERATURE,
            max_output_tokens=MAX_OUTPUT_TOKENS,
        )

        print(f"🤖 Assistant turn for user {user_id}: {user_input[:100]}")
        initial_response = client.models.generate_content(
            model=model,
            contents=build_contents(previous, user_input),
            config=config,
        )
        function_calls, initial_text = split_response(initial_response)
        print(f"📦 Initial response: {len(function_calls)} tool call(s), {len(initial_text)} chars of text")

        tool_results = run_tool_calls(function_calls, registry)
        print(f"🔧 Tool results: {[(r['name'], r['content'][:80]) for r in tool_results]}")

        if tool_results:
            tool_results_prompt = "\n\n".join(f"{r['name']}: {r['content']}" for r in tool_results)
            final_response = client.models.generate_content(
                model=model,
                contents=build_contents(previous + [user_turn], TOOL_SUMMARY_PROMPT.format(tool_results=tool_results_prompt)),
                config=config,
            )
            _, final_text = split_response(final_response)
            response_content = final_text or tool_results[0]["content"]
        elif initial_text:
            response_content = initial_text
        else:
            response_content = DEFAULT_APOLOGY

        print(f"✅ Assistant answered with {len(response_content)} chars")

    except Exception as e:
        print(f"❌ Error processing request: {e}")
        response_content = ERROR_APOLOGY.format(error=e)

    return previous + [user_turn, {"role": "assistant", "content": response_content}]
