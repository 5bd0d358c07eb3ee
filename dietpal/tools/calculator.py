import json
from py_expression_eval import Parser


def calculate(input: str) -> str:
    """
    Safely evaluates a mathematical expression, e.g. "(1850 - 420) / 3" or "540 * 0.75".

    Use it for portion and calorie budget arithmetic instead of computing in your head.
    Supports +, -, *, /, parentheses and common math functions.
    """
    parser = Parser()
    try:
        result = parser.parse(input).evaluate({})
    except ZeroDivisionError:
        raise ValueError("Division by zero occurred in the expression.")
    return json.dumps({"expression": input, "result": result})
