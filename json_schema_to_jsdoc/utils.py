"""
Utility functions for the JSON Schema to JSDoc generator.
"""

import json
from typing import Any


def upper_first(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest untouched.

    Examples:
        "contactCodes" -> "ContactCodes"
        "first_name" -> "First_name"
        "" -> ""
    """
    return text[:1].upper() + text[1:]


def js_string(value: Any) -> str:
    """Stringify a JSON value the way JavaScript string concatenation does.

    Examples:
        "home" -> "home"
        None -> "null"
        True -> "true"
        3 -> "3"
        ["a", ["b", None]] -> "a,b,"
        {"a": 1} -> "[object Object]"
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        # Array.prototype.join renders null members as empty strings
        return ",".join("" if item is None else js_string(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return json.dumps(value)


def js_truthy(value: Any) -> bool:
    """Return whether a JSON value is truthy in JavaScript.

    Unlike Python, empty arrays and objects are truthy.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)
