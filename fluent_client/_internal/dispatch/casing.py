"""Key case conversion for request and response payloads."""

from collections.abc import Callable
from typing import Any

from pydantic.alias_generators import to_camel, to_snake


def convert_to_snake_case(obj: Any) -> Any:
    """Recursively rename camelCase dict keys to snake_case.

    Creates a new structure - the original object is never mutated.

    Args:
        obj: A dict, list, or leaf value.

    Returns:
        The converted structure. Leaf values are returned unchanged.
    """
    return _convert_recursive(obj, to_snake)


def convert_to_camel_case(obj: Any) -> Any:
    """Recursively rename snake_case dict keys to camelCase.

    Creates a new structure - the original object is never mutated.

    Args:
        obj: A dict, list, or leaf value.

    Returns:
        The converted structure. Leaf values are returned unchanged.
    """
    return _convert_recursive(obj, to_camel)


def _convert_recursive(obj: Any, fn: Callable[[str], str]) -> Any:
    """Rename every string key with fn, descending into dicts and lists."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            new_key = fn(key) if isinstance(key, str) else key
            result[new_key] = _convert_recursive(value, fn)
        return result
    elif isinstance(obj, list):
        return [_convert_recursive(item, fn) for item in obj]
    else:
        return obj
