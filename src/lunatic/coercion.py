"""
Simple value coercions.
"""

import re
from collections.abc import Mapping, Sized
from typing import Any, Callable

_TRUE_RE = re.compile(r"true", re.IGNORECASE)


def to_boolean(value: Any) -> bool:
    """True if value, as text, contains "true" in any case; everything else is False.

    Non-string input is converted with str(), so None is False and True is True.
    """
    return bool(_TRUE_RE.search(str(value)))


def negate(number: float) -> float:
    return number * -1


def pluck(key: Any) -> Callable[[Any], Any]:
    """
    Getter for key.

    Mappings are indexed; other objects fall back to getattr.
    Missing keys return None.
    """
    def getter(obj: Any) -> Any:
        if isinstance(obj, Mapping):
            return obj.get(key)
        return getattr(obj, key, None)
    return getter


def is_empty(value: Any) -> bool:
    """
    True if value holds nothing.

    None is not considered empty (there is no value to inspect).
    Sized values are empty when their length is 0. Other objects are empty
    when they carry no public attributes.
    """
    if value is None:
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    attributes = getattr(value, "__dict__", None)
    if attributes is None:
        return False
    return not any(not name.startswith("_") for name in attributes)
