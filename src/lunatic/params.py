"""
Plugin parameter decoder.

Host engines hand plugin parameters over as a flat mapping of strings,
with nested structures encoded as JSON text. `convenient_parser` turns
that into native values:

    "42"            -> 42
    "1.5"           -> 1.5
    "TRUE"          -> True
    '{"a": "3"}'    -> {"a": 3}
    '["1", "x"]'    -> [1, "x"]
    "Hero"          -> "Hero"

Coercion order per value: number, boolean literal, JSON object/array.
Anything that fails every step stays as the original string.
"""

import json
import math
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from lunatic.logger import logger
from lunatic.transform import transform_values_to_plain_map

_BOOL_RE = re.compile(r"true|false", re.IGNORECASE)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_PREFIXED_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")

Number = Union[int, float]


def _to_number(text: str) -> Optional[Number]:
    """Parse text the way a JavaScript Number() call would, minus NaN and Infinity.

    Decimal with optional exponent, or unsigned 0x/0b/0o literals.
    Underscores and non-ASCII digits are not numbers.
    """
    stripped = text.strip()
    if _PREFIXED_RE.fullmatch(stripped):
        return int(stripped, 0)
    if _INTEGER_RE.fullmatch(stripped):
        return int(stripped)
    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    number = float(stripped)
    return number if math.isfinite(number) else None


def coerce_value(value: Any) -> Any:
    """Coerce a single parameter value; containers are coerced recursively."""
    if isinstance(value, Mapping):
        return convenient_parser(value)
    if isinstance(value, list):
        return [coerce_value(item) for item in value]
    if not isinstance(value, str):
        return value

    number = _to_number(value)
    if number is not None:
        return number

    stripped = value.strip()
    if _BOOL_RE.fullmatch(stripped):
        return stripped.lower() == "true"

    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as exc:
        logger.debug(f"Keeping {value!r} as text: {exc}")
        return value

    if decoded is None:
        return None
    if isinstance(decoded, (dict, list)):
        return coerce_value(decoded)
    return value


def convenient_parser(params: Mapping) -> Dict[str, Any]:
    """
    Decode a mapping of plugin parameters.

    Args:
        params: Raw parameters, usually all strings

    Returns:
        New dict with the same keys and coerced values. params is not modified.
    """
    return transform_values_to_plain_map(coerce_value, params)
