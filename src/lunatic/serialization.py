"""
Lossless copy helpers (clone, freeze) for plain data values.

Copies go through an explicit JSON or YAML round trip. A copy is only
accepted when the restored value compares equal to the original; anything
else (functions, cycles, tuples, non-string JSON keys) is a SerializationError.
"""
from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

import yaml


class SerializationError(Exception):
    """A value could not be copied losslessly."""
    pass


class CopyMode(Enum):
    """How a transformation copies its input before building the result."""
    DIRECT = "direct"  # build the output key by key, no round trip
    JSON = "json"
    YAML = "yaml"


def _dump(value: Any, mode: CopyMode) -> str:
    if mode is CopyMode.JSON:
        return json.dumps(value)
    if mode is CopyMode.YAML:
        return yaml.safe_dump(value)
    raise ValueError(f"Unsupported copy mode for serialization: {mode}")


def _load(text: str, mode: CopyMode) -> Any:
    if mode is CopyMode.JSON:
        return json.loads(text)
    return yaml.safe_load(text)


def lossless_copy(value: Any, mode: CopyMode = CopyMode.JSON) -> Any:
    """Copy value through a serialize/deserialize round trip.

    CopyMode.DIRECT falls back to copy.deepcopy and never raises
    SerializationError.

    Raises:
        SerializationError: value cannot be dumped, or comes back different
    """
    if mode is CopyMode.DIRECT:
        return copy.deepcopy(value)

    try:
        restored = _load(_dump(value, mode), mode)
    except (TypeError, ValueError, RecursionError, yaml.YAMLError) as exc:
        raise SerializationError(f"Cannot serialize value as {mode.value}: {exc}") from exc

    try:
        equal = restored == value
    except RecursionError as exc:
        raise SerializationError(f"Cannot compare restored {mode.value} value: {exc}") from exc
    if not equal:
        raise SerializationError(f"Value did not survive a {mode.value} round trip: {value!r}")
    return restored


def clone(obj: Any) -> Any:
    """Deep copy of obj that shares nothing with the original."""
    return lossless_copy(obj, CopyMode.JSON)


def freeze(obj: Any) -> Any:
    """
    Shallow read-only view of obj.

        Mapping -> MappingProxyType
        list    -> tuple
        set     -> frozenset

    Nested values are left as they are.
    """
    if isinstance(obj, MappingProxyType):
        return obj
    if isinstance(obj, Mapping):
        return MappingProxyType(dict(obj))
    if isinstance(obj, list):
        return tuple(obj)
    if isinstance(obj, set):
        return frozenset(obj)
    return obj


def freeze_clone(obj: Any) -> Any:
    return freeze(clone(obj))
