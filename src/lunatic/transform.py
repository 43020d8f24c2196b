"""
Structural Transformer: map and filter over keyed containers.

Every operation:
    - Resolves its input with `as_container`
    - Enumerates (key, value) pairs once, in order
    - Builds a fresh result; the input is never mutated

Results either keep the input's concrete kind (`transform_values`,
`filter_values`) or are always a plain dict (the `*_plain_map` variants).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from lunatic.containers import (
    ABSENT,
    Absent,
    AbsentInputError,
    as_container,
    pairs_from_dual_iterator,
)
from lunatic.logger import logger
from lunatic.serialization import CopyMode, lossless_copy

__all__ = [
    "transform_values",
    "transform_values_to_plain_map",
    "filter_values",
    "filter_to_plain_map",
    "pairs_from_dual_iterator",
    "values_of",
    "pair_list",
]


def transform_values(
    f: Callable[[Any], Any],
    container: Any,
    *,
    copy_mode: CopyMode = CopyMode.DIRECT,
) -> Any:
    """
    Replace every value of container with f(value).

    Args:
        f: Unary function; must not mutate its argument
        container: Mapping or dual-producer container
        copy_mode:
            DIRECT builds the result key by key.
            JSON / YAML first copy the pairs through a lossless round trip
            and take the result keys from that copy, so non-serializable
            values fail before f is ever called. f still receives the
            original values.

    Returns:
        New container of the same concrete kind, same keys, same order

    Raises:
        SerializationError: a value cannot round-trip under copy_mode
    """
    view = as_container(container)
    pairs = list(view.enumerate_pairs())

    if copy_mode is CopyMode.DIRECT:
        return view.rebuild([(key, f(value)) for key, value in pairs])

    template = lossless_copy([list(pair) for pair in pairs], copy_mode)
    logger.debug(f"Copied {len(pairs)} pairs via {copy_mode.value} round trip")
    return view.rebuild([(copied_key, f(value)) for (copied_key, _), (_, value) in zip(template, pairs)])


def transform_values_to_plain_map(f: Callable[[Any], Any], container: Any) -> Dict[Any, Any]:
    """Like transform_values, but the result is always a plain dict."""
    return {key: f(value) for key, value in as_container(container).enumerate_pairs()}


def filter_values(predicate: Callable[[Any], bool], container: Any) -> Any:
    """
    Keep only the pairs whose value satisfies predicate.

    Returns a new container of the same concrete kind, surviving pairs
    in their original order.
    """
    view = as_container(container)
    return view.rebuild([(key, value) for key, value in view.enumerate_pairs() if predicate(value)])


def filter_to_plain_map(
    predicate: Callable[[Any], bool],
    container: Any,
    *,
    strict: bool = False,
) -> Dict[Any, Any] | Absent:
    """
    Null-safe filter returning a plain dict.

    Optional plugin parameters often arrive as None; those return ABSENT
    instead of failing.

    Raises:
        AbsentInputError: container is None and strict is True
    """
    if container is None:
        if strict:
            raise AbsentInputError("Cannot filter an absent container")
        return ABSENT
    return {key: value for key, value in as_container(container).enumerate_pairs() if predicate(value)}


def values_of(container: Any) -> List[Any]:
    """Values of container in enumeration order."""
    return [value for _, value in as_container(container).enumerate_pairs()]


def pair_list(container: Any) -> List[List[Any]]:
    """[[key, value], ...] in enumeration order; JSON-friendly for any key type."""
    return [[key, value] for key, value in as_container(container).enumerate_pairs()]
