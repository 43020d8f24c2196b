"""
Structural Container Objects

Defines the two container shapes the structural transformer understands:
    - Keyed mappings (anything implementing collections.abc.Mapping)
    - Dual-sequence pairs (objects exposing separate keys()/values() producers)

Both variants implement the same capability:
    enumerate_pairs() -> iterator of (key, value)
    rebuild(pairs)    -> fresh container of the source's concrete kind

ARCHITECTURAL RULE:
    Transform operations are written once, against StructuralContainer.
    They never inspect the source object directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from lunatic.logger import logger

Pair = Tuple[Any, Any]


class AbsentInputError(LookupError):
    """Raised by null-safe operations when called with strict=True on a missing container."""


class Absent(Enum):
    """
    Sentinel returned by null-safe operations instead of a result.

    ABSENT is falsy, so `if result:` reads naturally at call sites,
    but it is distinct from an empty container.
    """

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


class StructuralContainer(ABC):
    """
    Base class for the container capability.

    Subclasses wrap a caller-owned source object. They never mutate it
    and never keep it beyond the lifetime of the wrapper.
    """

    source: Any

    @abstractmethod
    def enumerate_pairs(self) -> Iterator[Pair]:
        """Yield (key, value) pairs in the source's enumeration order."""

    @abstractmethod
    def rebuild(self, pairs: Iterable[Pair]) -> Any:
        """Build a new container of the source's concrete kind from pairs."""


@dataclass
class KeyedMapping(StructuralContainer):
    """
    Wraps a Mapping.

    Enumeration follows the mapping's own iteration order.

    Rebuilding keeps the concrete kind:
        dict, OrderedDict and dict subclasses -> same class
        defaultdict                           -> same default_factory
        read-only mappings (MappingProxyType) -> constructed from a dict
        anything else that cannot be built    -> plain dict

    Properties:
        source:
            The wrapped Mapping.

        factory:
            Callable taking a list of (key, value) pairs and returning a
            new mapping. Overrides the rules above, for mappings whose
            constructor needs extra arguments.
    """

    source: Mapping
    factory: Optional[Callable[[List[Pair]], Mapping]] = None

    def enumerate_pairs(self) -> Iterator[Pair]:
        return iter(self.source.items())

    def rebuild(self, pairs: Iterable[Pair]) -> Mapping:
        pairs = list(pairs)
        if self.factory is not None:
            return self.factory(pairs)

        kind = type(self.source)
        try:
            if isinstance(self.source, defaultdict):
                result = kind(self.source.default_factory)
            elif issubclass(kind, MutableMapping):
                result = kind()
            else:
                return kind(dict(pairs))
        except TypeError as exc:
            logger.debug(f"Cannot construct {kind.__name__} ({exc}); rebuilding as dict")
            return dict(pairs)

        for key, value in pairs:
            result[key] = value
        return result


@dataclass
class DualSequencePair(StructuralContainer):
    """
    Wraps an object exposing separate keys() and values() producers.

    Each call to enumerate_pairs() asks the source for a fresh pair of
    producers, so the wrapper can be enumerated more than once even
    though a single enumeration cannot be restarted.

    Properties:
        source:
            Object with callable keys() and values(), both yielding in
            the same stable order.

        factory:
            Callable taking a list of (key, value) pairs and returning a
            new container. Defaults to type(source).
    """

    source: Any
    factory: Optional[Callable[[List[Pair]], Any]] = None

    def enumerate_pairs(self) -> Iterator[Pair]:
        return pairs_from_dual_iterator(self.source)

    def rebuild(self, pairs: Iterable[Pair]) -> Any:
        factory = self.factory or type(self.source)
        return factory(list(pairs))


def has_dual_producers(obj: Any) -> bool:
    """True if obj exposes callable keys() and values()."""
    return callable(getattr(obj, "keys", None)) and callable(getattr(obj, "values", None))


def as_container(obj: Any) -> StructuralContainer:
    """
    Resolve obj to a StructuralContainer.

    Mappings win over dual producers, since every Mapping also has
    keys() and values().

    Raises:
        TypeError: obj is None or has neither shape
    """
    if isinstance(obj, StructuralContainer):
        return obj
    if isinstance(obj, Mapping):
        return KeyedMapping(obj)
    if has_dual_producers(obj):
        return DualSequencePair(obj)
    raise TypeError(f"Unsupported container type: {type(obj).__name__}")


def pairs_from_dual_iterator(container: Any) -> Iterator[Pair]:
    """Step the key and value producers of container in lockstep.

    Stops at the first producer that reports completion. When the value
    producer runs out before the key producer the remaining keys are
    dropped without error.

    The returned generator cannot be restarted; ask the container again.
    """
    source = container.source if isinstance(container, DualSequencePair) else container
    keys = iter(source.keys())
    values = iter(source.values())

    while True:
        try:
            key = next(keys)
        except StopIteration:
            return
        try:
            value = next(values)
        except StopIteration:
            logger.debug(f"Value producer exhausted before key {key!r}; truncating")
            return
        yield key, value
