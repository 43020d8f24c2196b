"""
Function combinators.

Small higher-order helpers for building plugin callbacks:
    - once / times   (call control)
    - curry / pipe / compose   (composition)
    - task / identity / trace   (plumbing)
"""

from functools import reduce
from typing import Any, Callable, TypeVar

from lunatic.logger import logger

T = TypeVar("T")


def once(f: Callable[[], T]) -> Callable[[], T | None]:
    """
    Wrap f so that it runs only on the first call.

    Later calls return None without calling f. The wrapper keeps its own
    flag, so it is not safe to share between threads.
    """
    called = False

    def wrapper() -> T | None:
        nonlocal called
        if called:
            return None
        called = True
        return f()

    return wrapper


def times(iterations: int, f: Callable[[], Any]) -> None:
    """Call f iterations times."""
    for _ in range(iterations):
        f()


def curry(f: Callable[..., T], *args: Any) -> Callable[..., T]:
    """Bind args as the leading positional arguments of f."""
    def curried(*more: Any) -> T:
        return f(*args, *more)
    return curried


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine fns left to right: pipe(f, g)(x) == g(f(x))."""
    return lambda data: reduce(lambda value, fn: fn(value), fns, data)


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine fns right to left: compose(f, g)(x) == f(g(x))."""
    return pipe(*reversed(fns))


def task(f: T) -> Callable[[], T]:
    """Thunk that hands f back later, uncalled."""
    return lambda: f


def identity(value: T) -> T:
    return value


def trace(label: Any, value: T) -> T:
    """Log "label - value" at INFO and return value, for use inside pipe()."""
    logger.info(f"{label} - {value}")
    return value
