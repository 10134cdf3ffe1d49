"""Maybe construction and elimination."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hsmorph.base import curried
from hsmorph.errors import TypeMismatchError
from hsmorph.lists import check_list, from_iterable
from hsmorph.types import Just, List, Maybe, NothingType


def just(x: Any) -> Just:
    return Just(x)


def is_maybe(value: Any) -> bool:
    return isinstance(value, Maybe)


def _check_maybe(value: Any, operation: Any) -> Maybe:
    if not isinstance(value, Maybe):
        raise TypeMismatchError(value, operation, "Maybe")
    return value


def is_just(m: Maybe) -> bool:
    return isinstance(_check_maybe(m, is_just), Just)


def is_nothing(m: Maybe) -> bool:
    return isinstance(_check_maybe(m, is_nothing), NothingType)


def from_just(m: Maybe) -> Any:
    """Extract the value of a ``Just``. ``Nothing`` is rejected."""
    if not isinstance(_check_maybe(m, from_just), Just):
        raise TypeMismatchError(m, from_just, "Just")
    return m.value


@curried
def from_maybe(default: Any, m: Maybe) -> Any:
    """Return the value of a ``Just``, or ``default`` for ``Nothing``."""
    _check_maybe(m, from_maybe)
    return m.value if isinstance(m, Just) else default


@curried
def maybe(default: Any, f: Callable[[Any], Any], m: Maybe) -> Any:
    """Apply ``f`` to the value of a ``Just``, or return ``default``."""
    _check_maybe(m, maybe)
    return f(m.value) if isinstance(m, Just) else default


def cat_maybes(ms: List) -> List:
    """Collect the values of all the ``Just`` elements of a List."""
    check_list(ms, cat_maybes)
    return from_iterable(
        m.value for m in (_check_maybe(m, cat_maybes) for m in ms) if isinstance(m, Just)
    )


@curried
def map_maybe(f: Callable[[Any], Maybe], xs: List) -> List:
    """Map ``f`` over ``xs`` and keep the values of the ``Just`` results."""
    check_list(xs, map_maybe)
    return cat_maybes(from_iterable(f(x) for x in xs))
