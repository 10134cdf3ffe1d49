"""Monoid type class: ``mempty``, ``mappend`` and ``mconcat``.

Built-in instances:

- List: ``empty_list`` and list append.
- Maybe: ``Nothing`` is the identity; two ``Just`` values combine their
  payloads with their own instance.
- Tuple: componentwise, for tuples whose components are all monoids.
- Ordering: ``EQ`` is the identity; the first non-``EQ`` result wins.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hsmorph.base import curried
from hsmorph.errors import TypeMismatchError
from hsmorph.lists import append, check_list
from hsmorph.types import (
    Just,
    List,
    Nothing,
    NothingType,
    Ordering,
    Tuple,
    empty_list,
    lookup_instance,
    same_type,
    type_of,
)


@dataclass(frozen=True)
class MonoidInstance:
    """Identity and combining operation for a user-defined class.

    Attributes:
        empty: Returns the identity, given any value of the type.
        append: Associative combination of two values of the type.
    """

    empty: Callable[[Any], Any]
    append: Callable[[Any, Any], Any]


_MONOID_INSTANCES: dict[type, MonoidInstance] = {}


def register_monoid(
    cls: type,
    empty: Callable[[Any], Any],
    append: Callable[[Any, Any], Any],
) -> None:
    """Register a Monoid instance for a user-defined class."""
    _MONOID_INSTANCES[cls] = MonoidInstance(empty=empty, append=append)


def _instance_for(value: Any, operation: Any) -> MonoidInstance:
    instance = lookup_instance(_MONOID_INSTANCES, value)
    if instance is None:
        raise TypeMismatchError(value, operation, "a Monoid")
    return instance


def mempty(value: Any) -> Any:
    """Return the identity of ``value``'s monoid."""
    match value:
        case List():
            return empty_list
        case Just() | NothingType():
            return Nothing
        case Tuple():
            return Tuple(tuple(mempty(x) for x in value.values))
        case Ordering():
            return Ordering.EQ
    return _instance_for(value, mempty).empty(value)


@curried
def mappend(a: Any, b: Any) -> Any:
    """Combine two values of the same monoid.

    Raises:
        TypeMismatchError: If the values have different types or are not
            monoids.
    """
    if not same_type(a, b):
        raise TypeMismatchError(b, mappend, type_of(a))
    match a:
        case List():
            return append(a, b)
        case NothingType():
            return b
        case Just():
            if isinstance(b, NothingType):
                return a
            return Just(mappend(a.value, b.value))
        case Tuple():
            return Tuple(tuple(mappend(x, y) for x, y in zip(a.values, b.values)))
        case Ordering():
            return b if a is Ordering.EQ else a
    return _instance_for(a, mappend).append(a, b)


def mconcat(xs: List) -> Any:
    """Fold a List of monoidal values with ``mappend``.

    The fold is seeded with ``mempty`` of the first element and runs from the
    right, so a List of Lists shares its last list. An empty List gives
    ``empty_list``.
    """
    check_list(xs, mconcat)
    values = list(xs)
    if not values:
        return empty_list
    result = mempty(values[0])
    for value in reversed(values):
        result = mappend(value, result)
    return result
