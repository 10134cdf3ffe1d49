"""Eq type class: structural equality.

List, Tuple and Maybe compare element by element with the elements' own
instances. Host values with their own ``__eq__`` (numbers, strings, builtin
containers) use it; other classes need an instance from ``register_eq``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hsmorph.base import curried
from hsmorph.errors import TypeMismatchError
from hsmorph.types import (
    Cons,
    Just,
    List,
    Nil,
    NothingType,
    Ordering,
    Tuple,
    lookup_instance,
    same_type,
    type_of,
)

_EQ_INSTANCES: dict[type, Callable[[Any, Any], bool]] = {}


def register_eq(cls: type, eq: Callable[[Any, Any], bool]) -> None:
    """Register an Eq instance for a user-defined class."""
    _EQ_INSTANCES[cls] = eq


@curried
def is_eq(a: Any, b: Any) -> bool:
    """Compare two values of the same type for equality.

    Raises:
        TypeMismatchError: If the values have different types (or tuple
            arities), or the type has no Eq instance.
    """
    if not same_type(a, b):
        raise TypeMismatchError(b, is_eq, type_of(a))
    match a:
        case List():
            return _lists_eq(a, b)
        case Tuple():
            return all(is_eq(x, y) for x, y in zip(a.values, b.values))
        case Just():
            return isinstance(b, Just) and is_eq(a.value, b.value)
        case NothingType():
            return isinstance(b, NothingType)
        case Ordering():
            return a is b

    instance = lookup_instance(_EQ_INSTANCES, a)
    if instance is not None:
        return bool(instance(a, b))
    if type(a).__eq__ is object.__eq__:
        raise TypeMismatchError(a, is_eq, "a type with an Eq instance")
    return a == b


@curried
def is_not_eq(a: Any, b: Any) -> bool:
    return not is_eq(a, b)


def _lists_eq(xs: List, ys: List) -> bool:
    while isinstance(xs, Cons) and isinstance(ys, Cons):
        if xs is ys:
            # Shared suffix
            return True
        if not is_eq(xs.head, ys.head):
            return False
        xs, ys = xs.tail, ys.tail
    return isinstance(xs, Nil) and isinstance(ys, Nil)
