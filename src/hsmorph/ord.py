"""Ord type class: total ordering.

Lists order lexicographically, Tuples componentwise from the left, and Maybe
by constructor first (``Nothing`` before any ``Just``) then by payload.
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
    Maybe,
    Ordering,
    Tuple,
    lookup_instance,
    same_type,
    type_of,
)

LT = Ordering.LT
EQ = Ordering.EQ
GT = Ordering.GT

_ORD_INSTANCES: dict[type, Callable[[Any, Any], Ordering]] = {}


def register_ord(cls: type, compare_fn: Callable[[Any, Any], Ordering]) -> None:
    """Register an Ord instance for a user-defined class."""
    _ORD_INSTANCES[cls] = compare_fn


def _from_sign(n: int) -> Ordering:
    if n < 0:
        return LT
    if n > 0:
        return GT
    return EQ


@curried
def compare(a: Any, b: Any) -> Ordering:
    """Compare two values of the same type.

    Args:
        a: Left operand; its type selects the instance.
        b: Right operand, which must have the same type as ``a``.

    Returns:
        ``LT``, ``EQ`` or ``GT``.
    """
    if not same_type(a, b):
        raise TypeMismatchError(b, compare, type_of(a))
    match a:
        case List():
            return _compare_lists(a, b)
        case Tuple():
            for x, y in zip(a.values, b.values):
                result = compare(x, y)
                if result is not EQ:
                    return result
            return EQ
        case Maybe():
            if isinstance(a, Just) and isinstance(b, Just):
                return compare(a.value, b.value)
            return _from_sign(int(isinstance(a, Just)) - int(isinstance(b, Just)))
        case Ordering():
            return _from_sign(a.value - b.value)

    instance = lookup_instance(_ORD_INSTANCES, a)
    if instance is not None:
        return instance(a, b)
    if type(a).__lt__ is object.__lt__:
        raise TypeMismatchError(a, compare, "a type with an Ord instance")
    if a < b:
        return LT
    if a == b:
        return EQ
    return GT


def _compare_lists(xs: List, ys: List) -> Ordering:
    while isinstance(xs, Cons) and isinstance(ys, Cons):
        if xs is ys:
            return EQ
        result = compare(xs.head, ys.head)
        if result is not EQ:
            return result
        xs, ys = xs.tail, ys.tail
    if isinstance(xs, Cons):
        return GT
    if isinstance(ys, Cons):
        return LT
    return EQ


@curried
def less_than(a: Any, b: Any) -> bool:
    return compare(a, b) is LT


@curried
def less_than_or_equal(a: Any, b: Any) -> bool:
    return compare(a, b) is not GT


@curried
def greater_than(a: Any, b: Any) -> bool:
    return compare(a, b) is GT


@curried
def greater_than_or_equal(a: Any, b: Any) -> bool:
    return compare(a, b) is not LT


@curried
def max_(a: Any, b: Any) -> Any:
    """The larger of two values; ``b`` when they are equal."""
    return b if less_than_or_equal(a, b) else a


@curried
def min_(a: Any, b: Any) -> Any:
    """The smaller of two values; ``a`` when they are equal."""
    return a if less_than_or_equal(a, b) else b
