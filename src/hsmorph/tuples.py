"""Tuple construction and access."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from hsmorph.base import curried
from hsmorph.errors import TypeMismatchError
from hsmorph.types import Tuple


def tuple_(*values: Any) -> Tuple:
    """Build a Tuple of two or more values."""
    if len(values) < 2:
        raise TypeMismatchError(values, tuple_, "at least two values")
    return Tuple(values)


def tuple_from(values: Iterable[Any]) -> Tuple:
    """Build a Tuple from an iterable of two or more values."""
    return tuple_(*values)


def is_tuple(value: Any) -> bool:
    return isinstance(value, Tuple)


def _check_pair(value: Any, operation: Any) -> Tuple:
    if not isinstance(value, Tuple) or value.arity != 2:
        raise TypeMismatchError(value, operation, "a pair")
    return value


def fst(p: Tuple) -> Any:
    return _check_pair(p, fst).values[0]


def snd(p: Tuple) -> Any:
    return _check_pair(p, snd).values[1]


def swap(p: Tuple) -> Tuple:
    a, b = _check_pair(p, swap).values
    return Tuple((b, a))


@curried
def curry(f: Callable[[Tuple], Any], x: Any, y: Any) -> Any:
    """Call a function on pairs with two separate arguments."""
    return f(Tuple((x, y)))


@curried
def uncurry(f: Callable[..., Any], p: Tuple) -> Any:
    """Call a function of several arguments with the components of a Tuple."""
    if not isinstance(p, Tuple):
        raise TypeMismatchError(p, uncurry, "Tuple")
    return f(*p.values)
