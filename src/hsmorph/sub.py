"""Sublist functions: prefixes, suffixes, splits and groups.

Every function checks that its list arguments carry the List tag, never
mutates its input, and returns shared suffixes of the input where the result
is a suffix. Predicates must return ``True`` or ``False``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hsmorph.base import curried, partial
from hsmorph.eq import is_eq
from hsmorph.errors import TypeMismatchError
from hsmorph.lists import check_list, cons, from_iterable
from hsmorph.maybes import just
from hsmorph.tuples import fst, snd, tuple_
from hsmorph.types import Cons, List, Maybe, Nil, Nothing, Tuple, empty_list

Predicate = Callable[[Any], bool]


@curried
def take(n: int, xs: List) -> List:
    """Return the prefix of ``xs`` of length ``n``.

    >>> take(2, list_of(1, 2, 3))
    [1:2:[]]
    """
    check_list(xs, take)
    if n <= 0:
        return empty_list
    prefix = []
    node = xs
    while isinstance(node, Cons) and len(prefix) < n:
        prefix.append(node.head)
        node = node.tail
    if isinstance(node, Nil):
        return xs
    return from_iterable(prefix)


@curried
def drop(n: int, xs: List) -> List:
    """Return the suffix of ``xs`` after the first ``n`` elements.

    >>> drop(2, list_of(1, 2, 3))
    [3:[]]
    """
    check_list(xs, drop)
    node = xs
    while n > 0 and isinstance(node, Cons):
        node = node.tail
        n -= 1
    return node


@curried
def split_at(n: int, xs: List) -> Tuple:
    """Return ``(take(n, xs), drop(n, xs))``."""
    check_list(xs, split_at)
    return tuple_(take(n, xs), drop(n, xs))


def _scan_while(
    p: Predicate, xs: List, operation: Any, stop_on: bool = False
) -> tuple[list[Any], List]:
    """Split ``xs`` at the first element for which ``p`` returns ``stop_on``.

    Returns:
        The elements of the matching prefix and the remaining suffix node.
    """
    check_list(xs, operation)
    prefix = []
    node = xs
    while isinstance(node, Cons):
        test = p(node.head)
        if test is not True and test is not False:
            raise TypeMismatchError(test, operation, "bool from the predicate")
        if test is stop_on:
            break
        prefix.append(node.head)
        node = node.tail
    return prefix, node


@curried
def take_while(p: Predicate, xs: List) -> List:
    """Return the longest prefix of ``xs`` whose elements satisfy ``p``."""
    prefix, rest = _scan_while(p, xs, take_while)
    if isinstance(rest, Nil):
        return xs
    return from_iterable(prefix)


@curried
def drop_while(p: Predicate, xs: List) -> List:
    """Drop elements from the front of ``xs`` while they satisfy ``p``."""
    _, rest = _scan_while(p, xs, drop_while)
    return rest


def _split(p: Predicate, xs: List, operation: Any, stop_on: bool = False) -> Tuple:
    prefix, rest = _scan_while(p, xs, operation, stop_on)
    if isinstance(rest, Nil):
        return tuple_(xs, empty_list)
    return tuple_(from_iterable(prefix), rest)


@curried
def span(p: Predicate, xs: List) -> Tuple:
    """Split ``xs`` at the first element that does not satisfy ``p``.

    Equivalent to ``(take_while(p, xs), drop_while(p, xs))`` in one pass.

    >>> span(lambda x: x < 3, list_of(1, 2, 3, 4, 1, 2, 3, 4))
    ([1:2:[]], [3:4:1:2:3:4:[]])
    """
    return _split(p, xs, span)


@curried
def break_(p: Predicate, xs: List) -> Tuple:
    """Split ``xs`` at the first element that satisfies ``p``."""
    return _split(p, xs, break_, stop_on=True)


span_not = break_


@curried
def strip_prefix(as_: List, bs: List) -> Maybe:
    """Drop the prefix ``as_`` from ``bs``.

    Elements are compared with ``is_eq``, so compound elements compare
    structurally.

    Returns:
        ``Just`` the rest of ``bs`` if it starts with ``as_``, else ``Nothing``.
    """
    check_list(as_, strip_prefix)
    check_list(bs, strip_prefix)
    node_a, node_b = as_, bs
    while isinstance(node_a, Cons):
        if isinstance(node_b, Nil) or not is_eq(node_a.head, node_b.head):
            return Nothing
        node_a, node_b = node_a.tail, node_b.tail
    return just(node_b)


@curried
def group_by(eq: Callable[..., bool], xs: List) -> List:
    """Split ``xs`` into runs of adjacent elements related by ``eq``.

    Each run holds its first element ``x`` followed by the longest span of
    following elements ``y`` with ``eq(x, y)``. ``eq`` may be a binary
    function or a curried one; concatenating the runs gives back ``xs``.
    """
    check_list(xs, group_by)
    groups = []
    node = xs
    while isinstance(node, Cons):
        x = node.head
        run = span(partial(eq, x), node.tail)
        groups.append(cons(x, fst(run)))
        node = snd(run)
    return from_iterable(groups)


def group(xs: List) -> List:
    """Split ``xs`` into runs of equal adjacent elements.

    >>> group(from_string("Mississippi"))
    [[M]:[i]:[ss]:[i]:[ss]:[i]:[pp]:[i]:[]]
    """
    check_list(xs, group)
    return group_by(is_eq, xs)
