"""Persistent List construction, access and transformation.

Lists are immutable cons cells. Functions here never mutate their inputs and
share the untouched suffix of a list instead of copying it. All traversals are
loops, so very long lists do not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from hsmorph.base import curried, partial
from hsmorph.errors import EmptyListError, TypeMismatchError
from hsmorph.types import Cons, List, Nil, empty_list, tag_of


def is_list(value: Any) -> bool:
    """Check whether a value carries the List tag."""
    return isinstance(value, List)


def check_list(value: Any, operation: Any) -> List:
    """Return ``value`` if it is a List, else raise TypeMismatchError."""
    if not isinstance(value, List):
        raise TypeMismatchError(value, operation, "List")
    return value


def is_empty(xs: List) -> bool:
    check_list(xs, is_empty)
    return isinstance(xs, Nil)


@curried
def cons(x: Any, xs: List) -> List:
    """Prepend ``x`` to ``xs`` in O(1)."""
    check_list(xs, cons)
    return Cons(x, xs)


def head(xs: List) -> Any:
    check_list(xs, head)
    if isinstance(xs, Nil):
        raise EmptyListError(head)
    return xs.head


def tail(xs: List) -> List:
    check_list(xs, tail)
    if isinstance(xs, Nil):
        raise EmptyListError(tail)
    return xs.tail


def from_iterable(values: Iterable[Any], rest: List = empty_list) -> List:
    """Build a List from an iterable, ending in ``rest`` (shared, not copied).

    Args:
        values: Elements in order.
        rest: List that the new cells are prepended to.

    Returns:
        A List of ``values`` followed by ``rest``.
    """
    check_list(rest, from_iterable)
    result = rest
    for x in reversed(list(values)):
        result = Cons(x, result)
    return result


def list_of(*values: Any) -> List:
    """Build a List from positional arguments: ``list_of(1, 2, 3)``."""
    return from_iterable(values)


def from_string(s: str) -> List:
    """Convert a string into a List of characters."""
    if not isinstance(s, str):
        raise TypeMismatchError(s, from_string, "str")
    return from_iterable(s)


def to_string(xs: List) -> str:
    """Convert a List of characters back into a string."""
    check_list(xs, to_string)
    chars = list(xs)
    for c in chars:
        if not isinstance(c, str):
            raise TypeMismatchError(xs, to_string, "[str]")
    return "".join(chars)


def length(xs: List) -> int:
    check_list(xs, length)
    return len(xs)


@curried
def append(xs: List, ys: List) -> List:
    """Concatenate two lists (``++``). The result shares ``ys``."""
    check_list(xs, append)
    check_list(ys, append)
    if isinstance(xs, Nil):
        return ys
    return from_iterable(xs, ys)


def concat(xss: List) -> List:
    """Flatten a List of Lists. The result shares the last inner list."""
    check_list(xss, concat)
    parts = [check_list(xs, concat) for xs in xss]
    if not parts:
        return empty_list
    result = parts[-1]
    for part in reversed(parts[:-1]):
        result = from_iterable(part, result)
    return result


@curried
def map_(f: Callable[[Any], Any], xs: List) -> List:
    check_list(xs, map_)
    return from_iterable(f(x) for x in xs)


@curried
def ap(fs: List, xs: List) -> List:
    """Apply every function of ``fs`` to every element of ``xs`` (``<*>``).

    Results are grouped by function, in order. Functions may take more
    arguments than one; they come back partially applied::

        ap(list_of(take, take), list_of(1, 2))  # [take(1), take(2), take(1), take(2)]
    """
    check_list(fs, ap)
    check_list(xs, ap)
    return from_iterable(partial(f, x) for f in fs for x in xs)


@curried
def filter_(p: Callable[[Any], bool], xs: List) -> List:
    """Keep the elements for which the predicate returns ``True``."""
    check_list(xs, filter_)
    kept = []
    for x in xs:
        test = p(x)
        if test is True:
            kept.append(x)
        elif test is not False:
            raise TypeMismatchError(test, filter_, "bool from the predicate")
    return from_iterable(kept)


def reverse(xs: List) -> List:
    check_list(xs, reverse)
    result: List = empty_list
    for x in xs:
        result = Cons(x, result)
    return result


@curried
def foldr(f: Callable[[Any, Any], Any], z: Any, xs: List) -> Any:
    """Right fold with a binary function ``f(element, accumulator)``."""
    check_list(xs, foldr)
    acc = z
    for x in reversed(list(xs)):
        acc = f(x, acc)
    return acc


@curried
def foldl(f: Callable[[Any, Any], Any], z: Any, xs: List) -> Any:
    """Left fold with a binary function ``f(accumulator, element)``."""
    check_list(xs, foldl)
    acc = z
    for x in xs:
        acc = f(acc, x)
    return acc


@curried
def index(xs: List, n: int) -> Any:
    """Return the element at position ``n`` (``!!``)."""
    check_list(xs, index)
    if n < 0:
        msg = f"index: negative index {n}"
        raise IndexError(msg)
    node = xs
    for _ in range(n):
        if isinstance(node, Nil):
            break
        node = node.tail
    if isinstance(node, Nil):
        msg = f"index: index {n} too large"
        raise IndexError(msg)
    return node.head


def last(xs: List) -> Any:
    check_list(xs, last)
    if isinstance(xs, Nil):
        raise EmptyListError(last)
    node = xs
    while isinstance(node.tail, Cons):
        node = node.tail
    return node.head


def init(xs: List) -> List:
    """All elements but the last."""
    check_list(xs, init)
    if isinstance(xs, Nil):
        raise EmptyListError(init)
    return from_iterable(list(xs)[:-1])


@curried
def intersperse(sep: Any, xs: List) -> List:
    """Put ``sep`` between the elements of ``xs``.

    The separator must have the same type tag as the list's elements.
    """
    check_list(xs, intersperse)
    if isinstance(xs, Nil):
        return empty_list
    if tag_of(sep) != tag_of(xs.head):
        raise TypeMismatchError(sep, intersperse, tag_of(xs.head))
    items: list[Any] = []
    for x in xs:
        if items:
            items.append(sep)
        items.append(x)
    return from_iterable(items)


@curried
def intercalate(xs: List, xss: List) -> List:
    """Insert ``xs`` between the lists of ``xss`` and flatten the result."""
    check_list(xs, intercalate)
    check_list(xss, intercalate)
    return concat(intersperse(xs, xss))


def transpose(xss: List) -> List:
    """Swap the rows and columns of a List of Lists.

    Rows that run out are skipped::

        transpose([[10,11],[20],[],[30,31,32]]) == [[10,20,30],[11,31],[32]]
    """
    check_list(xss, transpose)
    rows = [check_list(row, transpose) for row in xss]
    columns = []
    rows = [row for row in rows if isinstance(row, Cons)]
    while rows:
        columns.append(from_iterable(row.head for row in rows))
        rows = [row.tail for row in rows if isinstance(row.tail, Cons)]
    return from_iterable(columns)
