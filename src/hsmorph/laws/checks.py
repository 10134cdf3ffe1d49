"""Executable checks of the algebraic laws the library promises.

Each check takes concrete arguments and returns a ``LawResult`` saying whether
the law held for them, with a short description of what was observed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hsmorph.base import partial
from hsmorph.eq import is_eq
from hsmorph.lists import append, concat, head, is_empty, last, length
from hsmorph.maybes import from_just, is_just
from hsmorph.monoid import mappend, mempty
from hsmorph.sub import drop, group_by, span, strip_prefix, take
from hsmorph.tuples import fst, snd
from hsmorph.types import List


@dataclass(frozen=True)
class LawResult:
    """Outcome of one law check.

    Attributes:
        law: Law identifier, e.g. ``"take_drop"``.
        passed: Whether the law held.
        detail: Human readable description of the observed values.
    """

    law: str
    passed: bool
    detail: str = ""


def check_take_drop(n: int, xs: List) -> LawResult:
    """``take(n, xs) ++ drop(n, xs) == xs``."""
    rebuilt = append(take(n, xs), drop(n, xs))
    return LawResult(
        law="take_drop",
        passed=is_eq(rebuilt, xs),
        detail=f"n={n}: {rebuilt!r}",
    )


def check_span(p: Callable[[Any], bool], xs: List) -> LawResult:
    """``span`` partitions ``xs`` at the first element failing ``p``."""
    result = span(p, xs)
    prefix, rest = fst(result), snd(result)
    rebuilt = is_eq(append(prefix, rest), xs)
    prefix_holds = all(p(x) for x in prefix)
    stops = is_empty(rest) or p(head(rest)) is False
    return LawResult(
        law="span",
        passed=rebuilt and prefix_holds and stops,
        detail=f"{result!r}",
    )


def check_group_by(eq: Callable[..., bool], xs: List) -> LawResult:
    """Groups are non-empty, related inside, unrelated across, and flatten to ``xs``.

    The boundary condition only holds for transitive ``eq``.
    """
    groups = group_by(eq, xs)
    rebuilt = is_eq(concat(groups), xs)
    non_empty = all(not is_empty(g) for g in groups)
    related = True
    for g in groups:
        items = list(g)
        related = related and all(partial(eq, a, b) for a, b in zip(items, items[1:]))
    runs = list(groups)
    maximal = all(
        partial(eq, last(left), head(right)) is False
        for left, right in zip(runs, runs[1:])
    )
    return LawResult(
        law="group_by",
        passed=rebuilt and non_empty and related and maximal,
        detail=f"{length(groups)} group(s): {groups!r}",
    )


def check_strip_prefix(as_: List, bs: List) -> LawResult:
    """``strip_prefix(as_, bs) == Just(ys)`` iff ``bs == as_ ++ ys``."""
    result = strip_prefix(as_, bs)
    n = length(as_)
    is_prefix = length(bs) >= n and is_eq(take(n, bs), as_)
    if is_just(result):
        passed = is_prefix and is_eq(append(as_, from_just(result)), bs)
    else:
        passed = not is_prefix
    return LawResult(law="strip_prefix", passed=passed, detail=f"{result!r}")


def check_monoid_identity(x: Any) -> LawResult:
    """``mempty <> x == x == x <> mempty``."""
    identity = mempty(x)
    left = mappend(identity, x)
    right = mappend(x, identity)
    return LawResult(
        law="monoid_identity",
        passed=is_eq(left, x) and is_eq(right, x),
        detail=f"mempty={identity!r}",
    )


def check_monoid_associativity(a: Any, b: Any, c: Any) -> LawResult:
    """``(a <> b) <> c == a <> (b <> c)``."""
    left = mappend(mappend(a, b), c)
    right = mappend(a, mappend(b, c))
    return LawResult(
        law="monoid_associativity",
        passed=is_eq(left, right),
        detail=f"{left!r}",
    )


LAWS: dict[str, Callable[..., LawResult]] = {
    "take_drop": check_take_drop,
    "span": check_span,
    "group_by": check_group_by,
    "strip_prefix": check_strip_prefix,
    "monoid_identity": check_monoid_identity,
    "monoid_associativity": check_monoid_associativity,
}
