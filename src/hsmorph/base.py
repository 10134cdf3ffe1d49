"""Base combinators: partial application, negation and composition.

Every public multi-argument function in hsmorph is wrapped with ``curried``,
so it may be called with fewer arguments than it needs and returns a
callable waiting for the rest::

    take(2, xs) == take(2)(xs)
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from hsmorph.errors import TypeMismatchError

F = TypeVar("F", bound=Callable[..., Any])

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(fn: Callable[..., Any]) -> tuple[int, bool]:
    """Return (required positional parameters, accepts ``*args``).

    Callables without an inspectable signature are treated as variadic, so
    they are always called directly.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0, True
    required = 0
    variadic = False
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL and param.default is param.empty:
            required += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
    return required, variadic


def partial(fn: Callable[..., Any], *args: Any) -> Any:
    """Apply ``fn`` to ``args``, currying in both directions.

    With too few arguments, returns a callable awaiting the rest. With too
    many, the result of the saturated call is applied to the remainder, so
    Haskell-style one-argument-at-a-time functions work as well.
    """
    required, variadic = positional_arity(fn)
    if len(args) < required:
        return functools.partial(fn, *args)
    if variadic or len(args) == required:
        return fn(*args)
    result = fn(*args[:required])
    return partial(result, *args[required:])


def curried(fn: F) -> F:
    """Decorator making ``fn`` accept its positional arguments piecemeal."""
    required, _ = positional_arity(fn)

    @functools.wraps(fn)
    def wrapper(*args: Any) -> Any:
        if len(args) >= required:
            return fn(*args)
        return functools.partial(wrapper, *args)

    return wrapper  # type: ignore[return-value]


def not_(value: Any) -> bool:
    """Boolean negation. Only ``True`` and ``False`` are accepted."""
    if value is True:
        return False
    if value is False:
        return True
    raise TypeMismatchError(value, not_, "bool")


@curried
def compose(f: Callable[[Any], Any], g: Callable[..., Any]) -> Callable[..., Any]:
    """Compose two functions: ``compose(f, g)(x) == f(g(x))``."""

    def composed(*args: Any) -> Any:
        return f(g(*args))

    return composed


def flip(f: Callable[[Any, Any], Any]) -> Callable[..., Any]:
    """Swap the first two arguments of a binary function."""

    @curried
    def flipped(a: Any, b: Any) -> Any:
        return partial(f, b, a)

    return flipped


def identity(x: Any) -> Any:
    return x


@curried
def constant(a: Any, b: Any) -> Any:
    """Return the first argument, ignoring the second."""
    return a
