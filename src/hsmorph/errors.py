"""Exceptions raised by hsmorph functions.

Every library error derives from ``HaskError`` and from the builtin exception
closest in meaning, so callers may catch either.
"""

from __future__ import annotations

from typing import Any


def operation_name(operation: Any) -> str:
    """Return a printable name for a function or an already formatted name."""
    if isinstance(operation, str):
        return operation
    return getattr(operation, "__name__", repr(operation))


class HaskError(Exception):
    """Base class for hsmorph errors."""


class EmptyListError(HaskError, IndexError):
    """Raised when an operation needs a non-empty list."""

    def __init__(self, operation: Any) -> None:
        self.operation = operation_name(operation)
        msg = f"{self.operation}: empty list"
        super().__init__(msg)


class TypeMismatchError(HaskError, TypeError):
    """Raised when a value lacks the tag or instance an operation requires.

    Attributes:
        value: The offending value.
        operation: Name of the function that rejected it.
        expected: Optional description of what was expected instead.
    """

    def __init__(self, value: Any, operation: Any, expected: str | None = None) -> None:
        self.value = value
        self.operation = operation_name(operation)
        self.expected = expected
        msg = f"{value!r} is not a valid argument to {self.operation}"
        if expected:
            msg += f" (expected {expected})"
        super().__init__(msg)
