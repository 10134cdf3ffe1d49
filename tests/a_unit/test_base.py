"""Unit tests for hsmorph.base combinators."""

from __future__ import annotations

import pytest

from hsmorph import (
    TypeMismatchError,
    compose,
    constant,
    curried,
    flip,
    identity,
    not_,
    partial,
)


class TestPartial:
    """Tests for partial application."""

    def test_saturated_call(self) -> None:
        assert partial(lambda a, b: a - b, 5, 3) == 2

    def test_missing_arguments(self) -> None:
        subtract = partial(lambda a, b: a - b, 5)
        assert subtract(3) == 2

    def test_extra_arguments_apply_to_result(self) -> None:
        add = lambda a: lambda b: a + b  # noqa: E731
        assert partial(add, 1, 2) == 3

    def test_variadic_called_directly(self) -> None:
        assert partial(max, 1, 5, 3) == 5

    def test_curried_decorator(self) -> None:
        @curried
        def add3(a, b, c):
            return a + b + c

        assert add3(1, 2, 3) == 6
        assert add3(1)(2)(3) == 6
        assert add3(1, 2)(3) == 6
        assert add3.__name__ == "add3"


class TestCombinators:
    def test_not(self) -> None:
        assert not_(True) is False
        assert not_(False) is True

    def test_not_requires_bool(self) -> None:
        with pytest.raises(TypeMismatchError):
            not_(0)

    def test_compose(self) -> None:
        inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
        assert inc_then_double(3) == 8
        assert compose(not_)(lambda x: x > 1)(0) is True

    def test_flip(self) -> None:
        assert flip(lambda a, b: a - b)(1, 10) == 9
        assert flip(lambda a, b: a - b)(1)(10) == 9

    def test_identity_and_constant(self) -> None:
        assert identity(4) == 4
        assert constant(1, 2) == 1
        assert constant(1)(2) == 1
