"""Unit tests for hsmorph.tuples, hsmorph.maybes and value tags."""

from __future__ import annotations

import pytest

from hsmorph import (
    Nothing,
    TypeMismatchError,
    cat_maybes,
    curry,
    empty_list,
    from_just,
    from_maybe,
    fst,
    is_just,
    is_maybe,
    is_nothing,
    is_tuple,
    just,
    list_of,
    map_maybe,
    maybe,
    snd,
    swap,
    tag_of,
    tuple_,
    tuple_from,
    type_of,
    uncurry,
    unit,
)


class TestTuple:
    """Tests for Tuple functions."""

    def test_fst_snd(self) -> None:
        p = tuple_(1, 2)
        assert fst(p) == 1
        assert snd(p) == 2

    def test_tuple_from(self) -> None:
        assert tuple_from([1, 2]) == tuple_(1, 2)

    def test_swap(self) -> None:
        assert swap(tuple_(3, 4)) == tuple_(4, 3)

    def test_is_tuple(self) -> None:
        assert is_tuple(swap(tuple_(3, 4)))
        assert not is_tuple((3, 4))

    def test_arity_at_least_two(self) -> None:
        with pytest.raises(TypeMismatchError):
            tuple_(1)

    def test_pair_functions_reject_other_arities(self) -> None:
        with pytest.raises(TypeMismatchError):
            fst(tuple_(10, 20, 30))
        with pytest.raises(TypeMismatchError):
            snd((1, 2))

    def test_curry(self) -> None:
        def subtract_pair(p):
            return fst(p) - snd(p)

        assert curry(subtract_pair, 100, 98) == 2
        assert curry(subtract_pair)(100)(98) == 2

    def test_uncurry(self) -> None:
        assert uncurry(lambda a, b: a - b, tuple_(3, 4)) == -1
        assert uncurry(lambda a, b, c: a + b + c, tuple_(1, 2, 3)) == 6

    def test_uncurry_requires_tuple(self) -> None:
        with pytest.raises(TypeMismatchError):
            uncurry(lambda a, b: a, (1, 2))

    def test_repr_and_type(self) -> None:
        p = tuple_(1, 2)
        assert repr(p) == "(1, 2)"
        assert type_of(p) == "(number, number)"
        assert type_of(tuple_(1, list_of("a"))) == "(number, [str])"

    def test_unit(self) -> None:
        assert unit.arity == 0
        assert repr(unit) == "()"

    def test_hashable(self) -> None:
        assert hash(tuple_(1, 2)) == hash(tuple_(1, 2))


class TestMaybe:
    """Tests for Maybe functions."""

    def test_constructors(self) -> None:
        assert is_just(just(1))
        assert is_nothing(Nothing)
        assert is_maybe(Nothing)
        assert not is_maybe(None)

    def test_is_just_requires_maybe(self) -> None:
        with pytest.raises(TypeMismatchError):
            is_just(1)

    def test_from_just(self) -> None:
        assert from_just(just(5)) == 5
        with pytest.raises(TypeMismatchError):
            from_just(Nothing)

    def test_from_maybe(self) -> None:
        assert from_maybe(0, just(5)) == 5
        assert from_maybe(0, Nothing) == 0

    def test_maybe(self) -> None:
        assert maybe(0, lambda x: x + 1, just(5)) == 6
        assert maybe(0, lambda x: x + 1, Nothing) == 0

    def test_cat_maybes(self) -> None:
        ms = list_of(just(1), Nothing, just(3))
        assert cat_maybes(ms) == list_of(1, 3)
        assert cat_maybes(empty_list) is empty_list

    def test_map_maybe(self) -> None:
        def half(x):
            return just(x // 2) if x % 2 == 0 else Nothing

        assert map_maybe(half, list_of(1, 2, 3, 4)) == list_of(1, 2)

    def test_repr(self) -> None:
        assert repr(just(list_of(1))) == "Just [1:[]]"
        assert repr(Nothing) == "Nothing"


class TestTags:
    def test_tags(self) -> None:
        assert tag_of(list_of(1)) == "List"
        assert tag_of(tuple_(1, 2)) == "Tuple"
        assert tag_of(Nothing) == "Maybe"
        assert tag_of(1) == "number"
        assert tag_of(1.5) == "number"
        assert tag_of(True) == "bool"
        assert tag_of("a") == "str"
        assert tag_of(len) == "function"
