"""Unit tests for the Eq, Ord and Monoid type classes."""

from __future__ import annotations

import pytest

from hsmorph import (
    EQ,
    GT,
    LT,
    Nothing,
    TypeMismatchError,
    compare,
    empty_list,
    from_string,
    greater_than,
    greater_than_or_equal,
    is_eq,
    is_not_eq,
    just,
    less_than,
    less_than_or_equal,
    list_of,
    mappend,
    max_,
    mconcat,
    mempty,
    min_,
    register_eq,
    register_monoid,
    register_ord,
    tuple_,
    unit,
)


class Celsius:
    """A user class with identity-only equality."""

    def __init__(self, degrees: float) -> None:
        self.degrees = degrees


class Sum:
    def __init__(self, n: int) -> None:
        self.n = n

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sum) and self.n == other.n

    __hash__ = None  # type: ignore[assignment]


register_eq(Celsius, lambda a, b: a.degrees == b.degrees)
register_ord(Celsius, lambda a, b: compare(a.degrees, b.degrees))
register_monoid(Sum, lambda _: Sum(0), lambda a, b: Sum(a.n + b.n))


class TestEq:
    """Tests for is_eq."""

    def test_primitives(self) -> None:
        assert is_eq(1, 1)
        assert is_eq(1, 1.0)
        assert not is_eq("a", "b")

    def test_lists(self) -> None:
        assert is_eq(list_of(1, 2, 3), list_of(1, 2, 3))
        assert not is_eq(list_of(1, 2, 3), list_of(1, 2))
        assert is_eq(empty_list, list_of())

    def test_nested_lists(self) -> None:
        xss = list_of(list_of(1), list_of(2, 3))
        assert is_eq(xss, list_of(list_of(1), list_of(2, 3)))
        assert not is_eq(xss, list_of(list_of(1), list_of(2, 4)))

    def test_tuples(self) -> None:
        assert is_eq(tuple_(1, 2), tuple_(1, 2))
        assert not is_eq(tuple_(1, 2), tuple_(3, 4))

    def test_tuple_arity_is_part_of_type(self) -> None:
        with pytest.raises(TypeMismatchError):
            is_eq(tuple_(1, 2), tuple_(1, 2, 3))
        assert tuple_(1, 2) != tuple_(1, 2, 3)

    def test_maybe(self) -> None:
        assert is_eq(just(1), just(1))
        assert not is_eq(just(1), Nothing)
        assert is_eq(Nothing, Nothing)

    def test_mismatched_tags(self) -> None:
        with pytest.raises(TypeMismatchError):
            is_eq(1, "1")
        with pytest.raises(TypeMismatchError):
            is_eq(list_of(1), just(1))

    def test_mismatched_element_types(self) -> None:
        with pytest.raises(TypeMismatchError):
            is_eq(list_of(1), list_of("1"))
        assert list_of(1) != list_of("1")

    def test_registered_instance(self) -> None:
        assert is_eq(Celsius(20), Celsius(20))
        assert not is_eq(Celsius(20), Celsius(21))

    def test_missing_instance(self) -> None:
        with pytest.raises(TypeMismatchError):
            is_eq(object(), object())

    def test_is_not_eq(self) -> None:
        assert is_not_eq(list_of(1), list_of(2))
        assert not is_not_eq(list_of(1), list_of(1))

    def test_curried(self) -> None:
        is_one = is_eq(1)
        assert is_one(1)
        assert not is_one(2)

    def test_operator_equality(self) -> None:
        assert list_of(1, 2) == list_of(1, 2)
        assert list_of(1, 2) != [1, 2]
        assert just(list_of(1)) == just(list_of(1))


class TestOrd:
    """Tests for compare and the derived comparisons."""

    def test_primitives(self) -> None:
        assert compare(1, 2) is LT
        assert compare(2, 2) is EQ
        assert compare("b", "a") is GT

    def test_lists_lexicographic(self) -> None:
        assert compare(list_of(1, 2), list_of(1, 3)) is LT
        assert compare(list_of(1, 2), list_of(1, 2, 0)) is LT
        assert compare(list_of(2), list_of(1, 9, 9)) is GT
        assert compare(empty_list, empty_list) is EQ

    def test_tuples_componentwise(self) -> None:
        assert compare(tuple_(1, 2), tuple_(1, 3)) is LT
        assert compare(tuple_(2, 0), tuple_(1, 9)) is GT

    def test_maybe_nothing_first(self) -> None:
        assert compare(Nothing, just(0)) is LT
        assert compare(just(0), Nothing) is GT
        assert compare(just(1), just(2)) is LT
        assert compare(Nothing, Nothing) is EQ

    def test_ordering_is_ordered(self) -> None:
        assert compare(LT, GT) is LT
        assert compare(GT, EQ) is GT

    def test_mismatched_types(self) -> None:
        with pytest.raises(TypeMismatchError):
            compare(list_of(1), 1)
        with pytest.raises(TypeMismatchError):
            compare(tuple_(1, 2), tuple_(1, 2, 3))

    def test_registered_instance(self) -> None:
        assert compare(Celsius(10), Celsius(20)) is LT

    def test_derived(self) -> None:
        assert less_than(1, 2)
        assert less_than_or_equal(2, 2)
        assert greater_than(list_of(2), list_of(1))
        assert greater_than_or_equal(just(1), Nothing)
        assert max_(list_of(1), list_of(2)) == list_of(2)
        assert min_(list_of(1), list_of(2)) == list_of(1)

    def test_operators(self) -> None:
        assert list_of(1, 2) < list_of(1, 3)
        assert tuple_(1, 2) <= tuple_(1, 2)
        assert just(2) > just(1)
        assert sorted([list_of(3), list_of(1), list_of(2)]) == [
            list_of(1),
            list_of(2),
            list_of(3),
        ]


class TestMonoid:
    """Tests for mempty, mappend and mconcat."""

    def test_mempty(self) -> None:
        assert mempty(list_of(1, 2, 3)) is empty_list
        assert mempty(just(list_of(1))) is Nothing
        assert mempty(tuple_(list_of(1), list_of(2))) == tuple_(empty_list, empty_list)
        assert mempty(unit) == unit
        assert mempty(GT) is EQ

    def test_mempty_requires_monoid(self) -> None:
        with pytest.raises(TypeMismatchError):
            mempty(0)

    def test_mappend_lists(self) -> None:
        lst1, lst2, lst3 = list_of(1, 2, 3), list_of(4, 5, 6), list_of(7, 8, 9)
        assert mappend(lst1, lst2) == list_of(1, 2, 3, 4, 5, 6)
        assert mappend(mempty(lst1), lst1) is lst1
        assert mappend(lst1, mappend(lst2, lst3)) == mappend(mappend(lst1, lst2), lst3)

    def test_mappend_maybes(self) -> None:
        mb1, mb2 = just(list_of(1, 2, 3)), just(list_of(4, 5, 6))
        assert mappend(mb1, mb2) == just(list_of(1, 2, 3, 4, 5, 6))
        assert mappend(mempty(mb1), mb1) is mb1
        assert mappend(mb1, Nothing) is mb1

    def test_mappend_tuples(self) -> None:
        tup1 = tuple_(list_of(1, 2, 3), list_of(4, 5, 6))
        tup2 = tuple_(list_of(4, 5, 6), list_of(1, 2, 3))
        expected = tuple_(list_of(1, 2, 3, 4, 5, 6), list_of(4, 5, 6, 1, 2, 3))
        assert mappend(tup1, tup2) == expected
        assert mappend(mempty(tup1), tup1) == tup1

    def test_mappend_orderings(self) -> None:
        assert mappend(EQ, LT) is LT
        assert mappend(GT, LT) is GT

    def test_mappend_plus_operator(self) -> None:
        assert list_of(1) + list_of(2) == list_of(1, 2)

    def test_mappend_rejects_non_monoids(self) -> None:
        with pytest.raises(TypeMismatchError):
            mappend(0, 1)

    def test_mappend_rejects_mixed_types(self) -> None:
        with pytest.raises(TypeMismatchError):
            mappend(list_of(1), just(list_of(1)))

    def test_registered_monoid(self) -> None:
        assert mappend(Sum(2), Sum(3)) == Sum(5)
        assert mempty(Sum(7)) == Sum(0)
        assert mconcat(list_of(Sum(1), Sum(2), Sum(3))) == Sum(6)

    def test_mconcat_lists(self) -> None:
        lst6 = list_of(list_of(1, 2, 3), list_of(4, 5, 6), list_of(7, 8, 9))
        assert mconcat(lst6) == list_of(1, 2, 3, 4, 5, 6, 7, 8, 9)

    def test_mconcat_maybes(self) -> None:
        ms = list_of(just(from_string("ab")), Nothing, just(from_string("c")))
        assert mconcat(ms) == just(from_string("abc"))

    def test_mconcat_empty(self) -> None:
        assert mconcat(empty_list) is empty_list

    def test_mconcat_requires_list(self) -> None:
        with pytest.raises(TypeMismatchError):
            mconcat([list_of(1)])
