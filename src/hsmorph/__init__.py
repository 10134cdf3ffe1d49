"""hsmorph: Haskell-style data types and morphisms for Python."""

from __future__ import annotations

from hsmorph.base import compose, constant, curried, flip, identity, not_, partial
from hsmorph.eq import is_eq, is_not_eq, register_eq
from hsmorph.errors import EmptyListError, HaskError, TypeMismatchError
from hsmorph.lists import (
    ap,
    append,
    concat,
    cons,
    filter_,
    foldl,
    foldr,
    from_iterable,
    from_string,
    head,
    index,
    init,
    intercalate,
    intersperse,
    is_empty,
    is_list,
    last,
    length,
    list_of,
    map_,
    reverse,
    tail,
    to_string,
    transpose,
)
from hsmorph.maybes import (
    cat_maybes,
    from_just,
    from_maybe,
    is_just,
    is_maybe,
    is_nothing,
    just,
    map_maybe,
    maybe,
)
from hsmorph.monoid import mappend, mconcat, mempty, register_monoid
from hsmorph.ord import (
    EQ,
    GT,
    LT,
    compare,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    max_,
    min_,
    register_ord,
)
from hsmorph.sub import (
    break_,
    drop,
    drop_while,
    group,
    group_by,
    span,
    span_not,
    split_at,
    strip_prefix,
    take,
    take_while,
)
from hsmorph.tuples import curry, fst, is_tuple, snd, swap, tuple_, tuple_from, uncurry
from hsmorph.types import (
    Cons,
    Just,
    List,
    Maybe,
    Nil,
    Nothing,
    NothingType,
    Ordering,
    Tuple,
    empty_list,
    tag_of,
    type_of,
    unit,
)

__all__ = [
    "EQ",
    "GT",
    "LT",
    "Cons",
    "EmptyListError",
    "HaskError",
    "Just",
    "List",
    "Maybe",
    "Nil",
    "Nothing",
    "NothingType",
    "Ordering",
    "Tuple",
    "TypeMismatchError",
    "ap",
    "append",
    "break_",
    "cat_maybes",
    "compare",
    "compose",
    "concat",
    "cons",
    "constant",
    "curried",
    "curry",
    "drop",
    "drop_while",
    "empty_list",
    "filter_",
    "flip",
    "foldl",
    "foldr",
    "from_iterable",
    "from_just",
    "from_maybe",
    "from_string",
    "fst",
    "greater_than",
    "greater_than_or_equal",
    "group",
    "group_by",
    "head",
    "identity",
    "index",
    "init",
    "intercalate",
    "intersperse",
    "is_empty",
    "is_eq",
    "is_just",
    "is_list",
    "is_maybe",
    "is_not_eq",
    "is_nothing",
    "is_tuple",
    "just",
    "last",
    "length",
    "less_than",
    "less_than_or_equal",
    "list_of",
    "map_",
    "map_maybe",
    "mappend",
    "max_",
    "maybe",
    "mconcat",
    "mempty",
    "min_",
    "not_",
    "partial",
    "register_eq",
    "register_monoid",
    "register_ord",
    "reverse",
    "snd",
    "span",
    "span_not",
    "split_at",
    "strip_prefix",
    "swap",
    "tag_of",
    "tail",
    "take",
    "take_while",
    "to_string",
    "transpose",
    "tuple_",
    "tuple_from",
    "type_of",
    "uncurry",
    "unit",
]
