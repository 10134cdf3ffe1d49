"""Tagged value core.

The library data types form a closed family of frozen dataclasses. Each one
carries a runtime type tag used for dispatch in the Eq, Ord and Monoid layers
and for error messages. Host values are tagged too, so that two operands can
always be checked for agreement before they are compared or combined.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterator

from hsmorph.errors import TypeMismatchError


class Value:
    """Base class for hsmorph data types.

    Python operators route through the type classes: ``==`` uses structural
    equality, the rich comparisons use ``compare`` and ``+`` uses ``mappend``.
    """

    __slots__ = ()

    tag: ClassVar[str] = "Value"

    def __eq__(self, other: object) -> bool:
        from hsmorph.eq import is_eq

        if not same_type(self, other):
            return False
        try:
            return is_eq(self, other)
        except TypeMismatchError:
            # Element types disagree, so the values cannot be equal.
            return False

    def __lt__(self, other: object) -> bool:
        from hsmorph.ord import less_than

        return less_than(self, other)

    def __le__(self, other: object) -> bool:
        from hsmorph.ord import less_than_or_equal

        return less_than_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        from hsmorph.ord import greater_than

        return greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        from hsmorph.ord import greater_than_or_equal

        return greater_than_or_equal(self, other)

    def __add__(self, other: object) -> Any:
        from hsmorph.monoid import mappend

        return mappend(self, other)


class List(Value):
    """Persistent singly-linked list: either ``Nil`` or ``Cons(head, tail)``."""

    __slots__ = ()

    tag: ClassVar[str] = "List"

    def __iter__(self) -> Iterator[Any]:
        node: List = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        count = 0
        node: List = self
        while isinstance(node, Cons):
            count += 1
            node = node.tail
        return count

    def __bool__(self) -> bool:
        return isinstance(self, Cons)

    def __repr__(self) -> str:
        if isinstance(self, Nil):
            return "[]"
        items = list(self)
        # Character lists print as strings, everything else in cons notation.
        if all(isinstance(x, str) and len(x) == 1 for x in items):
            return "[" + "".join(items) + "]"
        return "[" + "".join(f"{x!r}:" for x in items) + "[]]"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Nil(List):
    """The empty list."""

    def __hash__(self) -> int:
        return hash(("List", ()))


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Cons(List):
    """A list cell. ``tail`` is shared, never copied.

    Hashing hashes every element, so a List holding unhashable host values
    (a Python ``list``, say) cannot go in a set or be a dict key.
    """

    head: Any
    tail: List

    def __hash__(self) -> int:
        return hash(("List", tuple(self)))


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Tuple(Value):
    """Fixed-arity immutable product. Arity is part of the type."""

    tag: ClassVar[str] = "Tuple"

    values: tuple[Any, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]

    def __hash__(self) -> int:
        return hash(("Tuple", self.values))

    def __repr__(self) -> str:
        return "(" + ", ".join(repr(v) for v in self.values) + ")"


class Maybe(Value):
    """Optional value: ``Nothing`` or ``Just(value)``."""

    __slots__ = ()

    tag: ClassVar[str] = "Maybe"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class NothingType(Maybe):
    """The absent value."""

    def __hash__(self) -> int:
        return hash(("Maybe", None))

    def __repr__(self) -> str:
        return "Nothing"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Just(Maybe):
    """A present value."""

    value: Any

    def __hash__(self) -> int:
        return hash(("Maybe", self.value))

    def __repr__(self) -> str:
        return f"Just {self.value!r}"


class Ordering(Enum):
    """Result of ``compare``."""

    LT = -1
    EQ = 0
    GT = 1

    def __repr__(self) -> str:
        return self.name


# Singleton instances
empty_list = Nil()
Nothing = NothingType()
unit = Tuple(())


def tag_of(value: Any) -> str:
    """Return the runtime type tag of any value."""
    match value:
        case Value():
            return value.tag
        case Ordering():
            return "Ordering"
        case bool():
            return "bool"
        case int() | float():
            return "number"
        case str():
            return "str"
        case None:
            return "None"
        case type():
            return "type"
        case _ if callable(value):
            return "function"
        case _:
            return type(value).__name__


def type_of(value: Any) -> str:
    """Describe the type of a value, e.g. ``(number, [str])``."""
    match value:
        case Tuple():
            return "(" + ", ".join(type_of(v) for v in value.values) + ")"
        case Cons():
            return f"[{type_of(value.head)}]"
        case Nil():
            return "[a]"
        case Just():
            return f"Maybe {type_of(value.value)}"
        case NothingType():
            return "Maybe a"
        case _:
            return tag_of(value)


def same_type(a: Any, b: Any) -> bool:
    """Check that two values share a tag (and an arity, for tuples)."""
    if tag_of(a) != tag_of(b):
        return False
    if isinstance(a, Tuple):
        return a.arity == b.arity
    return True


def lookup_instance(registry: dict[type, Any], value: Any) -> Any:
    """Find the instance registered for ``value``'s class or nearest base."""
    for cls in type(value).__mro__:
        if cls in registry:
            return registry[cls]
    return None
