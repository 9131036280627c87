"""List cells for minirack.

A list is either the canonical EMPTY sentinel or a Cons cell whose cdr is
itself a list. Improper pairs such as (cons 1 2) cannot be built.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from minirack import Expression
from minirack.errors import MinirackTypeError


class EmptyList:
    __slots__ = ()
    _instance: EmptyList | None = None

    def __new__(cls):
        # One empty list per process; compared by identity
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __iter__(self) -> Iterator[Expression]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __eq__(self, other):
        return other is self

    def __hash__(self) -> int:
        return hash(())

    def __repr__(self):
        return "()"


EMPTY = EmptyList()


class Cons:
    """A pair cell holding a car and a list-valued cdr."""

    __slots__ = ("car", "cdr")
    __match_args__ = ("car", "cdr")

    def __init__(self, car: Expression, cdr: LispList):
        if not isinstance(cdr, (Cons, EmptyList)):
            raise MinirackTypeError(f"The cdr of a pair must be a list, got {cdr}")
        self.car: Expression = car
        self.cdr: LispList = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[Expression]) -> LispList:
        """Build a list bottom-up from EMPTY; returns EMPTY for no items."""
        result: LispList = EMPTY
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[Expression]:
        node: LispList = self
        while node is not EMPTY:
            yield node.car
            node = node.cdr

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Cons):
            return NotImplemented
        a: LispList = self
        b: LispList = other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if not a.car == b.car:
                return False
            a, b = a.cdr, b.cdr
        return a is b

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self):
        return "(" + " ".join(str(item) for item in self) + ")"

    def __repr__(self):
        return f"Cons({self.car!r}, {self.cdr!r})"


LispList = Union[Cons, EmptyList]
