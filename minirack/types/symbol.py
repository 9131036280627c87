"""Symbols: identifiers in source code and keys in frames."""

from __future__ import annotations
import sys


class Symbol:
    """A name such as `x` or `list-ref`.

    Two symbols are equal iff their names are equal. Names are interned, so
    hashing and comparison stay cheap for frame lookups.
    """

    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError(f"Symbol name must be a non-empty string, got {name!r}")
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
