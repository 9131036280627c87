from __future__ import annotations


class Boolean:
    """The two boolean literals, #t and #f.

    Kept distinct from Python's bool so that 1 and #t never compare equal.
    Use TRUE/FALSE (or to_boolean) instead of constructing new instances.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self):
        return "#t" if self.value else "#f"

    def __str__(self):
        return repr(self)

    def __eq__(self, other):
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self):
        return hash(("boolean", self.value))


TRUE = Boolean(True)
FALSE = Boolean(False)


def to_boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def is_true(value) -> bool:
    # Only the literal #t counts as true; 0, () and #f all select the else branch.
    return isinstance(value, Boolean) and value.value
