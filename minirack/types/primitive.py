"""Natively implemented functions bound in the global frame."""

from __future__ import annotations

from typing import Callable

from minirack import Expression
from minirack.errors import MinirackArityError


class PrimitiveFunction:
    """A named native operation with a fixed or minimum arity.

    `params` names the required positional parameters; `rest`, when given,
    names the variadic tail and turns the arity into a minimum.
    """

    __slots__ = ("name", "fn", "params", "rest")

    def __init__(
        self,
        name: str,
        fn: Callable[[list[Expression]], Expression],
        params: tuple[str, ...] = (),
        rest: str | None = None,
    ):
        self.name = name
        self.fn = fn
        self.params = params
        self.rest = rest

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def variadic(self) -> bool:
        return self.rest is not None

    @property
    def signature(self) -> str:
        parts = [self.name, *self.params]
        if self.rest is not None:
            parts.append(f"{self.rest} ...")
        return "(" + " ".join(parts) + ")"

    def check_arity(self, args: list[Expression]) -> None:
        if self.variadic:
            if len(args) < self.arity:
                raise MinirackArityError(
                    f"Wrong number of arguments to {self.name}: expected at least {self.arity}, got {len(args)}"
                )
        elif len(args) != self.arity:
            raise MinirackArityError(
                f"Wrong number of arguments to {self.name}: expected {self.arity}, got {len(args)}"
            )

    def apply(self, args: list[Expression]) -> Expression:
        self.check_arity(args)
        return self.fn(args)

    def __str__(self):
        return f"#<function:{self.name}>"

    def __repr__(self):
        return str(self)
