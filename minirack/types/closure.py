"""User-defined function values created by evaluating a lambda form."""

from __future__ import annotations

from minirack import Expression
from minirack.errors import MinirackArityError
from minirack.types.frame import Frame
from minirack.types.symbol import Symbol


class Closure:
    """Formal parameters, a body, and the frame the lambda was evaluated in."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Expression, env: Frame):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: Expression = body
        self.env: Frame = env

    @property
    def name(self) -> str:
        """The name this closure is bound to, or 'anonymous'."""
        sym = self.env.reverse_lookup(self)
        return "anonymous" if sym is None else str(sym)

    def __str__(self) -> str:
        return f"#<function:{self.name}>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[Expression]) -> Frame:
        """
        Bind the given argument values to this closure's formal parameters and
        return the new child of the defining frame to evaluate the body in.
        """
        if len(args) != len(self.formals):
            raise MinirackArityError(
                f"Wrong number of arguments to {self.name}: expected {len(self.formals)}, got {len(args)}"
            )
        frame = Frame(parent=self.env)
        for formal, arg in zip(self.formals, args):
            frame.define(formal, arg)
        return frame
