"""Lexical frames for minirack.

A Frame stores bindings of Symbols to evaluated values and supports nested
scopes via a `parent` link. The global frame has no parent; every closure
application creates one child frame whose parent is the closure's defining
frame, so chains are always acyclic.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minirack import Expression
from minirack.errors import MinirackInvalidSymbol, MinirackUnboundVariable
from minirack.types.primitive import PrimitiveFunction
from minirack.types.symbol import Symbol


class Frame:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Frame] = None):
        self.vars: dict[Symbol, Expression] = {}
        self.parent: Frame | None = parent

    def define(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this frame only, overwriting any binding here.

        Raises MinirackInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MinirackInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that contains `symbol`."""
        frame: Optional[Frame] = self
        while frame is not None:
            if symbol in frame.vars:
                return frame
            frame = frame.parent
        return None

    def set(self, name: Symbol, value: Expression) -> None:
        """Update an existing binding for `name` in the frame chain.

        Raises MinirackUnboundVariable if the symbol is not bound anywhere.
        """
        frame = self.find(name)
        if frame is None:
            raise MinirackUnboundVariable(f"Cannot set unbound variable {name}")
        frame.vars[name] = value

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`, searching parents on a miss.

        Raises MinirackUnboundVariable if not found.
        """
        frame = self.find(name)
        if frame is None:
            raise MinirackUnboundVariable(f"Unbound variable: {name}")
        return frame.vars[name]

    def reverse_lookup(self, value: Expression) -> Optional[Symbol]:
        """Return a symbol bound to `value` in this frame or an ancestor.

        Only used to name functions when printing them.
        """
        frame: Optional[Frame] = self
        while frame is not None:
            for k, v in frame.vars.items():
                if v is value or v == value:
                    return k
            frame = frame.parent
        return None

    def update(self, mapping: dict[Symbol, Expression]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's user bindings into the buffer in a compact form."""
        buffer.write("Frame:{")
        first = True
        for k, v in self.vars.items():
            if isinstance(v, PrimitiveFunction):
                continue
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}={v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        frame: Optional[Frame] = self
        while frame is not None:
            with StringIO() as frame_buf:
                frame._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
            frame = frame.parent
        return "<Frame chain: " + " -> ".join(chain) + ">"
