"""Display and diagnostic renderings of minirack values.

`display_string` is what the REPL echoes; `detailed_string` is the verbose
form used by debug tracing. Neither has any effect on evaluation.
"""

from __future__ import annotations

from minirack import Expression
from minirack.types.boolean import Boolean
from minirack.types.closure import Closure
from minirack.types.cons import Cons, EmptyList
from minirack.types.primitive import PrimitiveFunction
from minirack.types.symbol import Symbol


def display_string(expr: Expression) -> str:
    return str(expr)


def detailed_string(expr: Expression) -> str:
    match expr:
        case Symbol():
            return f"[SYM {expr}]"
        case Boolean():
            return f"[BOOL {expr}]"
        case int():
            return f"[INT {expr}]"
        case EmptyList():
            return "[List]"
        case Cons():
            return "[List " + " ".join(detailed_string(item) for item in expr) + "]"
        case PrimitiveFunction():
            return f"[Primitive:{expr.name}]"
        case Closure():
            params = "(" + " ".join(str(f) for f in expr.formals) + ")"
            return f"[Func:{expr.name} {params} {expr.body} {expr.env}]"
    return repr(expr)
