"""Core evaluator for the minirack interpreter.

Dispatches on the expression variant and, for non-empty lists, on the head
symbol: special forms first, ordinary application otherwise. Recursion uses
the host stack; there is no tail-call elimination.
"""

from __future__ import annotations

import logging

from minirack import Expression
from minirack.errors import (
    MinirackEmptyListEvaluation,
    MinirackNotAFunction,
    MinirackTypeError,
)
from minirack.evaluation.apply import apply
from minirack.evaluation.special_forms import SPECIAL_FORMS
from minirack.printer import detailed_string
from minirack.types.boolean import Boolean
from minirack.types.closure import Closure
from minirack.types.cons import Cons, EmptyList
from minirack.types.frame import Frame
from minirack.types.primitive import PrimitiveFunction
from minirack.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, frame: Frame) -> Expression:
    """Evaluate `expr` in `frame` and return its value."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Evaluating: %s", detailed_string(expr))

    match expr:
        case EmptyList():
            raise MinirackEmptyListEvaluation(f"Can't evaluate the empty list: {expr}")

        case Cons(car=Symbol() as head, cdr=tail) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](list(tail), frame, evaluate)

        case Cons(car=head, cdr=tail):
            fn = evaluate(head, frame)
            if not isinstance(fn, (PrimitiveFunction, Closure)):
                raise MinirackNotAFunction(f"Can't call {fn} as a function")
            # Arguments are evaluated left to right in the caller's frame.
            args = [evaluate(arg, frame) for arg in tail]
            return apply(fn, args, evaluate)

        case Symbol():
            return frame.lookup(expr)

        # --- Self-evaluating values ---
        case Boolean() | int() | PrimitiveFunction() | Closure():
            return expr

    raise MinirackTypeError(f"Cannot evaluate {expr!r}")
