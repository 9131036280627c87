"""Application engine for minirack.

Closures get one fresh child frame of their defining frame per call, which is
what makes scoping lexical: the caller's frame is never consulted.
Primitives check their own arity and run natively.
"""

import logging

from minirack import Expression, EvaluatorFn
from minirack.errors import MinirackNotAFunction
from minirack.printer import detailed_string
from minirack.types.closure import Closure
from minirack.types.primitive import PrimitiveFunction

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure, args: list[Expression], evaluate_fn: EvaluatorFn
) -> Expression:
    """Apply a user-defined closure to already-evaluated arguments.

    Raises MinirackArityError when the argument count differs from the
    number of formals.
    """
    new_frame = fn.extend_env(args)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Applying: %s", detailed_string(fn))
    return evaluate_fn(fn.body, new_frame)


def apply(
    head: Closure | PrimitiveFunction | object,
    args: list[Expression],
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply either a Closure or a PrimitiveFunction; anything else is an error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, PrimitiveFunction):
        return head.apply(args)
    else:
        raise MinirackNotAFunction(f"Can't call {head} as a function")
