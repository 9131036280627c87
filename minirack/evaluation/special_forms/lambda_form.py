from minirack import EvaluatorFn
from minirack import Expression
from minirack.errors import MinirackMalformedForm
from minirack.types.closure import Closure
from minirack.types.cons import Cons, EmptyList
from minirack.types.frame import Frame
from minirack.types.symbol import Symbol


def lambda_form(
    tail: list[Expression],
    frame: Frame,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (lambda (params) body) takes exactly one body expression.
    if len(tail) != 2:
        raise MinirackMalformedForm(
            f"lambda requires a parameter list and a single body, got {len(tail)} parts"
        )

    params, body = tail
    if not isinstance(params, (Cons, EmptyList)):
        raise MinirackMalformedForm(f"lambda parameters must be a list, got {params}")
    formals = list(params)
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise MinirackMalformedForm(f"lambda parameter must be a symbol, got {formal}")

    return Closure(formals, body, frame)
